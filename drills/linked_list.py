"""Singly linked list puzzles: cycles, merging, reversal, palindromes and sums."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node holding an integer value."""

    value: int
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        node: Optional[ListNode] = self
        seen: set[int] = set()
        while node is not None:
            if id(node) in seen:
                raise ValueError("list contains a cycle")
            seen.add(id(node))
            yield node
            node = node.next


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    return iter(head) if head is not None else iter(())


def from_iterable(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order; ``None`` when there are none."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[ListNode]) -> list[int]:
    """The values of the list in order; raises ValueError on a cycle."""
    return [node.value for node in _nodes(head)]


def _length(head: Optional[ListNode]) -> int:
    return sum(1 for _ in _nodes(head))


def delete_middle_by_length(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink the node at index ``len // 2``, locating it by first counting."""
    count = _length(head)
    if count < 2:
        return None
    before = head
    for _ in range(count // 2 - 1):
        before = before.next
    before.next = before.next.next
    return head


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink the node at index ``len // 2`` using slow and fast pointers."""
    if head is None or head.next is None:
        return None
    slow = fast = head
    previous = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        previous = slow
        slow = slow.next
    previous.next = slow.next
    return head


def _meeting_point(head: Optional[ListNode]) -> Optional[ListNode]:
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_cycle(head: Optional[ListNode]) -> bool:
    """Whether following ``next`` from ``head`` ever revisits a node."""
    return _meeting_point(head) is not None


def remove_cycle(head: Optional[ListNode]) -> bool:
    """Break a cycle, if any, at its last node; return whether one was found."""
    meeting = _meeting_point(head)
    if meeting is None:
        return False
    start = head
    probe = meeting
    while start is not probe:
        start = start.next
        probe = probe.next
    last = start
    while last.next is not start:
        last = last.next
    last.next = None
    return True


def intersection(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """The first node shared by both lists, or ``None`` if they never join."""
    len_first, len_second = _length(first), _length(second)
    longer, shorter = (first, second) if len_first > len_second else (second, first)
    for _ in range(abs(len_first - len_second)):
        longer = longer.next
    while longer is not None and shorter is not None:
        if longer is shorter:
            return longer
        longer = longer.next
        shorter = shorter.next
    return None


def merge_sorted(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two ascending lists into one; on ties the node from ``second`` goes first."""
    dummy = ListNode(0)
    tail = dummy
    while first is not None and second is not None:
        if first.value < second.value:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def middle(head: Optional[ListNode]) -> ListNode:
    """The middle node; for an even length, the second of the two middles."""
    if head is None:
        raise ValueError("empty list has no middle")
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def pairwise_swap(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap the values of each adjacent pair of nodes in place."""
    node = head
    while node is not None and node.next is not None:
        node.value, node.next.value = node.next.value, node.value
        node = node.next.next
    return head


def reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def _second_half(head: ListNode) -> Optional[ListNode]:
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    if fast is not None:
        slow = slow.next
    return slow


def is_palindrome_reversal(head: Optional[ListNode]) -> bool:
    """Palindrome check by reversing the second half; the list is restored."""
    if head is None or head.next is None:
        return True
    reversed_half = reverse(_second_half(head))
    result = True
    left, right = head, reversed_half
    while right is not None:
        if left.value != right.value:
            result = False
            break
        left, right = left.next, right.next
    reverse(reversed_half)
    return result


def is_palindrome_stack(head: Optional[ListNode]) -> bool:
    """Palindrome check by stacking the first half's values."""
    if head is None:
        return True
    stack: list[int] = []
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        stack.append(slow.value)
        slow = slow.next
    if fast is not None:
        slow = slow.next
    while stack and slow is not None:
        if stack.pop() != slow.value:
            return False
        slow = slow.next
    return True


def is_palindrome_recursive(head: Optional[ListNode]) -> bool:
    """Palindrome check walking a left pointer forward as recursion unwinds."""
    left = head

    def check(right: Optional[ListNode]) -> bool:
        nonlocal left
        if right is None:
            return True
        if not check(right.next):
            return False
        matches = left.value == right.value
        left = left.next
        return matches

    return check(head)


def remove_duplicates_naive(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values in place, comparing each node with all later ones."""
    current = head
    while current is not None:
        runner = current
        while runner.next is not None:
            if runner.next.value == current.value:
                runner.next = runner.next.next
            else:
                runner = runner.next
        current = current.next
    return head


def remove_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values in place, keeping first occurrences, using a set."""
    seen: set[int] = set()
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        if current.value in seen:
            previous.next = current.next
        else:
            seen.add(current.value)
            previous = current
        current = current.next
    return head


def kth_from_end(head: Optional[ListNode], k: int) -> ListNode:
    """The ``k``-th node counting from the end, where 1 is the last node."""
    if k < 1:
        raise ValueError("k must be at least 1")
    lead = head
    for _ in range(k):
        if lead is None:
            raise ValueError(f"list is shorter than {k}")
        lead = lead.next
    trail = head
    while lead is not None:
        lead = lead.next
        trail = trail.next
    return trail


def reverse_in_groups(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each run of ``k`` nodes, the final shorter run included."""
    if k <= 0:
        raise ValueError("group size must be positive")
    new_head: Optional[ListNode] = None
    previous_tail: Optional[ListNode] = None
    current = head
    while current is not None:
        group_head = current
        previous: Optional[ListNode] = None
        for _ in range(k):
            if current is None:
                break
            current.next, previous, current = previous, current, current.next
        if previous_tail is None:
            new_head = previous
        else:
            previous_tail.next = previous
        previous_tail = group_head
    return new_head


def _check_colors(head: Optional[ListNode]) -> None:
    for node in _nodes(head):
        if node.value not in (0, 1, 2):
            raise ValueError(f"value {node.value!r} is not 0, 1 or 2")


def sort_counting(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a list of 0s, 1s and 2s by counting and rewriting values in place."""
    _check_colors(head)
    counts = [0, 0, 0]
    for node in _nodes(head):
        counts[node.value] += 1
    values = iter([0] * counts[0] + [1] * counts[1] + [2] * counts[2])
    for node in _nodes(head):
        node.value = next(values)
    return head


def sort_one_pass(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a list of 0s, 1s and 2s by relinking its nodes in one traversal."""
    _check_colors(head)
    dummies = [ListNode(0), ListNode(1), ListNode(2)]
    tails = list(dummies)
    current = head
    while current is not None:
        following = current.next
        tails[current.value].next = current
        tails[current.value] = current
        current.next = None
        current = following
    tails[1].next = dummies[2].next
    tails[0].next = dummies[1].next if dummies[1].next is not None else dummies[2].next
    return dummies[0].next


def add_lists(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored least significant digit first, one digit per node."""
    if first is None:
        return second
    if second is None:
        return first
    dummy = ListNode(0)
    tail = dummy
    carry = 0
    while first is not None or second is not None:
        total = carry
        if first is not None:
            total += first.value
            first = first.next
        if second is not None:
            total += second.value
            second = second.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next