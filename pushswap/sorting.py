"""Sorting strategies that turn stack ``a`` into ascending order."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterable, Sequence

from pushswap.stack import Operation, PushSwap

_SMALL_CHUNK = 15
_LARGE_CHUNK = 30
_SMALL_LIMIT = 100


def is_sorted(values: Iterable[int]) -> bool:
    """Tell whether there are at least two values and they never decrease.

    Fewer than two values never count as sorted.
    """
    items = list(values)
    if len(items) < 2:
        return False
    return all(left <= right for left, right in zip(items, items[1:]))


def median(values: Iterable[int]) -> int:
    """Return the middle element, ``sorted(values)[len // 2]``."""
    items = sorted(values)
    if not items:
        raise ValueError("median of an empty sequence")
    return items[len(items) // 2]


def assign_indexes(values: Iterable[int]) -> list[int]:
    """Give each value its position in the sorted order.

    Equal values share the position of the first of them.
    """
    items = list(values)
    order = sorted(items)
    return [bisect_left(order, value) for value in items]


def closer_from_bottom(indexes: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` is strictly nearer the bottom of the stack than its top."""
    if target not in indexes:
        raise ValueError(f"{target} is not on the stack")
    first = list(indexes).index(target)
    last = len(indexes) - 1 - list(reversed(indexes)).index(target)
    return len(indexes) - last < first


def sort_three(stacks: PushSwap) -> None:
    """Sort stack ``a`` holding two or three values, using only ``a``."""
    a = stacks.a
    if not 2 <= len(a) <= 3:
        raise ValueError("sort_three needs two or three values on stack a")
    largest = max(a)
    while not is_sorted(a):
        if a[0] == largest:
            stacks.ra()
            if a[0] > a[1]:
                stacks.sa()
        elif a[2] == largest:
            stacks.sa()
        else:
            stacks.rra()
            if a[0] > a[1]:
                stacks.sa()


def _bring_to_top(stacks: PushSwap, pick: Callable[[Iterable[int]], int]) -> None:
    a = stacks.a
    while a[0] != pick(a):
        target = pick(a)
        if a[1] != target and a[2] != target:
            stacks.rra()
        else:
            stacks.ra()


def _sort_four_or_five(stacks: PushSwap, size: int) -> None:
    if size == 5:
        _bring_to_top(stacks, min)
        stacks.pb()
    _bring_to_top(stacks, max)
    stacks.pb()
    while len(stacks.a) != 3:
        stacks.pb()
    sort_three(stacks)
    stacks.pa()
    stacks.ra()
    if size == 5:
        stacks.pa()
    if not is_sorted(stacks.a):
        stacks.ra()


def mini_sort(stacks: PushSwap, size: int) -> None:
    """Sort an unsorted stack ``a`` of two to five values."""
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size in (4, 5):
        _sort_four_or_five(stacks, size)
    else:
        raise ValueError(f"mini_sort handles two to five values, not {size}")


def _push_back_largest(stacks: PushSwap, rank: dict[int, int]) -> None:
    while stacks.b:
        indexes = [rank[value] for value in stacks.b]
        largest = max(indexes)
        if indexes[0] == largest:
            stacks.pa()
        elif closer_from_bottom(indexes, largest):
            stacks.rrb()
        else:
            stacks.rb()


def long_sort(stacks: PushSwap) -> None:
    """Sort stack ``a`` by pushing it to ``b`` in chunks, then pulling the largest back."""
    rank = dict(zip(stacks.a, assign_indexes(stacks.a)))
    chunk = _SMALL_CHUNK if len(stacks.a) <= _SMALL_LIMIT else _LARGE_CHUNK
    pushed = 0
    while stacks.a:
        index = rank[stacks.a[0]]
        if pushed > 1 and index <= pushed:
            stacks.pb()
            pushed += 1
            stacks.rb()
        elif index <= pushed + chunk:
            stacks.pb()
            pushed += 1
        else:
            stacks.ra()
    _push_back_largest(stacks, rank)


def push_swap(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` on stack ``a``.

    Nothing is done for fewer than two values or for values already sorted.
    """
    stacks = PushSwap(values)
    size = len(stacks.a)
    if size < 2 or is_sorted(stacks.a):
        return []
    if size < 6:
        mini_sort(stacks, size)
    else:
        long_sort(stacks)
    return list(stacks.operations)