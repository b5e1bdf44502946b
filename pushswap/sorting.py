"""Sorting stack ``a`` with the quick-sort strategy over two stacks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

from pushswap.stacks import Stacks


def median_pivot(values: Sequence[int]) -> int:
    """Return the element at the middle index of ``values`` once sorted."""
    if not values:
        raise ValueError("cannot take the pivot of an empty sequence")
    ordered = sorted(values)
    return ordered[len(ordered) // 2]


def is_sorted(values: Iterable[int], descending: bool = False) -> bool:
    """True if ``values`` never step down (or never step up when ``descending``)."""
    for previous, current in pairwise(values):
        if descending and previous < current:
            return False
        if not descending and previous > current:
            return False
    return True


def _top_three_ascending(stack: Sequence[int]) -> bool:
    return stack[0] < stack[1] < stack[2]


def sort_three(stacks: Stacks) -> None:
    """Sort the three elements that make up stack ``a``."""
    a = stacks.a
    if a[0] > a[1]:
        if a[0] < a[2]:
            stacks.sa()
        elif a[1] > a[2]:
            stacks.sa()
            stacks.rra()
        else:
            stacks.ra()
    elif a[1] > a[2]:
        if a[0] < a[2]:
            stacks.sa()
            stacks.ra()
        else:
            stacks.rra()


def _small_sorted_a(stacks: Stacks, size: int) -> None:
    a = stacks.a
    while size != 3 or not _top_three_ascending(a):
        if size == 3 and a[0] > a[1] and a[2]:
            stacks.sa()
        elif size == 3 and not (a[2] > a[0] and a[2] > a[1]):
            stacks.pb()
            size -= 1
        elif a[0] > a[1]:
            stacks.sa()
        else:
            had_elements = size != 0
            size += 1
            if had_elements:
                stacks.pa()


def _sort_a_small(stacks: Stacks, size: int) -> None:
    if size == 3 and len(stacks.a) == 3:
        sort_three(stacks)
    elif size == 2 and stacks.a[0] > stacks.a[1]:
        stacks.sa()
    elif size == 3:
        _small_sorted_a(stacks, size)


def _small_sorted_b(stacks: Stacks, size: int) -> None:
    a, b = stacks.a, stacks.b
    while size > 0 or not _top_three_ascending(a):
        if size == 1 and a[0] > a[1]:
            stacks.sa()
        elif (
            size == 1
            or (size >= 2 and b[0] > b[1])
            or (size == 3 and b[0] > b[2])
        ):
            stacks.pa()
            size -= 1
        else:
            stacks.sb()


def _sort_b_small(stacks: Stacks, size: int) -> None:
    if size == 1:
        stacks.pa()
    elif size == 2:
        if stacks.b[0] < stacks.b[1]:
            stacks.sb()
        stacks.pa()
        stacks.pa()
    else:
        _small_sorted_b(stacks, size)


def quick_sort_a(stacks: Stacks, size: int, count: int = 0) -> bool:
    """Sort the top ``size`` elements of ``a`` in place, ascending."""
    if is_sorted(stacks.a[:size]):
        return True
    length = size
    if size <= 3:
        _sort_a_small(stacks, size)
        return True
    pivot = median_pivot(stacks.a[:size])
    upper_half = length // 2 + length % 2
    while size != upper_half:
        if stacks.a[0] < pivot:
            size -= 1
            stacks.pb()
        else:
            stacks.ra()
            count += 1
    while upper_half != len(stacks.a) and count > 0:
        count -= 1
        stacks.rra()
    return quick_sort_a(stacks, upper_half, 0) and quick_sort_b(
        stacks, length // 2, 0
    )


def quick_sort_b(stacks: Stacks, size: int, count: int = 0) -> bool:
    """Move the top ``size`` elements of ``b`` onto ``a`` in ascending order."""
    if not count and is_sorted(stacks.b[:size], descending=True):
        for _ in range(size):
            stacks.pa()
        size = -1
    if size <= 3:
        _sort_b_small(stacks, size)
        return True
    length = size
    pivot = median_pivot(stacks.b[:size])
    lower_half = length // 2
    while size != lower_half:
        if stacks.b[0] >= pivot:
            size -= 1
            stacks.pa()
        else:
            count += 1
            stacks.rb()
    while lower_half != len(stacks.b) and count > 0:
        count -= 1
        stacks.rrb()
    return quick_sort_a(stacks, length // 2 + length % 2, 0) and quick_sort_b(
        stacks, lower_half, 0
    )


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` ascending, recording the moves on ``stacks``."""
    size = len(stacks.a)
    if is_sorted(stacks.a):
        return
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    else:
        quick_sort_a(stacks, size, 0)


def solve(numbers: Iterable[int]) -> list[str]:
    """Return the moves that sort ``numbers`` on stack ``a``."""
    stacks = Stacks(numbers)
    sort_stacks(stacks)
    return list(stacks.moves)