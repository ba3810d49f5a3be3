"""Sorting stack ``a`` with a greedy cheapest-move strategy."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import deque
from collections.abc import Callable, Iterable

from .stacks import Operation, Stacks, is_sorted


def _sorted(stack: deque[int]) -> bool:
    return is_sorted(list(stack))


def _upper_half(index: int, size: int) -> bool:
    return index <= size // 2


def _cost(index: int, size: int) -> int:
    """Number of rotations needed to bring the element at ``index`` to the top."""
    return index if _upper_half(index, size) else size - index


def _bring_to_top(
    stack: deque[int],
    value: int,
    forward: Callable[[], None],
    backward: Callable[[], None],
) -> None:
    step = forward if _upper_half(stack.index(value), len(stack)) else backward
    while stack[0] != value:
        step()


def _target_in_b(value: int, ordered_b: list[int]) -> int:
    """Largest value of ``b`` below ``value``, or the largest of ``b``."""
    position = bisect_left(ordered_b, value)
    return ordered_b[position - 1] if position else ordered_b[-1]


def _target_in_a(value: int, ordered_a: list[int]) -> int:
    """Smallest value of ``a`` above ``value``, or the smallest of ``a``."""
    position = bisect_right(ordered_a, value)
    return ordered_a[position] if position < len(ordered_a) else ordered_a[0]


def _push_cheapest_to_b(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    ordered_b = sorted(b)
    a_index = {value: i for i, value in enumerate(a)}
    b_index = {value: i for i, value in enumerate(b)}
    targets = {value: _target_in_b(value, ordered_b) for value in a}

    def price(value: int) -> int:
        return _cost(a_index[value], len(a)) + _cost(
            b_index[targets[value]], len(b)
        )

    cheapest = min(a, key=price)
    target = targets[cheapest]
    a_up = _upper_half(a_index[cheapest], len(a))
    b_up = _upper_half(b_index[target], len(b))
    if a_up and b_up:
        while a[0] != cheapest and b[0] != target:
            stacks.rr()
    elif not a_up and not b_up:
        while a[0] != cheapest and b[0] != target:
            stacks.rrr()
    _bring_to_top(a, cheapest, stacks.ra, stacks.rra)
    _bring_to_top(b, target, stacks.rb, stacks.rrb)
    stacks.pb()


def _push_top_to_a(stacks: Stacks) -> None:
    target = _target_in_a(stacks.b[0], sorted(stacks.a))
    _bring_to_top(stacks.a, target, stacks.ra, stacks.rra)
    stacks.pa()


def sort_three(stacks: Stacks) -> None:
    """Sort stack ``a`` of three elements with at most two operations."""
    a = stacks.a
    if _sorted(a):
        return
    biggest = max(a)
    if a[0] == biggest:
        stacks.ra()
    elif a[1] == biggest:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def turk_sort(stacks: Stacks) -> None:
    """Sort stack ``a`` of more than three elements using stack ``b``."""
    remaining = len(stacks.a)
    for _ in range(2):
        if remaining > 3 and not _sorted(stacks.a):
            stacks.pb()
        remaining -= 1
    while remaining > 3 and not _sorted(stacks.a):
        _push_cheapest_to_b(stacks)
        remaining -= 1
    sort_three(stacks)
    while stacks.b:
        _push_top_to_a(stacks)
    if stacks.a:
        _bring_to_top(stacks.a, min(stacks.a), stacks.ra, stacks.rra)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` (top first) in ascending order."""
    stacks = Stacks(values, record=True)
    size = len(stacks.a)
    if size > 1 and not _sorted(stacks.a):
        if size == 2:
            stacks.sa()
        elif size == 3:
            sort_three(stacks)
        else:
            turk_sort(stacks)
    return list(stacks.operations)