"""Chunked three-way sort of stack A using stack B, with hand-tuned small cases."""

from __future__ import annotations

from itertools import cycle, islice
from typing import Iterable

from pushswap.parsing import build_elements
from pushswap.stacks import Element, Operation, Stack, Stacks


def _second(stack: Stack) -> Element:
    """The element below the top; on a one-element ring that is the top itself."""
    return next(islice(cycle(stack), 1, None))


def _third_size(size: int) -> int:
    third = size // 3
    if size % 3 == 2:
        third += 1
    return third


def sort_from_left(stacks: Stacks, low: int, high: int) -> None:
    """Sort ranks ``low..high``, which lie on top of A, in place on A."""
    size = high - low + 1
    if stacks.a.is_ascending(size):
        return
    if size > 5:
        _thirds_right(stacks, low, high, size)
    elif size == 5:
        sort_five_a(stacks)
    elif size == 4:
        sort_four_a(stacks)
    elif size == 3:
        sort_three_a(stacks)
    elif size == 2:
        sort_two_a(stacks)


def _thirds_right(stacks: Stacks, low: int, high: int, size: int) -> None:
    third = _third_size(size)
    lower_limit = low + third
    upper_limit = low + 2 * third
    handled = 0
    while handled < size:
        handled += 1
        position = stacks.a.top().position
        if position < lower_limit:
            if _second(stacks.a).position >= upper_limit and handled < size:
                stacks.pb().rr()
                handled += 1
            else:
                stacks.pb().rb()
        elif position < upper_limit:
            stacks.pb()
        else:
            stacks.ra()
    _sort_back_left(stacks, low, high, third)


def _sort_back_left(stacks: Stacks, low: int, high: int, third: int) -> None:
    top_count = high - low + 1 - 2 * third
    if len(stacks.a) > top_count:
        stacks.reverse_rotate_times(top_count, False)
    sort_from_left(stacks, low + 2 * third, high)
    sort_from_right(stacks, low + third, low + 2 * third - 1)
    if len(stacks.b) > third:
        stacks.reverse_rotate_times(third, True)
    sort_from_right(stacks, low, low + third - 1)


def sort_from_right(stacks: Stacks, low: int, high: int) -> None:
    """Move ranks ``low..high`` from the top of B onto A in ascending order."""
    size = high - low + 1
    if stacks.b.is_descending(size):
        stacks.push_times(size, False)
        return
    if size > 5:
        _thirds_left(stacks, low, high, size)
    elif size == 5:
        sort_five_b(stacks)
    elif size == 4:
        sort_four_b(stacks)
    elif size == 3:
        sort_three_b(stacks)
    elif size == 2:
        sort_two_b(stacks)
    elif size == 1:
        stacks.pa()


def _thirds_left(stacks: Stacks, low: int, high: int, size: int) -> None:
    third = _third_size(size)
    lower_limit = low + third
    upper_limit = low + 2 * third
    handled = 0
    while handled < size:
        handled += 1
        position = stacks.b.top().position
        if position < lower_limit:
            stacks.rb()
        elif position < upper_limit:
            if _second(stacks.b).position < lower_limit and handled < size:
                stacks.pa().rr()
                handled += 1
            else:
                stacks.pa().ra()
        else:
            stacks.pa()
    _sort_back_right(stacks, low, high, third)


def _sort_back_right(stacks: Stacks, low: int, high: int, third: int) -> None:
    sort_from_left(stacks, low + 2 * third, high)
    if len(stacks.a) > third:
        stacks.reverse_rotate_times(third, False)
    sort_from_left(stacks, low + third, low + 2 * third - 1)
    if len(stacks.b) > third:
        stacks.reverse_rotate_times(third, True)
    sort_from_right(stacks, low, low + third - 1)


def sort_two_a(stacks: Stacks) -> None:
    """Order the two top elements of A ascending."""
    if stacks.a.top().position > _second(stacks.a).position:
        stacks.sa()


def sort_three_a(stacks: Stacks) -> None:
    """Order the three top elements of A ascending."""
    biggest = stacks.a.biggest_index(3)
    whole = len(stacks.a) == 3
    if whole and biggest == 1:
        stacks.ra()
    elif biggest == 1:
        stacks.sa().ra().sa().rra()
    elif whole and biggest == 2:
        stacks.rra()
    elif biggest == 2:
        stacks.ra().sa().rra()
    sort_two_a(stacks)


def sort_four_a(stacks: Stacks) -> None:
    """Order the four top elements of A ascending."""
    biggest = stacks.a.biggest_index(4)
    if biggest == 4:
        sort_three_a(stacks)
    elif len(stacks.a) == 4:
        if biggest == 1:
            stacks.ra()
        elif biggest == 2:
            stacks.ra().ra()
        elif biggest == 3:
            stacks.rra()
        sort_three_a(stacks)
    elif biggest == 3:
        stacks.pb().pb().sa().pb()
        sort_three_b(stacks)
    elif biggest == 2:
        stacks.pb().sa().pb().sa().pb()
        sort_three_b(stacks)
    else:
        stacks.ra().pb().pb().pb().rra()
        sort_three_b(stacks)


def sort_five_a(stacks: Stacks) -> None:
    """Order the five top elements of A ascending."""
    biggest = stacks.a.biggest_index(5)
    if biggest == 5:
        sort_four_a(stacks)
    elif len(stacks.a) == 5:
        if biggest == 4:
            stacks.rra()
        elif biggest == 3:
            stacks.rra().rra()
        elif biggest == 2:
            stacks.ra().ra()
        else:
            stacks.ra()
        sort_four_a(stacks)
    elif biggest == 4:
        stacks.pb().pb().pb().sa().pb()
        sort_four_b(stacks)
    elif biggest == 3:
        stacks.pb().pb().sa().pb().sa().pb()
        sort_four_b(stacks)
    elif biggest == 2:
        stacks.pb().ra().pb().pb().pb().rra()
        sort_four_b(stacks)
    else:
        stacks.ra().pb().pb().pb().pb().rra()
        sort_four_b(stacks)


def sort_two_b(stacks: Stacks) -> None:
    """Move the two top elements of B onto A in ascending order."""
    if stacks.b.top().position < _second(stacks.b).position:
        stacks.sb()
    stacks.pa().pa()


def sort_three_b(stacks: Stacks) -> None:
    """Move the three top elements of B onto A in ascending order."""
    biggest = stacks.b.biggest_index(3)
    if biggest == 1:
        stacks.pa()
    elif biggest == 2:
        stacks.sb().pa()
    elif len(stacks.b) == 3:
        stacks.rrb().pa()
    else:
        stacks.rb().sb().pa().rrb()
    sort_two_b(stacks)


def sort_four_b(stacks: Stacks) -> None:
    """Move the four top elements of B onto A in ascending order."""
    biggest = stacks.b.biggest_index(4)
    if biggest == 1:
        stacks.pa()
    elif biggest == 2:
        stacks.sb().pa()
    elif len(stacks.b) == 4:
        if biggest == 3:
            stacks.rb().sb().pa()
        else:
            stacks.rrb().pa()
    elif biggest == 3:
        stacks.rb().sb().pa().rrb()
    else:
        stacks.rb().rb().sb().pa().rrb().rrb()
    sort_three_b(stacks)


def sort_five_b(stacks: Stacks) -> None:
    """Move the five top elements of B onto A in ascending order."""
    biggest = stacks.b.biggest_index(5)
    if biggest == 1:
        stacks.pa()
    elif biggest == 2:
        stacks.sb().pa()
    elif len(stacks.b) == 5:
        if biggest == 3:
            stacks.rb().rb().pa()
        elif biggest == 4:
            stacks.rrb().rrb().pa()
        else:
            stacks.rrb().pa()
    elif biggest == 3:
        stacks.rb().sb().pa().rrb()
    elif biggest == 4:
        stacks.rb().rb().sb().pa().rrb().rrb()
    else:
        stacks.rb().rb().rb().sb().pa().rrb().rrb().rrb()
    sort_four_b(stacks)


def solve(values: Iterable[int]) -> list[Operation]:
    """The operations that sort ``values`` on stack A, leaving B empty."""
    stacks = Stacks(build_elements(values))
    if stacks.total:
        sort_from_left(stacks, 1, stacks.total)
    return list(stacks.history)