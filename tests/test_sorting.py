import random
from itertools import permutations

import pytest

from pushswap.parsing import InputError, build_elements
from pushswap.sorting import (
    solve,
    sort_five_a,
    sort_five_b,
    sort_four_a,
    sort_four_b,
    sort_from_left,
    sort_from_right,
    sort_three_a,
    sort_three_b,
    sort_two_a,
    sort_two_b,
)
from pushswap.stacks import Element, Operation, Stack, Stacks


def _run(values, operations):
    stacks = Stacks(build_elements(values))
    for operation in operations:
        stacks.apply(operation)
    return stacks


def _values(stack):
    return [element.value for element in stack]


def _positions(stack):
    return [element.position for element in stack]


@pytest.mark.parametrize("size", range(0, 7))
def test_solve_sorts_every_small_permutation(size):
    for perm in permutations(range(size)):
        stacks = _run(perm, solve(perm))
        assert _values(stacks.a) == sorted(perm)
        assert len(stacks.b) == 0


@pytest.mark.parametrize("size", [7, 8, 9, 10, 11, 17, 25, 50, 100, 150])
def test_solve_sorts_random_inputs(size):
    rng = random.Random(size)
    for _ in range(5):
        values = rng.sample(range(-10_000, 10_000), size)
        stacks = _run(values, solve(values))
        assert _values(stacks.a) == sorted(values)
        assert len(stacks.b) == 0


def test_solve_sorted_input_needs_no_operations():
    assert solve([1, 2, 3, 4, 5, 6, 7, 8]) == []


def test_solve_two_reversed_is_a_single_swap():
    assert solve([2, 1]) == [Operation.SA]


def test_solve_rejects_duplicates():
    with pytest.raises(InputError):
        solve([4, 1, 4])


def test_sort_from_left_sorts_whole_stack():
    values = [5, 3, 9, 1, 7, 2, 8, 6, 4, 0]
    stacks = Stacks(build_elements(values))
    sort_from_left(stacks, 1, stacks.total)
    assert _values(stacks.a) == sorted(values)
    assert len(stacks.b) == 0


def _b_chunk_stacks(order, extra):
    stacks = Stacks()
    stacks.b = Stack(Element(p, p) for p in order)
    stacks.a = Stack(Element(p, p) for p in range(len(order) + 1, len(order) + 1 + extra))
    return stacks


@pytest.mark.parametrize("size", range(1, 8))
def test_sort_from_right_moves_chunk_to_a_in_order(size):
    for perm in permutations(range(1, size + 1)):
        stacks = _b_chunk_stacks(perm, 3)
        sort_from_right(stacks, 1, size)
        assert _positions(stacks.a) == list(range(1, size + 4))
        assert len(stacks.b) == 0


@pytest.mark.parametrize(
    "func,size", [(sort_two_a, 2), (sort_three_a, 3), (sort_four_a, 4), (sort_five_a, 5)]
)
@pytest.mark.parametrize("extra", [0, 2])
def test_small_sorts_on_a(func, size, extra):
    for perm in permutations(range(1, size + 1)):
        below = list(range(size + 1, size + 1 + extra))
        stacks = Stacks(Element(p, p) for p in list(perm) + below)
        func(stacks)
        assert _positions(stacks.a) == list(range(1, size + 1)) + below
        assert len(stacks.b) == 0


@pytest.mark.parametrize(
    "func,size", [(sort_two_b, 2), (sort_three_b, 3), (sort_four_b, 4), (sort_five_b, 5)]
)
@pytest.mark.parametrize("extra", [0, 2])
def test_small_sorts_on_b(func, size, extra):
    for perm in permutations(range(extra + 1, extra + size + 1)):
        stacks = Stacks()
        stacks.b = Stack(Element(p, p) for p in list(perm) + list(range(1, extra + 1)))
        func(stacks)
        assert _positions(stacks.a) == list(range(extra + 1, extra + size + 1))
        assert _positions(stacks.b) == list(range(1, extra + 1))


def test_sort_two_b_swaps_when_top_is_smaller():
    stacks = Stacks()
    stacks.b = Stack([Element(1, 1), Element(2, 2)])
    sort_two_b(stacks)
    assert stacks.history == [Operation.SB, Operation.PA, Operation.PA]