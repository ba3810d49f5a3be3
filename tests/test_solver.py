from itertools import permutations

from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.solver import solve, sort_three, turk_sort
from pushswap.stacks import Operation, Stacks

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


def replay(values, operations):
    stacks = Stacks(values)
    for operation in operations:
        stacks.apply(operation)
    return stacks


def test_empty_and_single_need_nothing():
    assert solve([]) == []
    assert solve([42]) == []


def test_two_elements_swap():
    assert solve([2, 1]) == [Operation.SA]
    assert solve([1, 2]) == []


def test_sorted_input_needs_nothing():
    assert solve(list(range(50))) == []


def test_all_permutations_of_three_take_at_most_two():
    for perm in permutations([1, 2, 3]):
        ops = solve(list(perm))
        assert len(ops) <= 2
        assert list(replay(perm, ops).a) == [1, 2, 3]


def test_sort_three_in_place():
    stacks = Stacks([3, 1, 2])
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert not stacks.b


def test_sort_three_leaves_sorted_untouched():
    stacks = Stacks([1, 2, 3], record=True)
    sort_three(stacks)
    assert stacks.operations == []


def test_turk_sort_sorts_and_empties_b():
    values = [5, -3, 17, 0, 8, 2, -11, 4]
    stacks = Stacks(values)
    turk_sort(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_all_permutations_of_five():
    for perm in permutations([1, 2, 3, 4, 5]):
        result = replay(perm, solve(list(perm)))
        assert list(result.a) == [1, 2, 3, 4, 5]
        assert not result.b


@settings(max_examples=60, deadline=None)
@given(st.lists(INT32, unique=True, max_size=60))
def test_solution_sorts(values):
    result = replay(values, solve(values))
    assert list(result.a) == sorted(values)
    assert not result.b


@settings(max_examples=30, deadline=None)
@given(st.lists(INT32, unique=True, min_size=4, max_size=40))
def test_solution_uses_only_known_operations(values):
    assert all(isinstance(op, Operation) for op in solve(values))
    assert len(replay(values, solve(values)).a) == len(values)