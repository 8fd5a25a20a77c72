from collections import Counter
from itertools import islice
from random import Random

import pytest

from quick_sort import PivotType
from sorting_algorithms.sorting_algorithms import sorting_algorithms


def test_registry_holds_every_variant():
    assert len(sorting_algorithms) == 6
    assert len({algorithm.name for algorithm in sorting_algorithms}) == 6
    assert Counter(algorithm.pivot_type for algorithm in sorting_algorithms) == {pivot_type: 2 for pivot_type in PivotType}


@pytest.mark.parametrize("algorithm", sorting_algorithms, ids=lambda algorithm: algorithm.name)
@pytest.mark.parametrize("N", range(1, 7))
def test_sorts_every_permutation(algorithm, N):
    assert algorithm.total(N) == sum(1 for _ in algorithm.generator(N))
    for val_array in algorithm.generator(N):
        arr = list(val_array)
        algorithm.func(arr)
        assert algorithm.validator(arr), f"{val_array} -> {arr}"


@pytest.mark.parametrize("algorithm", sorting_algorithms, ids=lambda algorithm: algorithm.name)
def test_sorts_sampled_permutations(algorithm):
    N = algorithm.max_N + 20
    for val_array in islice(algorithm.sampler(N, Random(0)), 50):
        arr = list(val_array)
        algorithm.func(arr)
        assert algorithm.validator(arr)


@pytest.mark.parametrize("algorithm", sorting_algorithms, ids=lambda algorithm: algorithm.name)
def test_registered_functions_are_reproducible(algorithm):
    arr = [3, 0, 2, 1, 4, 2]
    first, second = list(arr), list(arr)
    algorithm.func(first)
    algorithm.func(second)
    assert first == second == [0, 1, 2, 2, 3, 4]


def test_validator_rejects_unsorted():
    algorithm = sorting_algorithms[0]
    assert algorithm.validator([0, 1, 2])
    assert not algorithm.validator([1, 0, 2])
