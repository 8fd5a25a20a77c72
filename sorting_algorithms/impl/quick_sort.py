from random import Random

from Config import SAMPLE_SEED
from quick_sort import PivotType, sort

from ..SortingAlgorithm import SortingAlgorithm


def quick_sort(pivot_type: PivotType):
    def impl(arr: list) -> None:
        sort(pivot_type, arr, Random(SAMPLE_SEED))

    impl.__name__ = f"{pivot_type.value}_quick_sort"
    return impl


algorithms = [SortingAlgorithm(f"quick sort ({pivot_type.value} pivot)", quick_sort(pivot_type), 8, pivot_type=pivot_type) for pivot_type in PivotType]
