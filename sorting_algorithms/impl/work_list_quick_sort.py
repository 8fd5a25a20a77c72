from random import Random

from Config import SAMPLE_SEED
from quick_sort import PivotType, sort_iterative

from ..SortingAlgorithm import SortingAlgorithm


def work_list_quick_sort(pivot_type: PivotType):
    def impl(arr: list) -> None:
        sort_iterative(pivot_type, arr, Random(SAMPLE_SEED))

    impl.__name__ = f"{pivot_type.value}_work_list_quick_sort"
    return impl


algorithms = [SortingAlgorithm(f"work list quick sort ({pivot_type.value} pivot)", work_list_quick_sort(pivot_type), 8, pivot_type=pivot_type) for pivot_type in PivotType]
