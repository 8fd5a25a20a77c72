import logging
from collections.abc import Iterable, Sequence
from functools import cmp_to_key
from itertools import product
from math import factorial, log2, nan
from multiprocessing import Pool
from random import Random
from time import thread_time
from typing import NamedTuple, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from Config import *
from quick_sort import PivotType
from sorting_algorithms.SortingAlgorithm import SortingAlgorithm
from sorting_algorithms.sorting_algorithms import sorting_algorithms

logger = logging.getLogger(__name__)

COLUMNS = ["name", "N", "lower bound", "best", "worst", "avg", "ratio"]


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str, arr: Sequence[int]) -> None:
        super().__init__(f"Invalid sorting algorithm {name}: output {list(arr)} is not sorted")


class IdxVal(NamedTuple):
    idx: int
    val: int


def get_operation_cnts(algorithm: SortingAlgorithm, N: int, rng: Optional[Random] = None) -> np.ndarray:
    """Count the element comparisons `algorithm` makes on every permutation of range(N).

    Above algorithm.max_N the permutations are sampled until MAX_SAMPLE_TIME_MS of
    thread time is used. Comparing an element with itself and repeating the
    comparison just made are not counted since neither tells the algorithm anything.
    """

    def cmp(x: IdxVal, y: IdxVal) -> int:
        if x.idx == y.idx:
            return 0
        nonlocal operation_cnt, last_cmp
        if (cur_cmp := (min(x.idx, y.idx), max(x.idx, y.idx))) != last_cmp:
            last_cmp = cur_cmp
            operation_cnt += 1
        return x.val - y.val

    key = cmp_to_key(cmp)

    do_sample = N > algorithm.max_N
    if do_sample:
        start_time = thread_time()
        val_arrays = algorithm.sampler(N, rng if rng is not None else Random(SAMPLE_SEED))
    else:
        val_arrays = algorithm.generator(N)
    operation_cnts = []
    for val_array in val_arrays:
        arr = [key(IdxVal(i, x)) for i, x in enumerate(val_array)]
        last_cmp: Optional[tuple[int, int]] = None
        operation_cnt = 0
        algorithm.func(arr)
        if not algorithm.validator(x.obj.val for x in arr):
            raise InvalidSortingAlgorithmError(algorithm.name, [x.obj.val for x in arr])
        operation_cnts.append(operation_cnt)
        if do_sample and int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
            break
    return np.array(operation_cnts, dtype=np.int64)


def summarize(algorithm: SortingAlgorithm, N: int, operation_cnts: np.ndarray) -> dict:
    lower_bound = log2(factorial(N))
    avg = float(operation_cnts.mean())
    return {
        "name": algorithm.name,
        "N": N,
        "lower bound": lower_bound,
        "best": int(operation_cnts.min()),
        "worst": int(operation_cnts.max()),
        "avg": avg,
        "ratio": avg / lower_bound if lower_bound > 0 else nan,
    }


def _work(args: tuple[int, int]) -> dict:
    algorithm_idx, N = args
    algorithm = sorting_algorithms[algorithm_idx]
    return summarize(algorithm, N, get_operation_cnts(algorithm, N))


def generate_statistics(Ns: Iterable[int], pivot_types: Iterable[PivotType] = tuple(PivotType), processes: Optional[int] = None) -> pd.DataFrame:
    pivot_types = set(pivot_types)
    algorithm_idxs = [i for i, algorithm in enumerate(sorting_algorithms) if algorithm.pivot_type in pivot_types]
    tasks = list(product(algorithm_idxs, Ns))
    logger.info("measuring %d algorithms over %d tasks", len(algorithm_idxs), len(tasks))
    if processes == 1:
        rows = list(tqdm(map(_work, tasks), total=len(tasks)))
    else:
        with Pool(processes) as pool:
            rows = list(tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)))
    df = pd.DataFrame(rows, columns=COLUMNS)
    return df.sort_values(["name", "N"], ignore_index=True)


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    df = generate_statistics(STATISTICS_NS, STATISTICS_PIVOT_TYPES)
    RESULT_PATH.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(RESULT_PATH, index=False)
    logger.info("wrote %d rows to %s", len(df), RESULT_PATH)
