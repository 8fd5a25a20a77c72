import logging
from collections.abc import MutableSequence
from random import Random
from typing import Any, Optional, TypeVar

from .InvalidArgumentError import InvalidArgumentError
from .PivotType import PivotType, select_offset

logger = logging.getLogger(__name__)

Container = TypeVar("Container", bound=MutableSequence)


def swap(arr: MutableSequence, i: int, j: int) -> None:
    arr[i], arr[j] = arr[j], arr[i]


def partition(arr: MutableSequence, start: int, finish: int, pivot: Any) -> tuple[int, int]:
    """Hoare partition of arr[start..finish] around the value `pivot`.

    Returns the cursors (s, f) once they have crossed: arr[start..f] holds
    nothing greater than the pivot and arr[s..finish] nothing less.
    The pivot must be a value present in the range, otherwise the scans run off its ends.
    """
    s, f = start, finish
    while s <= f:
        while arr[s] < pivot:
            s += 1
        while arr[f] > pivot:
            f -= 1
        if s <= f:
            swap(arr, s, f)
            s += 1
            f -= 1
    return s, f


def _sort_range(arr: MutableSequence, offset: int, start: int, finish: int, pivot_type: PivotType, rng: Random) -> None:
    s, f = partition(arr, start, finish, arr[start + offset])
    if start < f:
        _sort_range(arr, select_offset(pivot_type, f - start + 1, rng), start, f, pivot_type, rng)
    if s < finish:
        _sort_range(arr, select_offset(pivot_type, finish - s + 1, rng), s, finish, pivot_type, rng)


def _check_arguments(pivot_type: PivotType, arr: Optional[MutableSequence]) -> None:
    if arr is None:
        raise InvalidArgumentError("sequence is None")
    if len(arr) == 0:
        raise InvalidArgumentError("sequence is empty")
    if not isinstance(pivot_type, PivotType):
        raise InvalidArgumentError(f"{pivot_type!r} is not a PivotType")


def sort(pivot_type: PivotType, arr: Container, rng: Optional[Random] = None) -> Container:
    """Sort `arr` in place into non-decreasing order and return it.

    The pivot of every partition step is chosen by `pivot_type` from the
    current sub-range. `rng` only matters for PivotType.RANDOM; a fresh
    Random is used when it is omitted. Equal elements may be reordered.
    Recursion depth grows to len(arr) in the worst case, see sort_iterative.
    """
    _check_arguments(pivot_type, arr)
    if rng is None:
        rng = Random()
    logger.debug("sorting %d elements with %s pivot", len(arr), pivot_type.name)
    _sort_range(arr, select_offset(pivot_type, len(arr), rng), 0, len(arr) - 1, pivot_type, rng)
    return arr


def sort_iterative(pivot_type: PivotType, arr: Container, rng: Optional[Random] = None) -> Container:
    """Same as sort, but keeps pending sub-ranges on an explicit stack instead of recursing.

    Ranges are visited in the same order and pivots drawn in the same order
    as sort, so both give the same result for the same rng state.
    """
    _check_arguments(pivot_type, arr)
    if rng is None:
        rng = Random()
    logger.debug("sorting %d elements with %s pivot using a work list", len(arr), pivot_type.name)
    stack: list[tuple[int, int]] = [(0, len(arr) - 1)]
    while stack:
        start, finish = stack.pop()
        offset = select_offset(pivot_type, finish - start + 1, rng)
        s, f = partition(arr, start, finish, arr[start + offset])
        # right first so the left range is popped next
        if s < finish:
            stack.append((s, finish))
        if start < f:
            stack.append((start, f))
    return arr
