from enum import Enum
from random import Random

from .InvalidArgumentError import InvalidArgumentError


class PivotType(Enum):
    FIRST = "first"
    MIDDLE = "middle"
    RANDOM = "random"

    @classmethod
    def parse(cls, name: str) -> "PivotType":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise InvalidArgumentError(f"unknown pivot type {name!r}") from None


def select_offset(pivot_type: PivotType, length: int, rng: Random) -> int:
    """Pick the pivot position relative to the start of a sub-range of `length` elements."""
    if length < 1:
        raise InvalidArgumentError(f"cannot select a pivot from {length} elements")
    if pivot_type is PivotType.RANDOM:
        return rng.randrange(length)
    if pivot_type is PivotType.FIRST:
        return 0
    if pivot_type is PivotType.MIDDLE:
        return length // 2
    raise InvalidArgumentError(f"{pivot_type!r} is not a PivotType")
