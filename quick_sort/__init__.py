from .InvalidArgumentError import InvalidArgumentError
from .PivotType import PivotType, select_offset
from .quick_sort import partition, sort, sort_iterative, swap

__all__ = ["InvalidArgumentError", "PivotType", "partition", "select_offset", "sort", "sort_iterative", "swap"]
