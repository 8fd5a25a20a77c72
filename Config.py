import logging
import os
from pathlib import Path

from quick_sort.PivotType import PivotType

# comma separated, e.g. QUICK_SORT_PIVOT_TYPES=first,random
STATISTICS_PIVOT_TYPES = [PivotType.parse(name) for name in os.environ.get("QUICK_SORT_PIVOT_TYPES", "first,middle,random").split(",")]
STATISTICS_NS = list(range(3, 10)) + list(range(10, 100, 10)) + list(range(100, 1000, 100))
SAMPLE_SEED = 2023
MAX_SAMPLE_TIME_MS = 2000
RESULT_PATH = Path("logs/statistics.csv")

LOG_LEVEL = logging.INFO
