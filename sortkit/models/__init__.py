# Module: models
# Depends on: (none, leaf module)
#
# Shared data contracts used across the sorter, generator and metrics.

from sortkit.models.types import (
    Algorithm,
    ALGORITHM_ALIASES,
    SortStats,
    BenchmarkPoint,
    VerificationResult,
    AlgorithmProfile,
)
from sortkit.models.events import SortEvent, EventType, EventEmitter, print_to_stderr
