# Module: core
# Depends on: models/
#
# The sorter, its input generator and renderer, plus verification and metrics.

from sortkit.core.sorter import Sorter, ALGORITHM_ROUTINES
from sortkit.core.generator import generate_random_ints
from sortkit.core.renderer import format_items, format_headline
from sortkit.core.verify import (
    is_sorted,
    is_permutation,
    first_violation,
    verify_sort,
    compare_outputs,
    cross_check,
)
