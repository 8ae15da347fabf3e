"""Configuration constants for sortkit."""

import os

# Version
VERSION = "0.3.0"

# Sort program defaults
DEFAULT_COUNT = 16
DEFAULT_ELEMENT_BITS = 16

# Unsigned widths the generator can draw from
SUPPORTED_ELEMENT_BITS = [8, 16, 32, 64]

# Benchmark settings
BENCHMARK_SIZES = [50, 100, 200, 400, 800]
BENCHMARK_ITERATIONS = 5
BENCHMARK_SEED = 42
SIGNIFICANCE_RUNS = 10

# Environment
TRACE_ENV_VAR = "SORTKIT_TRACE"


def trace_enabled() -> bool:
    """True when SORTKIT_TRACE asks for the event trace on stderr."""
    value = os.environ.get(TRACE_ENV_VAR, "")
    return value.strip().lower() in ("1", "true", "yes", "on")

