import math
import time
from dataclasses import dataclass

import numpy as np
import psutil

from dp_tools.logging_config import get_logger

logger = get_logger(__name__)

MB = 1024.0 * 1024.0


@dataclass(frozen=True)
class TrialMeasurement:
    elapsed_ms: float
    memory_mb: float


def process_memory():
    try:
        return psutil.Process().memory_info().rss
    except (psutil.Error, OSError) as e:
        logger.warning("Unable to read process memory: %s", e)
        return None


def measure(func, *args, **kwargs):
    mem_before = process_memory()
    start = time.perf_counter()
    result = func(*args, **kwargs)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    mem_after = process_memory()
    if mem_before is None or mem_after is None:
        memory_mb = math.nan
    else:
        memory_mb = (mem_after - mem_before) / MB
    return result, TrialMeasurement(elapsed_ms, memory_mb)


def matrix_memory_bytes(m, n):
    # uint8 input grid plus int32 DP table
    return m * n * (np.dtype(np.uint8).itemsize + np.dtype(np.int32).itemsize)


def substring_memory_bytes(m, n):
    # float score table plus int32 length table, both (m+1)x(n+1)
    cells = (m + 1) * (n + 1)
    return m + n + cells * (np.dtype(float).itemsize + np.dtype(np.int32).itemsize)
