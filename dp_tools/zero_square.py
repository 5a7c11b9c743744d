from dataclasses import dataclass

import numpy as np

from dp_tools.errors import ComputationCancelled, InvalidConfigurationError
from dp_tools.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SquareResult:
    size: int
    row: int
    col: int

    def cells(self):
        return [(i, j)
                for i in range(self.row, self.row + self.size)
                for j in range(self.col, self.col + self.size)]

    def contains(self, i, j):
        return (self.size > 0
                and self.row <= i < self.row + self.size
                and self.col <= j < self.col + self.size)

    def __str__(self):
        return f"Largest zero sub-matrix: {self.size}x{self.size} at position ({self.row}, {self.col})"


EMPTY_SQUARE = SquareResult(0, -1, -1)


class ZeroSquareBase:
    def as_grid(self, grid):
        try:
            matrix = np.asarray(grid)
        except ValueError as e:
            raise InvalidConfigurationError(f"Grid rows must all have the same length: {e}") from e
        if matrix.size == 0:
            return None
        if matrix.ndim != 2:
            raise InvalidConfigurationError(f"Grid must be 2-dimensional, got shape {matrix.shape}")
        return matrix

    def check_cancelled(self, cancel, row):
        if cancel is not None and cancel.is_set():
            raise ComputationCancelled(f"Cancelled before row {row}")


class ZeroSquareFinder(ZeroSquareBase):
    def run(self, grid, cancel=None):
        matrix = self.as_grid(grid)
        if matrix is None:
            return EMPTY_SQUARE
        m, n = matrix.shape
        empty = matrix == 0
        dp = np.zeros((m, n), dtype=np.int32)
        max_size, max_pos = 0, (-1, -1)
        # single row-major pass, strict '>' keeps the first maximal cell
        for i in range(m):
            self.check_cancelled(cancel, i)
            for j in range(n):
                if not empty[i, j]:
                    continue
                if i == 0 or j == 0:
                    dp[i, j] = 1
                else:
                    dp[i, j] = 1 + min(dp[i-1, j-1], dp[i-1, j], dp[i, j-1])
                if dp[i, j] > max_size:
                    max_size, max_pos = int(dp[i, j]), (i, j)
        logger.debug("Filled %dx%d square table, best size %d ending at %s", m, n, max_size, max_pos)
        if max_size == 0:
            return EMPTY_SQUARE
        i, j = max_pos
        return SquareResult(max_size, i - max_size + 1, j - max_size + 1)


def find_largest_zero_square(grid, cancel=None):
    return ZeroSquareFinder().run(grid, cancel)
