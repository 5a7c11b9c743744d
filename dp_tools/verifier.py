import numpy as np

from dp_tools.zero_square import EMPTY_SQUARE, SquareResult, ZeroSquareBase


class SquareVerifier(ZeroSquareBase):
    def all_zero(self, matrix, row, col, size):
        return not np.any(matrix[row:row + size, col:col + size])

    def find_square(self, matrix, size):
        m, n = matrix.shape
        for i in range(m - size + 1):
            for j in range(n - size + 1):
                if self.all_zero(matrix, i, j, size):
                    return i, j
        return None

    def brute_force(self, grid):
        matrix = self.as_grid(grid)
        if matrix is None:
            return EMPTY_SQUARE
        best = EMPTY_SQUARE
        for size in range(1, min(matrix.shape) + 1):
            pos = self.find_square(matrix, size)
            if pos is None:
                break
            best = SquareResult(size, *pos)
        return best

    def verify(self, grid, result):
        matrix = self.as_grid(grid)
        if matrix is None:
            return result.size == 0
        m, n = matrix.shape
        if result.size < 0:
            return False
        if result.size > 0:
            if result.row < 0 or result.col < 0:
                return False
            if result.row + result.size > m or result.col + result.size > n:
                return False
            if not self.all_zero(matrix, result.row, result.col, result.size):
                return False
        for size in range(result.size + 1, min(m, n) + 1):
            if self.find_square(matrix, size) is not None:
                return False
        return True


class SubstringVerifier:
    def __init__(self, weights, penalty):
        self.weights = weights
        self.penalty = penalty

    def run_score(self, text1, text2):
        total = 0.0
        for a, b in zip(text1, text2):
            if a.upper() == b.upper():
                total += self.weights.lookup(a)
            else:
                total -= self.penalty
        return total

    def brute_force(self, v, w):
        best = 0.0
        for i in range(len(v)):
            for j in range(len(w)):
                for length in range(1, min(len(v) - i, len(w) - j) + 1):
                    best = max(best, self.run_score(v[i:i + length], w[j:j + length]))
        return best

    def verify(self, v, w, result):
        if result.length == 0:
            return result.score == 0 and self.brute_force(v, w) <= 0
        if result.text1 != v[result.start1:result.start1 + result.length]:
            return False
        if result.text2 != w[result.start2:result.start2 + result.length]:
            return False
        if not np.isclose(result.score, self.run_score(result.text1, result.text2)):
            return False
        return not self.brute_force(v, w) > result.score + 1e-9


def brute_force_square(grid):
    return SquareVerifier().brute_force(grid)


def verify_square(grid, result):
    return SquareVerifier().verify(grid, result)


def run_score(text1, text2, weights, penalty):
    return SubstringVerifier(weights, penalty).run_score(text1, text2)


def brute_force_substring(v, w, weights, penalty):
    return SubstringVerifier(weights, penalty).brute_force(v, w)


def verify_substring(v, w, weights, penalty, result):
    return SubstringVerifier(weights, penalty).verify(v, w, result)
