import math
from dataclasses import dataclass

import numpy as np

from dp_tools.errors import ComputationCancelled, InvalidConfigurationError
from dp_tools.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SubstringResult:
    score: float
    start1: int
    start2: int
    length: int
    text1: str
    text2: str

    def __str__(self):
        return (f"Score: {self.score:.2f}\n"
                f"Position in string1: {self.start1}\n"
                f"Position in string2: {self.start2}\n"
                f"Length: {self.length}\n"
                f"Substring1: {self.text1}\n"
                f"Substring2: {self.text2}")


EMPTY_MATCH = SubstringResult(0.0, -1, -1, 0, "", "")


class SubstringBase:
    def __init__(self, weights, penalty):
        penalty = float(penalty)
        if not math.isfinite(penalty) or penalty < 0:
            raise InvalidConfigurationError(f"Penalty must be a non-negative number, got {penalty}")
        self.weights = weights
        self.penalty = penalty

    def fold(self, text):
        return [ch.upper() for ch in text]

    def delta(self, a, b, weight):
        return weight if a == b else -self.penalty

    def extract(self, v, w, i, j, length, score):
        if length == 0:
            return EMPTY_MATCH
        start1, start2 = i - length, j - length
        return SubstringResult(score, start1, start2, length, v[start1:i], w[start2:j])


class WeightedSubstringMatcher(SubstringBase):
    def run(self, v, w, cancel=None):
        self.weights.validate(v)
        self.weights.validate(w)
        n, m = len(v), len(w)
        fv, fw = self.fold(v), self.fold(w)
        weight_v = [self.weights.lookup(ch) for ch in v]
        s = np.zeros((n+1, m+1), dtype=float)
        length = np.zeros((n+1, m+1), dtype=np.int32)
        max_score, max_pos = 0.0, (0, 0)
        for i in range(1, n+1):
            if cancel is not None and cancel.is_set():
                raise ComputationCancelled(f"Cancelled before row {i}")
            for j in range(1, m+1):
                extended = s[i-1, j-1] + self.delta(fv[i-1], fw[j-1], weight_v[i-1])
                if extended > 0:
                    s[i, j] = extended
                    length[i, j] = length[i-1, j-1] + 1
                if s[i, j] > max_score:
                    max_score, max_pos = float(s[i, j]), (i, j)
        best_length = int(length[max_pos])
        logger.debug("Filled %dx%d substring table, best score %.3f ending at %s (length %d)",
                     n, m, max_score, max_pos, best_length)
        return self.extract(v, w, *max_pos, best_length, max_score)


def find_best_substring(v, w, weights, penalty, cancel=None):
    return WeightedSubstringMatcher(weights, penalty).run(v, w, cancel)
