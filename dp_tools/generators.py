import numpy as np

from dp_tools.errors import InvalidConfigurationError
from dp_tools.weights import ALPHABET


def make_rng(seed=None, rng=None):
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def random_grid(rows, cols, zero_probability=0.7, seed=None, rng=None):
    if rows < 0 or cols < 0:
        raise InvalidConfigurationError(f"Grid dimensions must be non-negative, got {rows}x{cols}")
    if not 0.0 <= zero_probability <= 1.0:
        raise InvalidConfigurationError(f"Zero probability must lie in [0, 1], got {zero_probability}")
    rng = make_rng(seed, rng)
    return (rng.random((rows, cols)) >= zero_probability).astype(np.uint8)


def random_string(length, seed=None, rng=None, alphabet=ALPHABET):
    if length < 0:
        raise InvalidConfigurationError(f"String length must be non-negative, got {length}")
    if not alphabet:
        raise InvalidConfigurationError("Alphabet is empty")
    rng = make_rng(seed, rng)
    symbols = list(alphabet)
    return ''.join(symbols[k] for k in rng.integers(0, len(symbols), size=length))
