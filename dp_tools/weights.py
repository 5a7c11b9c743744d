import math
import string

from dp_tools.errors import InvalidConfigurationError, UnknownSymbolError

ALPHABET = string.ascii_uppercase

# Letter frequencies in English text, in percent
ENGLISH_FREQ = dict(zip(ALPHABET, [
    8.167, 1.492, 2.782, 4.253, 12.702, 2.228, 2.015, 6.094, 6.966, 0.153,
    0.772, 4.025, 2.406, 6.749, 7.507, 1.929, 0.095, 5.987, 6.327, 9.056,
    2.758, 0.978, 2.360, 0.150, 1.974, 0.074,
]))

UNIFORM_SCENARIO = 1
PROPORTIONAL_SCENARIO = 2


class WeightTable:
    """Case-insensitive mapping from symbol to match weight.

    Symbols are folded to upper case on construction and on lookup, so
    ``table['e']`` and ``table['E']`` return the same weight. All weights must
    be finite and strictly positive.
    """

    def __init__(self, weights):
        self._weights = {}
        for symbol, weight in weights.items():
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise InvalidConfigurationError(f"Weight table keys must be single characters, got {symbol!r}")
            weight = float(weight)
            if not math.isfinite(weight) or weight <= 0:
                raise InvalidConfigurationError(f"Weight for {symbol!r} must be positive, got {weight}")
            key = symbol.upper()
            if key in self._weights and self._weights[key] != weight:
                raise InvalidConfigurationError(f"Conflicting weights for {key!r} after case folding")
            self._weights[key] = weight

    @classmethod
    def uniform(cls, weight=1.0, alphabet=ALPHABET):
        return cls({symbol: weight for symbol in alphabet})

    @classmethod
    def proportional(cls, min_weight=1.0, max_weight=10.0, frequencies=None):
        frequencies = ENGLISH_FREQ if frequencies is None else frequencies
        if not frequencies:
            raise InvalidConfigurationError("Frequency table is empty")
        if not (0 < min_weight <= max_weight) or not math.isfinite(max_weight):
            raise InvalidConfigurationError(
                f"Weight range must satisfy 0 < min <= max, got [{min_weight}, {max_weight}]")
        min_freq = min(frequencies.values())
        max_freq = max(frequencies.values())
        if max_freq == min_freq:
            return cls({symbol: min_weight for symbol in frequencies})
        scale = (max_weight - min_weight) / (max_freq - min_freq)
        return cls({symbol: min_weight + (freq - min_freq) * scale
                    for symbol, freq in frequencies.items()})

    @classmethod
    def from_scenario(cls, scenario, min_weight=1.0, max_weight=10.0):
        if scenario == UNIFORM_SCENARIO:
            return cls.uniform()
        if scenario == PROPORTIONAL_SCENARIO:
            return cls.proportional(min_weight, max_weight)
        raise InvalidConfigurationError(f"Unknown scenario {scenario}; expected 1 (uniform) or 2 (proportional)")

    def lookup(self, symbol):
        try:
            return self._weights[symbol.upper()]
        except KeyError:
            raise UnknownSymbolError(symbol) from None

    def __getitem__(self, symbol):
        return self.lookup(symbol)

    def __contains__(self, symbol):
        return isinstance(symbol, str) and symbol.upper() in self._weights

    def __len__(self):
        return len(self._weights)

    def __eq__(self, other):
        if not isinstance(other, WeightTable):
            return NotImplemented
        return self._weights == other._weights

    def __repr__(self):
        return f"WeightTable({self._weights!r})"

    def items(self):
        return sorted(self._weights.items())

    def missing(self, text):
        return {ch for ch in text if ch not in self}

    def validate(self, text):
        for ch in text:
            if ch not in self:
                raise UnknownSymbolError(ch)
