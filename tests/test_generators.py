import numpy as np
import pytest

from dp_tools.errors import InvalidConfigurationError
from dp_tools.generators import random_grid, random_string


class TestRandomGrid:
    def test_shape_and_values(self):
        grid = random_grid(7, 9, seed=1)
        assert grid.shape == (7, 9)
        assert grid.dtype == np.uint8
        assert set(np.unique(grid)) <= {0, 1}

    def test_seed_is_reproducible(self):
        assert np.array_equal(random_grid(20, 20, seed=42), random_grid(20, 20, seed=42))

    def test_shared_generator_advances(self):
        rng = np.random.default_rng(3)
        assert not np.array_equal(random_grid(20, 20, rng=rng), random_grid(20, 20, rng=rng))

    def test_probability_extremes(self):
        assert not random_grid(5, 5, 1.0, seed=0).any()
        assert random_grid(5, 5, 0.0, seed=0).all()

    def test_zero_sized(self):
        assert random_grid(0, 4, seed=0).shape == (0, 4)

    @pytest.mark.parametrize("rows,cols,p", [(-1, 2, 0.5), (2, -1, 0.5), (2, 2, 1.5), (2, 2, -0.1)])
    def test_invalid_parameters(self, rows, cols, p):
        with pytest.raises(InvalidConfigurationError):
            random_grid(rows, cols, p)


class TestRandomString:
    def test_length_and_alphabet(self):
        text = random_string(200, seed=5)
        assert len(text) == 200
        assert set(text) <= set("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

    def test_custom_alphabet(self):
        assert set(random_string(100, seed=5, alphabet="AC")) <= {"A", "C"}

    def test_seed_is_reproducible(self):
        assert random_string(50, seed=9) == random_string(50, seed=9)

    def test_empty(self):
        assert random_string(0, seed=1) == ""

    def test_invalid(self):
        with pytest.raises(InvalidConfigurationError):
            random_string(-1)
        with pytest.raises(InvalidConfigurationError):
            random_string(3, alphabet="")
