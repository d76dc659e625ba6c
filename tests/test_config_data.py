import math

import numpy as np
import pytest

from linreg.config import TrainingConfig
from linreg.data import DEFAULT_INPUTS, DEFAULT_OUTPUTS, load_csv


class TestTrainingConfig:
    def test_defaults(self):
        config = TrainingConfig()

        assert config.num_epochs == 10000
        assert config.learning_rate == 0.01
        assert (config.range_min, config.range_max, config.range_step) == (-10.0, 10.0, 1.0)
        assert config.seed is None

    @pytest.mark.parametrize("num_epochs", [-1, -100])
    def test_rejects_negative_epochs(self, num_epochs):
        with pytest.raises(ValueError):
            TrainingConfig(num_epochs=num_epochs)

    @pytest.mark.parametrize("learning_rate", [math.nan, math.inf])
    def test_rejects_non_finite_learning_rate(self, learning_rate):
        with pytest.raises(ValueError):
            TrainingConfig(learning_rate=learning_rate)

    def test_to_dict(self):
        assert TrainingConfig(num_epochs=5, seed=1).to_dict()["num_epochs"] == 5


def test_reference_data_lies_on_line():
    np.testing.assert_array_equal(DEFAULT_OUTPUTS, 10 * DEFAULT_INPUTS + 2)


class TestLoadCsv:
    def test_reads_columns(self, tmp_path):
        path = tmp_path / "pairs.csv"
        path.write_text("0,2\n1,12\n2.5,27\n")

        inputs, outputs = load_csv(path)

        np.testing.assert_array_equal(inputs, [0.0, 1.0, 2.5])
        np.testing.assert_array_equal(outputs, [2.0, 12.0, 27.0])
        assert inputs.flags.c_contiguous

    def test_skips_header(self, tmp_path):
        path = tmp_path / "pairs.csv"
        path.write_text("km,price\n1000,5000\n2000,4000\n")

        inputs, outputs = load_csv(path, skip_header=True)

        np.testing.assert_array_equal(inputs, [1000.0, 2000.0])
        np.testing.assert_array_equal(outputs, [5000.0, 4000.0])

    def test_single_row(self, tmp_path):
        path = tmp_path / "pairs.csv"
        path.write_text("3;4\n")

        inputs, outputs = load_csv(path, delimiter=";")

        assert inputs.shape == outputs.shape == (1,)

    def test_rejects_extra_columns(self, tmp_path):
        path = tmp_path / "pairs.csv"
        path.write_text("1,2,3\n4,5,6\n")

        with pytest.raises(ValueError):
            load_csv(path)
