import numpy as np
import pytest

from linreg.data import DEFAULT_INPUTS, DEFAULT_OUTPUTS
from linreg.models import LinearRegression


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def reference_data():
    return DEFAULT_INPUTS.copy(), DEFAULT_OUTPUTS.copy()


@pytest.fixture
def model(reference_data):
    model = LinearRegression(rng=42)
    model.attach_training_data(*reference_data)
    return model


@pytest.fixture
def fitted_model(reference_data):
    """A model holding the exact solution y = 10x + 2 of the reference data."""
    model = LinearRegression(rng=0)
    model.attach_training_data(*reference_data)
    model.set_weights(bias=2.0, weight=10.0)
    return model
