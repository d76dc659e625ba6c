import numpy as np

from .base import Initializer


class RandomUniform(Initializer):
    def __init__(self, low: float = 0.0, high: float = 1.0) -> None:
        if not low < high:
            raise ValueError(f"low must be less than high, got [{low}, {high})")
        self.low = low
        self.high = high

    def __call__(self, rng: np.random.Generator) -> float:
        return float(rng.uniform(self.low, self.high))

    def get_config(self) -> dict:
        return super().get_config() | {"low": self.low, "high": self.high}


class Zeros(Initializer):
    def __call__(self, rng: np.random.Generator) -> float:
        return 0.0


class Constant(Initializer):
    def __init__(self, value: float = 0.0) -> None:
        self.value = float(value)

    def __call__(self, rng: np.random.Generator) -> float:
        return self.value

    def get_config(self) -> dict:
        return super().get_config() | {"value": self.value}
