from __future__ import annotations

import numpy as np


class Metric:
    """
    Running mean of a per-sample error, accumulated over every
    ``update_state`` call since the last ``reset_states``.

    Subclasses set `NAME`, under which they are registered, and implement
    `sample_errors`.
    """

    NAME: str
    _registry: dict[str, type[Metric]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._registry[cls.NAME] = cls

    @classmethod
    def from_string(cls, name: str) -> Metric:
        key = name.strip().lower()
        if key not in cls._registry:
            raise ValueError(
                f"Unknown metric '{name}'. Available: {sorted(cls._registry)}"
            )
        return cls._registry[key]()

    def __init__(self):
        self.reset_states()

    @staticmethod
    def sample_errors(residuals: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def update_state(self, y_true, y_pred) -> None:
        residuals = np.subtract(y_true, y_pred, dtype=np.float64)
        self._total += float(self.sample_errors(residuals).sum())
        self._count += residuals.size

    def result(self) -> float:
        return self._total / self._count if self._count else 0.0

    def reset_states(self) -> None:
        self._total = 0.0
        self._count = 0

    @property
    def name(self) -> str:
        return self.NAME


class MeanSquaredError(Metric):
    NAME = "mse"

    @staticmethod
    def sample_errors(residuals: np.ndarray) -> np.ndarray:
        return np.square(residuals)


class MeanAbsoluteError(Metric):
    NAME = "mae"

    @staticmethod
    def sample_errors(residuals: np.ndarray) -> np.ndarray:
        return np.abs(residuals)
