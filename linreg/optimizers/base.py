import logging
from abc import ABC, abstractmethod
from typing import Any, Protocol, Self


class Trainable(Protocol):
    bias: float
    weight: float


class Optimizer(ABC):
    """
    Base class for the per-sample parameter update of a linear model.

    An optimizer is applied once per training pair: it reads the model's
    current bias and weight, computes the update for one (input, reference)
    pair and writes the new parameters back.
    """

    _registry: dict[str, type[Self]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._registry[cls.__name__.lower()] = cls

    @classmethod
    def from_string(cls, optimizer_name: str) -> Self:
        """Create optimizer instance by class name (case-insensitive)."""
        key = optimizer_name.strip().lower()
        if key not in cls._registry:
            raise ValueError(
                f"Unknown optimizer '{optimizer_name}'. "
                f"Available: {list(cls._registry.keys())}"
            )
        return cls._registry[key]()

    def __init__(self, learning_rate: float = 0.01) -> None:
        self._iterations: int = 0
        self._learning_rate: float = learning_rate
        self._logger = logging.getLogger(f"optimizer.{self.__class__.__name__}")

    @property
    def iterations(self) -> int:
        return self._iterations

    @iterations.setter
    def iterations(self, value: int) -> None:
        self._iterations = value

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @learning_rate.setter
    def learning_rate(self, value: float) -> None:
        self._learning_rate = float(value)

    def apply(self, model: Trainable, x: float, reference: float) -> None:
        self.update_step(model, x, reference)
        self._iterations += 1

    @abstractmethod
    def update_step(self, model: Trainable, x: float, reference: float) -> None:
        """Move `model` one step towards predicting `reference` at `x`."""

    @staticmethod
    @abstractmethod
    def _update_step_math(*args, **kwargs):
        """Static method for update mathematics."""

    def get_config(self) -> dict[str, Any]:
        return {
            "name": self.__class__.__name__.lower(),
            "learning_rate": self._learning_rate,
            "iterations": self._iterations,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(learning_rate={self._learning_rate}, iterations={self._iterations})"
