from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

import numpy as np


class Initializer(ABC):
    """
    Produces the starting value of a scalar model parameter.

    Subclasses register themselves under their lower-case class name so a
    model can be configured with e.g. ``"zeros"`` instead of an instance.
    """

    _registry: dict[str, type[Initializer]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._registry[cls.__name__.lower()] = cls

    @classmethod
    def from_string(cls, name: str) -> Initializer:
        key = name.strip().lower()
        if key not in cls._registry:
            raise ValueError(
                f"Unknown initializer '{name}'. "
                f"Available: {list(cls._registry.keys())}"
            )
        return cls._registry[key]()

    @classmethod
    def get(
        cls, identifier: Initializer | Callable[[np.random.Generator], float] | str
    ) -> Initializer | Callable[[np.random.Generator], float]:
        if isinstance(identifier, str):
            return cls.from_string(identifier)
        if callable(identifier):
            return identifier
        raise ValueError(f"Cannot interpret {identifier!r} as an initializer")

    @abstractmethod
    def __call__(self, rng: np.random.Generator) -> float:
        pass

    def get_config(self) -> dict:
        return {"class_name": self.__class__.__name__}
