from .base import Initializer
from .basic import Constant, RandomUniform, Zeros

__all__ = ["Initializer", "Constant", "RandomUniform", "Zeros"]
