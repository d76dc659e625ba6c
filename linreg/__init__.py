from . import (
    config,
    data,
    initializers,
    metrics,
    models,
    optimizers,
    plugins,
    util,
)
from .models import LinearRegression

__all__ = [
    "config",
    "data",
    "initializers",
    "metrics",
    "models",
    "optimizers",
    "plugins",
    "util",
    "LinearRegression",
]
