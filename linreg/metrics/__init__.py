from .base import MeanAbsoluteError, MeanSquaredError, Metric

__all__ = ["Metric", "MeanSquaredError", "MeanAbsoluteError"]
