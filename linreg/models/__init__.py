from .linear import LinearRegression

__all__ = ["LinearRegression"]
