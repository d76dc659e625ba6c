from . import base, model

__all__ = ["base", "model"]
