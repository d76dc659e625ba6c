from .hooks import ModelHookPoints
from .mixin import ModelPluginMixin
from .history import HistoryPlugin
from .plotting import FitPlotPlugin

__all__ = [
    "ModelHookPoints",
    "ModelPluginMixin",
    "HistoryPlugin",
    "FitPlotPlugin",
]
