from .plugin import (
    HookPoint,
    Plugin,
    PluginContext,
    PluginError,
    PluginHostMixin,
    PluginPriority,
    SimplePlugin,
)

__all__ = [
    "HookPoint",
    "Plugin",
    "PluginContext",
    "PluginError",
    "PluginHostMixin",
    "PluginPriority",
    "SimplePlugin",
]
