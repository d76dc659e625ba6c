from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol


class HookPoint(Protocol):
    value: str


class PluginPriority:
    """Dispatch order for plugins sharing a hook point, highest first."""

    HIGH = 500
    NORMAL = 100
    LOW = 50
    BACKGROUND = 0


class PluginError(Exception):
    """Raised when a plugin cannot be added to a host."""


@dataclass
class PluginContext:
    """Snapshot handed to a plugin hook: the host plus the values of the moment."""

    host: Any
    metadata: dict[str, Any] = field(default_factory=dict)

    def get_metadata(self, key: str, default=None):
        return self.metadata.get(key, default)


class Plugin(ABC):
    """
    Reacts to hook points of its host through ``on_<hook point>`` methods.

    A hook that raises is logged and counted instead of propagating. After
    `max_failures` consecutive failures the plugin is considered broken and the
    host stops calling it; one successful call clears the count.
    """

    def __init__(
        self,
        name: str | None = None,
        priority: int = PluginPriority.NORMAL,
        max_failures: int = 3,
    ):
        self.name: str = name or type(self).__name__.lower().removesuffix("plugin")
        self.priority = priority
        self.max_failures = max_failures
        self.enabled: bool = True
        self.failures: int = 0
        self.host: Any = None
        self._logger = logging.getLogger(f"plugin.{self.name}")

    @property
    def broken(self) -> bool:
        return self.failures >= self.max_failures

    @property
    def active(self) -> bool:
        return self.host is not None and self.enabled and not self.broken

    @abstractmethod
    def get_hook_points(self) -> list[HookPoint]:
        """Hook points this plugin wants to be called at."""

    def _validate_host(self, host: Any) -> None:
        """Raise ValueError if `host` lacks what this plugin relies on."""

    def attach(self, host: Any) -> None:
        if self.host is not None:
            raise PluginError(f"Plugin {self.name} is already attached")
        self._validate_host(host)
        self.host = host

    def detach(self) -> None:
        self.host = None

    def run(self, hook_point: HookPoint, context: PluginContext) -> None:
        method = getattr(self, f"on_{hook_point.value}", None)
        if method is None:
            return

        try:
            method(context)
        except Exception as e:
            self.failures += 1
            self._logger.error(f"on_{hook_point.value} failed: {e}")
            if self.broken:
                self._logger.error(
                    f"Plugin {self.name} stopped after {self.failures} failures"
                )
            return
        self.failures = 0


class PluginHostMixin:
    """Keeps plugins by name and calls them, by priority, at hook points."""

    def __init__(self):
        super().__init__()
        self._plugins: dict[str, Plugin] = {}
        self._plugin_logger = logging.getLogger(f"{type(self).__name__}.plugins")

    def add_plugin(self, plugin: Plugin) -> None:
        if plugin.name in self._plugins:
            raise ValueError(f"Plugin '{plugin.name}' already exists")

        plugin.attach(self)
        self._plugins[plugin.name] = plugin
        self._plugin_logger.info(
            f"Added plugin: {plugin.name} (priority: {plugin.priority})"
        )

    def remove_plugin(self, name: str) -> Plugin:
        plugin = self.get_plugin(name)
        del self._plugins[name]
        plugin.detach()
        self._plugin_logger.info(f"Removed plugin: {name}")
        return plugin

    def get_plugin(self, name: str) -> Plugin:
        if name not in self._plugins:
            raise ValueError(f"Plugin '{name}' not found")
        return self._plugins[name]

    def has_plugin(self, name: str) -> bool:
        return name in self._plugins

    def list_plugins(self) -> list[str]:
        return list(self._plugins)

    def _call_hooks(self, hook_point: HookPoint, context: PluginContext) -> None:
        # sorted() is stable: equal priorities run in the order they were added
        plugins = sorted(
            (
                p
                for p in self._plugins.values()
                if p.active and hook_point in p.get_hook_points()
            ),
            key=lambda p: p.priority,
            reverse=True,
        )
        for plugin in plugins:
            plugin.run(hook_point, context)


class SimplePlugin(Plugin):
    """Wraps one function as a plugin bound to a single hook point."""

    def __init__(
        self,
        hook_point: HookPoint,
        hook_func: Callable[[PluginContext], Any],
        **kwargs,
    ):
        kwargs.setdefault("name", getattr(hook_func, "__name__", None))
        super().__init__(**kwargs)
        self.hook_point = hook_point
        self.hook_func = hook_func
        setattr(self, f"on_{hook_point.value}", hook_func)

    def get_hook_points(self) -> list[HookPoint]:
        return [self.hook_point]
