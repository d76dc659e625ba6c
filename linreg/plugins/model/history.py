from collections import defaultdict
from typing import Any

from linreg.plugins.base.plugin import Plugin, PluginContext, PluginPriority
from linreg.plugins.model.hooks import ModelHookPoints


class HistoryPlugin(Plugin):
    """
    Records the logs emitted at the end of every epoch.

    `history` maps each log key (``"loss"``, metric names) to the list of
    values seen so far; `epochs` holds the matching epoch indices. Successive
    calls to ``train`` keep appending, with epoch indices restarting at 0.
    """

    def __init__(
        self,
        name: str = "history",
        priority: int = PluginPriority.BACKGROUND,
    ):
        super().__init__(name=name, priority=priority)
        self.history: dict[str, list[float]] = defaultdict(list)
        self.epochs: list[int] = []

    def get_hook_points(self) -> list[ModelHookPoints]:
        return [ModelHookPoints.POST_EPOCH]

    def _validate_host(self, host: Any) -> None:
        if not hasattr(host, "train"):
            raise ValueError("HistoryPlugin can only attach to trainable models")

    def on_post_epoch(self, context: PluginContext) -> None:
        self.epochs.append(context.get_metadata("epoch"))
        for key, value in context.get_metadata("logs", {}).items():
            self.history[key].append(float(value))

    def clear(self) -> None:
        self.history.clear()
        self.epochs.clear()
