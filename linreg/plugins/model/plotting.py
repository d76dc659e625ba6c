from pathlib import Path
from typing import Any

import matplotlib
import numpy as np

from linreg.plugins.base.plugin import Plugin, PluginContext, PluginPriority
from linreg.plugins.model.hooks import ModelHookPoints


class FitPlotPlugin(Plugin):
    """
    Saves a figure of the finished fit when training ends.

    The left panel shows the attached training pairs together with the learned
    line, the right panel the per-epoch value of `metric`. Rendering happens on
    the non-interactive Agg canvas so the plugin works without a display.
    """

    def __init__(
        self,
        path: str | Path = "training_fit.png",
        metric: str = "loss",
        name: str = "fit_plot",
        priority: int = PluginPriority.LOW,
        dpi: int = 100,
        line_width: float = 1.5,
    ):
        super().__init__(name=name, priority=priority)

        self.path = Path(path)
        self.metric = metric
        self.dpi = dpi
        self.line_width = line_width

        self._curve: list[float] = []

    def get_hook_points(self) -> list[ModelHookPoints]:
        return [
            ModelHookPoints.PRE_TRAIN,
            ModelHookPoints.POST_EPOCH,
            ModelHookPoints.POST_TRAIN,
        ]

    def _validate_host(self, host: Any) -> None:
        if not hasattr(host, "predict") or not hasattr(host, "inputs"):
            raise ValueError("FitPlotPlugin can only attach to regression models")

    def on_pre_train(self, context: PluginContext) -> None:
        self._curve.clear()

    def on_post_epoch(self, context: PluginContext) -> None:
        logs = context.get_metadata("logs", {})
        if self.metric in logs:
            self._curve.append(float(logs[self.metric]))

    def on_post_train(self, context: PluginContext) -> None:
        self.render(context.host)

    def render(self, model: Any) -> Path:
        """Draw the current fit of `model` and save it to `path`."""
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        fig, (ax_fit, ax_curve) = plt.subplots(1, 2, figsize=(12, 5))
        fig.patch.set_facecolor("white")

        inputs, outputs = model.inputs, model.outputs
        if len(inputs):
            xs = np.linspace(inputs.min(), inputs.max(), 100)
            ax_fit.scatter(inputs, outputs, color="tab:blue", label="training data")
            ax_fit.plot(
                xs,
                model.weight * xs + model.bias,
                color="tab:orange",
                linewidth=self.line_width,
                label=f"y = {model.weight:g}x + {model.bias:g}",
            )
            ax_fit.legend(loc="upper left", framealpha=0.8)
        ax_fit.set_title("Fit", fontsize=14, fontweight="bold")
        ax_fit.set_xlabel("Input")
        ax_fit.set_ylabel("Output")
        ax_fit.grid(True, alpha=0.3)

        ax_curve.plot(
            np.arange(1, len(self._curve) + 1),
            self._curve,
            color="tab:green",
            linewidth=self.line_width,
        )
        ax_curve.set_title(self.metric, fontsize=14, fontweight="bold")
        ax_curve.set_xlabel("Epoch")
        ax_curve.set_yscale("log" if self._curve and min(self._curve) > 0 else "linear")
        ax_curve.grid(True, alpha=0.3)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(self.path, dpi=self.dpi, bbox_inches="tight")
        plt.close(fig)

        self._logger.info(f"Saved fit plot to {self.path}")
        return self.path

    @property
    def curve(self) -> list[float]:
        return list(self._curve)
