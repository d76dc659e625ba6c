from linreg.plugins.base.plugin import PluginContext, PluginHostMixin
from linreg.plugins.model.hooks import ModelHookPoints


class ModelPluginMixin(PluginHostMixin):
    def call_hooks(self, hook_point: ModelHookPoints, **metadata) -> None:
        """Call plugins at `hook_point` with the current parameters plus `metadata`."""
        context = PluginContext(
            host=self,
            metadata={
                "bias": self.bias,
                "weight": self.weight,
                "num_sets": self.num_sets,
                **metadata,
            },
        )
        self._call_hooks(hook_point, context)
