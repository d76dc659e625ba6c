import logging
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import Any, TextIO

import numpy as np

from linreg.initializers.base import Initializer
from linreg.metrics.base import MeanSquaredError, Metric
from linreg.optimizers.base import Optimizer
from linreg.plugins.model.hooks import ModelHookPoints
from linreg.plugins.model.mixin import ModelPluginMixin
from linreg.util.functions import naive_shuffle
from linreg.util.table import SNAP_THRESHOLD, write_prediction_table

InitializerLike = Initializer | Callable[[np.random.Generator], float] | str


def _allocate_order(num_sets: int) -> np.ndarray:
    return np.arange(num_sets, dtype=np.intp)


def _borrow(values: Sequence[float] | np.ndarray, label: str) -> np.ndarray:
    array = np.asarray(values, dtype=np.float64)
    if array.ndim != 1:
        raise ValueError(f"{label} must be one-dimensional, got shape {array.shape}")
    view = array.view()
    view.flags.writeable = False
    return view


def _sample_points(minimum: float, maximum: float, increment: float) -> Iterator[float]:
    point = minimum
    while point <= maximum:
        yield point
        point += increment


class LinearRegression(ModelPluginMixin):
    """
    Single-variable linear model ``y = weight * x + bias`` trained with
    online stochastic gradient descent.

    • Training data is borrowed: the model keeps read-only views onto the
      caller's arrays and never copies float64 input. Callers must keep the
      arrays alive and unmodified while the model trains on them.
    • The visiting order is an owned index permutation, reshuffled every epoch.
    • All randomness (initial parameters and shuffling) comes from one
      injected `numpy.random.Generator`, so a seed makes training repeatable.
    """

    def __init__(
        self,
        rng: np.random.Generator | int | None = None,
        bias_initializer: InitializerLike = "randomuniform",
        weight_initializer: InitializerLike = "randomuniform",
        optimizer: str | Optimizer = "sgd",
        metrics: list[str | Metric] | None = None,
        name: str | None = None,
        log_interval: int = 1000,
    ):
        super().__init__()
        self._name: str = name or "linear_regression"
        self._rng: np.random.Generator = np.random.default_rng(rng)
        self._logger = logging.getLogger(f"model.{self._name}")

        if isinstance(optimizer, str):
            self._optimizer = Optimizer.from_string(optimizer)
        else:
            self._optimizer = optimizer

        self._metrics: list[Metric] = []
        if metrics is not None:
            self._metrics.extend(
                Metric.from_string(m) if isinstance(m, str) else m for m in metrics
            )
        self._log_interval = log_interval

        self.bias: float = float(Initializer.get(bias_initializer)(self._rng))
        self.weight: float = float(Initializer.get(weight_initializer)(self._rng))

        self._inputs: np.ndarray | None = None
        self._outputs: np.ndarray | None = None
        self._order: np.ndarray = _allocate_order(0)
        self._num_sets: int = 0

    def attach_training_data(
        self,
        inputs: Sequence[float] | np.ndarray,
        outputs: Sequence[float] | np.ndarray,
        num_sets: int | None = None,
    ) -> bool:
        """
        Borrow `inputs`/`outputs` as training pairs and reset the visiting order.

        Only the first `num_sets` pairs are used; when omitted, both sequences
        must have the same length. Returns False, leaving the model without
        training data, if the order permutation cannot be allocated.

        Raises:
            ValueError: If the data is not one-dimensional or too short for
                `num_sets`, or lengths differ and no `num_sets` is given.
        """
        inputs = _borrow(inputs, "inputs")
        outputs = _borrow(outputs, "outputs")

        if num_sets is None:
            if len(inputs) != len(outputs):
                raise ValueError(
                    f"inputs and outputs must have the same length, "
                    f"got {len(inputs)} and {len(outputs)}"
                )
            num_sets = len(inputs)
        elif num_sets < 0:
            raise ValueError(f"num_sets must be non-negative, got {num_sets}")
        elif num_sets > min(len(inputs), len(outputs)):
            raise ValueError(
                f"num_sets={num_sets} exceeds the training data "
                f"({len(inputs)} inputs, {len(outputs)} outputs)"
            )

        self._inputs = inputs[:num_sets]
        self._outputs = outputs[:num_sets]

        try:
            self._order = _allocate_order(num_sets)
        except MemoryError:
            self._order = np.empty(0, dtype=np.intp)
            self._inputs = None
            self._outputs = None
            self._num_sets = 0
            self._logger.error(
                f"Could not allocate training order for {num_sets} sets"
            )
            return False

        self._num_sets = num_sets
        self.call_hooks(ModelHookPoints.POST_ATTACH_DATA, num_sets=num_sets)
        self._logger.debug(f"Attached {num_sets} training sets")
        return True

    def train(
        self, num_epochs: int = 10000, learning_rate: float | None = None
    ) -> dict[str, float]:
        """
        Run `num_epochs` epochs of online gradient descent.

        Every epoch visits each training pair once, in freshly shuffled order,
        and applies one optimizer update per pair. `learning_rate`, when given,
        replaces the optimizer's current rate. Returns the logs of the last
        epoch.
        """
        if not self._num_sets:
            self._logger.warning("Training data missing, nothing to train on")
            return {}

        if learning_rate is not None:
            self._optimizer.learning_rate = learning_rate

        self.call_hooks(
            ModelHookPoints.PRE_TRAIN,
            num_epochs=num_epochs,
            learning_rate=self._optimizer.learning_rate,
        )

        logs: dict[str, float] = {}
        for epoch in range(num_epochs):
            self.call_hooks(ModelHookPoints.PRE_EPOCH, epoch=epoch)

            self._shuffle()
            for k in self._order:
                self._optimizer.apply(self, self._inputs[k], self._outputs[k])

            logs = self.evaluate()
            self.call_hooks(ModelHookPoints.POST_EPOCH, epoch=epoch, logs=logs)

            if self._log_interval and (epoch + 1) % self._log_interval == 0:
                self._logger.debug(f"Epoch {epoch + 1}/{num_epochs} - {logs}")

        self.call_hooks(ModelHookPoints.POST_TRAIN, logs=logs)
        self._logger.info(
            f"Trained {num_epochs} epochs at learning rate "
            f"{self._optimizer.learning_rate}: weight={self.weight:g}, "
            f"bias={self.bias:g}, {logs}"
        )
        return logs

    def _shuffle(self) -> None:
        naive_shuffle(self._order, self._rng)

    def predict(self, x: float) -> float:
        return self.weight * x + self.bias

    def evaluate(self) -> dict[str, float]:
        """Loss and metrics of the current parameters over the training data."""
        if not self._num_sets:
            return {}

        predictions = self.weight * self._inputs + self.bias
        loss = MeanSquaredError()
        loss.update_state(self._outputs, predictions)
        logs = {"loss": loss.result()}
        for metric in self._metrics:
            metric.reset_states()
            metric.update_state(self._outputs, predictions)
            logs[metric.name] = metric.result()
        return logs

    def predict_training_inputs(
        self, stream: TextIO | None = None, threshold: float = SNAP_THRESHOLD
    ) -> bool:
        """
        Write a prediction report for every training input, in storage order.

        Predictions closer to zero than `threshold` are shown as 0. Returns
        False without writing anything when no training data is attached.
        """
        if not self._num_sets:
            self._logger.error("Training data missing!")
            return False

        pairs = ((x, self.predict(x)) for x in self._inputs)
        write_prediction_table(stream or sys.stdout, pairs, threshold)
        return True

    def predict_range(
        self,
        minimum: float,
        maximum: float,
        step: float = 1.0,
        stream: TextIO | None = None,
        honor_step: bool = False,
        threshold: float = SNAP_THRESHOLD,
    ) -> bool:
        """
        Write a prediction report for the points ``minimum, minimum + 1, ...``
        up to and including `maximum`.

        The points advance by a fixed 1.0 and `step` is ignored unless
        `honor_step` is set, matching the reports this tool has always
        produced. Returns False without writing anything when the range is
        empty or, with `honor_step`, the step is not positive.
        """
        if minimum >= maximum:
            self._logger.error(
                "Minimum input value cannot be higher or equal to maximum input value!"
            )
            return False

        increment = 1.0
        if honor_step:
            if not step > 0:
                self._logger.error(f"Step must be positive, got {step}")
                return False
            increment = step

        points = _sample_points(minimum, maximum, increment)
        pairs = ((x, self.predict(x)) for x in points)
        write_prediction_table(stream or sys.stdout, pairs, threshold)
        return True

    def reset(self) -> None:
        """Release training data and the visiting order and zero the parameters."""
        self._inputs = None
        self._outputs = None
        self._order = _allocate_order(0)
        self._num_sets = 0
        self.bias = 0.0
        self.weight = 0.0

    def get_weights(self) -> tuple[float, float]:
        return self.bias, self.weight

    def set_weights(self, bias: float, weight: float) -> None:
        self.bias = float(bias)
        self.weight = float(weight)

    @property
    def inputs(self) -> np.ndarray:
        return self._inputs if self._num_sets else np.empty(0)

    @property
    def outputs(self) -> np.ndarray:
        return self._outputs if self._num_sets else np.empty(0)

    @property
    def order(self) -> np.ndarray:
        return self._order

    @property
    def num_sets(self) -> int:
        return self._num_sets

    @property
    def optimizer(self) -> Optimizer:
        return self._optimizer

    @property
    def metrics(self) -> list[Metric]:
        return self._metrics

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    @property
    def name(self) -> str:
        return self._name

    def get_config(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "bias": self.bias,
            "weight": self.weight,
            "num_sets": self._num_sets,
            "optimizer": self._optimizer.get_config(),
            "metrics": [m.name for m in self._metrics],
            "plugins": self.list_plugins(),
        }

    def __repr__(self) -> str:
        return (
            f"<LinearRegression name={self._name}, weight={self.weight:g}, "
            f"bias={self.bias:g}, num_sets={self._num_sets}>"
        )
