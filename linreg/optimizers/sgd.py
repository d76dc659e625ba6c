from numba import njit

from .base import Optimizer, Trainable


class SGD(Optimizer):
    """
    Online stochastic gradient descent on the squared error of a line.

    For one pair the residual ``reference - (weight * x + bias)`` is scaled by
    the learning rate; the bias moves by that amount and the weight by that
    amount times `x`, which are the negative partial derivatives of the
    squared error (up to a constant factor folded into the learning rate).
    """

    def update_step(self, model: Trainable, x: float, reference: float) -> None:
        model.bias, model.weight = self._update_step_math(
            model.bias, model.weight, x, reference, self._learning_rate
        )

    @staticmethod
    @njit(cache=True, nogil=True)
    def _update_step_math(
        bias: float, weight: float, x: float, reference: float, learning_rate: float
    ) -> tuple[float, float]:
        prediction = weight * x + bias
        deviation = reference - prediction
        delta = deviation * learning_rate
        return bias + delta, weight + delta * x
