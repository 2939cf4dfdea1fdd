"""Activation and loss functions used by the neural network."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from enum import Enum

ActivationFunction = Callable[[float], float]
LossFunction = Callable[[float, float], float]


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _cosh(x: float) -> float:
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


def _inverse_square(v: float) -> float:
    if v == 0.0:
        return math.inf
    return 1.0 / (v * v)


def _relu(x: float) -> float:
    return x if x > 0.0 else 0.0


def _sigmoid(x: float) -> float:
    return 1.0 / (1.0 + _exp(-x))


def _silu(x: float) -> float:
    return x / (1.0 + _exp(-x))


def _softsign(x: float) -> float:
    return x / (1.0 + abs(x))


def _softplus(x: float) -> float:
    return math.log(1.0 + _exp(x))


def _gaussian(x: float) -> float:
    return _exp(-(x * x))


def _sigmoid_derivative(x: float) -> float:
    e = _exp(x)
    return e * _inverse_square(e + 1.0)


def _silu_derivative(x: float) -> float:
    e = _exp(x)
    return e * _inverse_square(x + e + 1.0)


def _tanh_derivative(x: float) -> float:
    return _inverse_square(_cosh(x))


def _softsign_derivative(x: float) -> float:
    return _inverse_square(1.0 + abs(x))


def _softplus_derivative(x: float) -> float:
    e = _exp(x)
    return e * (1.0 / (1.0 + e))


def _gaussian_derivative(x: float) -> float:
    return -2.0 * _exp(-(x * x)) * x


class Activation(Enum):
    """Activation functions for neurons."""

    RELU = "relu"
    SIGMOID = "sigmoid"
    SILU = "silu"
    TANH = "tanh"
    SOFTSIGN = "softsign"
    SOFTPLUS = "softplus"
    GAUSSIAN = "gaussian"

    def function(self) -> ActivationFunction:
        """Return the activation function itself."""
        return _ACTIVATIONS[self][0]

    def derivative(self) -> ActivationFunction:
        """Return the derivative of the activation function."""
        return _ACTIVATIONS[self][1]


_ACTIVATIONS: dict[Activation, tuple[ActivationFunction, ActivationFunction]] = {
    # The ReLU derivative is taken as a constant slope of one everywhere.
    Activation.RELU: (_relu, lambda _x: 1.0),
    Activation.SIGMOID: (_sigmoid, _sigmoid_derivative),
    Activation.SILU: (_silu, _silu_derivative),
    Activation.TANH: (math.tanh, _tanh_derivative),
    Activation.SOFTSIGN: (_softsign, _softsign_derivative),
    Activation.SOFTPLUS: (_softplus, _softplus_derivative),
    Activation.GAUSSIAN: (_gaussian, _gaussian_derivative),
}


def _squared_difference(x: float, y: float) -> float:
    return (x - y) ** 2


def _squared_difference_derivative(x: float, y: float) -> float:
    return 2.0 * (x - y)


class Loss(Enum):
    """Loss (cost) functions."""

    SQUARED_DIFFERENCE = "squared_difference"

    def function(self) -> LossFunction:
        """Return the loss function itself."""
        return _LOSSES[self][0]

    def derivative(self) -> LossFunction:
        """Return the derivative of the loss function with respect to its first argument."""
        return _LOSSES[self][1]


_LOSSES: dict[Loss, tuple[LossFunction, LossFunction]] = {
    Loss.SQUARED_DIFFERENCE: (_squared_difference, _squared_difference_derivative),
}


def total_loss(
    loss: LossFunction, result: Sequence[float], expected: Sequence[float]
) -> float:
    """Return the sum of ``loss`` applied pairwise over ``result`` and ``expected``."""
    if len(result) != len(expected):
        raise ValueError("expected equal length sequences")
    return sum(loss(got, want) for got, want in zip(result, expected))