"""A multilayer perceptron feedforward neural network and its builder."""

from __future__ import annotations

import operator
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from .functions import Activation, ActivationFunction, Loss


@dataclass
class Layer:
    """One layer of neurons with its weights, biases and last weighted inputs.

    The weights are kept flat: the weight of neuron ``i`` for input ``j``
    lies at ``i * size + j``.
    """

    size: int
    weights: list[float] = field(default_factory=list)
    biases: list[float] = field(default_factory=list)
    values: list[float] = field(default_factory=list)

    def initialize(self, neuron_count: int) -> Layer:
        """Fill weights and biases with random values in [-10, 10] and return the layer."""
        self.weights = [random.uniform(-10.0, 10.0) for _ in range(neuron_count * self.size)]
        self.biases = [random.uniform(-10.0, 10.0) for _ in range(self.size)]
        return self

    def calculate(
        self, inputs: Sequence[float], activation: ActivationFunction
    ) -> list[float]:
        """Compute the activated outputs for ``inputs``.

        The unactivated weighted inputs are kept in ``values`` for use by
        backpropagation.
        """
        if len(self.biases) != self.size:
            raise ValueError("layer has not been initialized")
        if self.size and (self.size - 1) * self.size + len(inputs) > len(self.weights):
            raise IndexError("layer weights do not cover the given inputs")

        width = len(inputs)
        starts = range(0, self.size * self.size, self.size)
        self.values = [
            sum(map(operator.mul, self.weights[start : start + width], inputs), bias)
            for start, bias in zip(starts, self.biases)
        ]
        return [activation(value) for value in self.values]


@dataclass
class NeuralNetwork:
    """A multilayer perceptron feedforward neural network."""

    input_size: int
    hidden_layers: list[Layer]
    output_layer: Layer
    normalize_inputs: float | None
    activations: tuple[Activation, Activation]
    loss: Loss
    batch_size: int
    learning_rate: float

    @staticmethod
    def builder() -> NeuralNetworkBuilder:
        """Return a fresh, unconfigured builder."""
        return NeuralNetworkBuilder()

    def propagate(self, inputs: Sequence[float]) -> list[float]:
        """Run one forward pass and return the output layer's activations."""
        if len(inputs) != self.input_size:
            raise ValueError(f"expected input of size {self.input_size}")

        neuron_activation = self.activations[0].function()
        output_activation = self.activations[1].function()

        maximum = self.normalize_inputs
        if maximum is None:
            values = [float(x) for x in inputs]
        else:
            values = [float(x) / maximum for x in inputs]

        for layer in self.hidden_layers:
            values = layer.calculate(values, neuron_activation)

        return self.output_layer.calculate(values, output_activation)

    def backpropagate(
        self, result: Sequence[float], expected: Sequence[float]
    ) -> list[float]:
        """Return the output layer's error terms for the last forward pass.

        Each term is the output activation's derivative at the neuron's
        weighted input times the loss derivative of result against expected.
        Weights and biases are left unchanged.
        """
        size = self.output_layer.size
        if len(self.output_layer.values) != size:
            raise RuntimeError("propagate must be called before backpropagate")
        if len(result) < size or len(expected) < size:
            raise ValueError(f"expected result and expected values of size {size}")

        activation_derivative = self.activations[1].derivative()
        loss_derivative = self.loss.derivative()
        return [
            activation_derivative(value) * loss_derivative(got, want)
            for value, got, want in zip(self.output_layer.values, result, expected)
        ]


class NeuralNetworkBuilder:
    """Collects the settings of a network before building it."""

    def __init__(self) -> None:
        self._input_size = 0
        self._hidden_layers: list[int] = []
        self._output_size = 0
        self._normalize_max: float | None = None
        self._activations: tuple[Activation, Activation] | None = None
        self._loss: Loss | None = None
        self._batch_size = 0
        self._learning_rate = 0.0

    def with_input_size(self, size: int) -> NeuralNetworkBuilder:
        """Set the number of inputs."""
        if self._input_size != 0:
            raise ValueError("input size already set")
        if size <= 0:
            raise ValueError("input size cannot be 0")
        self._input_size = size
        return self

    def with_hidden_layer_of_size(self, size: int) -> NeuralNetworkBuilder:
        """Append a hidden layer of ``size`` neurons."""
        if size <= 0:
            raise ValueError("hidden layer size cannot be 0")
        self._hidden_layers.append(size)
        return self

    def with_output_size(self, size: int) -> NeuralNetworkBuilder:
        """Set the number of outputs."""
        if self._output_size != 0:
            raise ValueError("output size already set")
        if size <= 0:
            raise ValueError("output size cannot be 0")
        self._output_size = size
        return self

    def normalize_inputs(self, maximum: int) -> NeuralNetworkBuilder:
        """Divide every input by ``maximum`` before propagating it."""
        if self._normalize_max is not None:
            raise ValueError("normalization already set")
        if maximum < 0:
            raise ValueError("normalization maximum cannot be negative")
        self._normalize_max = float(maximum)
        return self

    def with_activations(
        self, neuron: Activation, output: Activation
    ) -> NeuralNetworkBuilder:
        """Set the activation of hidden neurons and of output neurons."""
        if self._activations is not None:
            raise ValueError("activation functions already set")
        self._activations = (neuron, output)
        return self

    def with_loss(self, loss: Loss) -> NeuralNetworkBuilder:
        """Set the loss function."""
        if self._loss is not None:
            raise ValueError("loss function already set")
        self._loss = loss
        return self

    def with_batch_size(self, size: int) -> NeuralNetworkBuilder:
        """Set the training batch size."""
        if self._batch_size != 0:
            raise ValueError("batch size already set")
        if size <= 0:
            raise ValueError("batch size cannot be 0")
        self._batch_size = size
        return self

    def with_learning_rate(self, rate: float) -> NeuralNetworkBuilder:
        """Set the learning rate."""
        if self._learning_rate != 0.0:
            raise ValueError("learning rate already set")
        if rate == 0.0:
            raise ValueError("learning rate cannot be 0")
        self._learning_rate = rate
        return self

    def build(self) -> NeuralNetwork:
        """Create a network with randomly initialized layers."""
        if self._input_size == 0:
            raise ValueError("input size has to be set")
        if self._output_size == 0:
            raise ValueError("output size has to be set")
        if self._batch_size == 0:
            raise ValueError("batch size has to be set")
        if self._learning_rate == 0.0:
            raise ValueError("learning rate has to be set")
        if self._activations is None:
            raise ValueError("activation functions have to be set")
        if self._loss is None:
            raise ValueError("loss function has to be set")

        last_size = self._input_size
        hidden_layers = []
        for size in self._hidden_layers:
            hidden_layers.append(Layer(size).initialize(last_size))
            last_size = size

        return NeuralNetwork(
            input_size=self._input_size,
            hidden_layers=hidden_layers,
            output_layer=Layer(self._output_size).initialize(last_size),
            normalize_inputs=self._normalize_max,
            activations=self._activations,
            loss=self._loss,
            batch_size=self._batch_size,
            learning_rate=self._learning_rate,
        )