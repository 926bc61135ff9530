"""Fully connected layer with cached forward state for backpropagation."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from zerozen.activations import Activation, ActivationKind
from zerozen.matrix import Matrix


@dataclass
class LayerConfig:
    """Number of neurons and the activation of one layer."""

    neurons: int
    activator: Activation


def initialize_weights(
    neurons_in: int, neurons_out: int, activation: Activation
) -> Matrix:
    """Random weights of shape ``(neurons_in, neurons_out)`` suited to ``activation``."""
    size = neurons_in * neurons_out
    kind = activation.kind
    if kind in (ActivationKind.SIGMOID, ActivationKind.TANH):
        # Xavier/Glorot uniform initialisation.
        if neurons_in + neurons_out == 0:
            raise ValueError("Layer must have at least one input or output neuron")
        limit = math.sqrt(6.0 / (neurons_in + neurons_out))
        data = [random.uniform(-limit, limit) for _ in range(size)]
    else:
        if kind in (ActivationKind.RELU, ActivationKind.LEAKY_RELU):
            # He initialisation.
            if neurons_in == 0:
                raise ValueError("Layer must have at least one input neuron")
            std_dev = math.sqrt(2.0 / neurons_in)
        elif kind is ActivationKind.SOFTMAX:
            if neurons_in == 0:
                raise ValueError("Layer must have at least one input neuron")
            std_dev = math.sqrt(1.0 / neurons_in)
        else:
            std_dev = 0.01
        data = [random.gauss(0.0, std_dev) for _ in range(size)]
    return Matrix(neurons_in, neurons_out, data)


class Layer:
    """A dense layer: ``activation(input @ weights + biases)``."""

    def __init__(self, input_neurons: int, config: LayerConfig) -> None:
        self.weights = initialize_weights(input_neurons, config.neurons, config.activator)
        self.biases = Matrix.zeros(1, config.neurons)
        self.activator = config.activator
        self._input_cache: Matrix | None = None
        self._output_cache: Matrix | None = None

    def __repr__(self) -> str:
        return (
            f"Layer(inputs={self.weights.rows}, neurons={self.weights.cols}, "
            f"activator={self.activator})"
        )

    def forward(self, prev_input: Matrix) -> Matrix:
        """Compute the layer output and remember what backward needs."""
        if prev_input.cols != self.weights.rows:
            raise ValueError(
                f"Input cols {prev_input.cols} doesn't match layer's weight "
                f"matrix row size {self.weights.rows}"
            )
        self._input_cache = prev_input
        z = prev_input.mul(self.weights).add_bias_vector(self.biases)
        output = self.activator.activate(z)
        self._output_cache = output
        return output

    def backward(self, d_output: Matrix) -> tuple[Matrix, Matrix, Matrix]:
        """Given dL/da, return (dL/dW, dL/db, dL/d_input)."""
        if self._output_cache is None or self._input_cache is None:
            raise RuntimeError("forward must be called before backward")
        if self.activator.kind is ActivationKind.SOFTMAX:
            # Paired with cross-entropy, d_output already is dL/dz.
            d_z = d_output
        else:
            d_z = d_output.hadamard(self.activator.derivative(self._output_cache))
        grad_weights = self._input_cache.transpose().mul(d_z)
        grad_biases = d_z.sum_cols()
        grad_input = d_z.mul(self.weights.transpose())
        return grad_weights, grad_biases, grad_input

    def update_parameters(
        self, grad_weights: Matrix, grad_biases: Matrix, learning_rate: float
    ) -> None:
        """Take one gradient-descent step."""
        self.weights = self.weights.sub(grad_weights.scale(learning_rate))
        self.biases = self.biases.sub(grad_biases.scale(learning_rate))