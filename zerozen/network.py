"""Feed-forward neural network and the builder that assembles it."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from zerozen.layer import Layer, LayerConfig
from zerozen.loss import LossKind
from zerozen.matrix import Matrix

_RULE_WIDTH = 65


def _format_float(value: float) -> str:
    """Render a float the way a plain decimal display would: 0.5, 1, 0.00001."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _extract_rows(data: Matrix, indices: Sequence[int]) -> Matrix:
    """Matrix made of the rows of ``data`` named by ``indices``, in that order."""
    cols = data.cols
    return Matrix(
        len(indices),
        cols,
        (x for row in indices for x in data.data[row * cols : (row + 1) * cols]),
    )


@dataclass
class Network:
    """A stack of dense layers trained by gradient descent."""

    layers: list[Layer]
    learning_rate: float = 0.01
    loss: LossKind = LossKind.MEAN_SQUARED_ERROR
    epochs: int = 10_000
    batch_size: int | None = None
    shuffle: bool = True
    logging: bool = True
    log_level: int = 200
    loss_history: list[tuple[int, float]] = field(default_factory=list)

    @staticmethod
    def builder() -> NetworkBuilder:
        """Start configuring a new network."""
        return NetworkBuilder()

    def forward(self, input: Matrix) -> Matrix:
        """Run ``input`` through every layer and return the final output."""
        output = input
        for layer in self.layers:
            output = layer.forward(output)
        return output

    def backward(self, predictions: Matrix, targets: Matrix) -> None:
        """Backpropagate the loss gradient and update every layer."""
        d_output = self.loss.gradient(predictions, targets)
        gradients: list[tuple[Matrix, Matrix]] = []
        for layer in reversed(self.layers):
            grad_weights, grad_biases, d_output = layer.backward(d_output)
            gradients.append((grad_weights, grad_biases))
        gradients.reverse()
        for layer, (grad_weights, grad_biases) in zip(self.layers, gradients):
            layer.update_parameters(grad_weights, grad_biases, self.learning_rate)

    def _is_log_epoch(self, epoch: int) -> bool:
        return epoch % self.log_level == 0 or epoch == self.epochs - 1

    def train(self, input: Matrix, targets: Matrix) -> None:
        """Full-batch gradient descent, recording the loss of every epoch."""
        for epoch in range(self.epochs):
            predictions = self.forward(input)
            current_loss = self.loss.loss(predictions, targets)
            self.loss_history.append((epoch, current_loss))
            if self._is_log_epoch(epoch) and self.logging:
                print(f"Epoch: {epoch}, Loss: {current_loss:.7f}")
            self.backward(predictions, targets)

    def train_sgd(self, input: Matrix, targets: Matrix) -> None:
        """Mini-batch gradient descent; the loss is recorded on logging epochs."""
        if self.batch_size is None:
            raise ValueError("A batch size is required for mini-batch training")
        if self.batch_size <= 0:
            raise ValueError("Batch size must be positive")
        batch_size = self.batch_size
        num_samples = input.rows
        num_batches = -(-num_samples // batch_size)
        indices = list(range(num_samples))

        for epoch in range(self.epochs):
            if self.shuffle:
                random.shuffle(indices)

            epoch_loss = 0.0
            seen = 0
            for start in range(0, num_samples, batch_size):
                batch_indices = indices[start : start + batch_size]
                batch_input = _extract_rows(input, batch_indices)
                batch_targets = _extract_rows(targets, batch_indices)

                predictions = self.forward(batch_input)
                batch_loss = self.loss.loss(predictions, batch_targets)
                epoch_loss += batch_loss * len(batch_indices)
                seen += len(batch_indices)
                self.backward(predictions, batch_targets)

            epoch_loss = epoch_loss / seen if seen else math.nan

            if self._is_log_epoch(epoch):
                self.loss_history.append((epoch, epoch_loss))
                if self.logging:
                    print(
                        f"Epoch: {epoch}, Loss: {epoch_loss:.7f}, "
                        f"Batches: {num_batches}"
                    )

    def __str__(self) -> str:
        rule = "-" * _RULE_WIDTH
        lines = [
            rule,
            f"{'Neural Network Summary':^{_RULE_WIDTH}}",
            "=" * _RULE_WIDTH,
            f"{'Layer':<10} | {'Input Shape':<15} | {'Output Shape':<15} | "
            f"{'Activation':<15}",
            rule,
        ]
        for index, layer in enumerate(self.layers):
            name = f"Dense {index}"
            lines.append(
                f"{name:<10} | {layer.weights.rows:<15} | "
                f"{layer.weights.cols:<15} | {layer.activator}"
            )
        lines.extend(
            [
                rule,
                f"Loss Function: {self.loss}",
                f"Learning Rate: {_format_float(self.learning_rate)}",
                f"Epochs: {self.epochs}",
                rule,
            ]
        )
        return "\n".join(lines) + "\n"


class NetworkBuilder:
    """Fluent configuration of a :class:`Network`."""

    def __init__(self) -> None:
        self._layer_configs: list[LayerConfig] = []
        self._learning_rate = 0.01
        self._loss = LossKind.MEAN_SQUARED_ERROR
        self._epochs = 10_000
        self._batch_size: int | None = None
        self._shuffle = True
        self._logging = True
        self._log_level = 200

    def layer(self, config: LayerConfig) -> NetworkBuilder:
        self._layer_configs.append(config)
        return self

    def learning_rate(self, rate: float) -> NetworkBuilder:
        self._learning_rate = rate
        return self

    def loss(self, loss: LossKind) -> NetworkBuilder:
        self._loss = loss
        return self

    def epochs(self, epochs: int) -> NetworkBuilder:
        self._epochs = epochs
        return self

    def batch_size(self, batch_size: int) -> NetworkBuilder:
        self._batch_size = batch_size
        return self

    def with_logging(self, logging: bool, log_level: int) -> NetworkBuilder:
        self._logging = logging
        self._log_level = log_level
        return self

    def build(self, no_of_features: int) -> Network:
        """Create the network for inputs with ``no_of_features`` columns."""
        if not self._layer_configs:
            raise ValueError("Cannot build a network with no layers.")
        layers = []
        input_size = no_of_features
        for config in self._layer_configs:
            layers.append(Layer(input_size, config))
            input_size = config.neurons
        return Network(
            layers=layers,
            learning_rate=self._learning_rate,
            loss=self._loss,
            epochs=self._epochs,
            batch_size=self._batch_size,
            shuffle=self._shuffle,
            logging=self._logging,
            log_level=self._log_level,
        )