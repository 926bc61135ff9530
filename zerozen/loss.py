"""Loss functions and label encoding."""

from __future__ import annotations

import math
from enum import Enum

from zerozen.matrix import Matrix

_EPSILON = 1e-15


def _check_shapes(predictions: Matrix, targets: Matrix) -> None:
    if predictions.shape() != targets.shape():
        raise ValueError("Predictions and targets shape mismatch")


class LossKind(Enum):
    """The supported loss functions."""

    MEAN_SQUARED_ERROR = "MeanSquaredError"
    CROSS_ENTROPY = "CrossEntropy"

    def loss(self, predictions: Matrix, targets: Matrix) -> float:
        """Scalar loss of ``predictions`` against ``targets``."""
        _check_shapes(predictions, targets)
        if self is LossKind.MEAN_SQUARED_ERROR:
            squared = sum((p - t) ** 2 for p, t in zip(predictions.data, targets.data))
            return squared / (predictions.rows * predictions.cols)
        total = -sum(
            t * math.log(min(max(p, _EPSILON), 1.0 - _EPSILON))
            for p, t in zip(predictions.data, targets.data)
        )
        return total / predictions.rows

    def gradient(self, predictions: Matrix, targets: Matrix) -> Matrix:
        """Gradient of the loss with respect to ``predictions``."""
        _check_shapes(predictions, targets)
        diff = predictions.sub(targets)
        n_samples = predictions.rows
        if self is LossKind.MEAN_SQUARED_ERROR:
            return diff.scale(2.0 / n_samples)
        # With softmax outputs the cross-entropy gradient simplifies to this.
        return diff.scale(1.0 / n_samples)

    def __str__(self) -> str:
        return self.value


def _class_index(label: float, num_classes: int) -> int:
    if not label > 0.0:
        index = 0
    elif math.isinf(label):
        raise ValueError(f"Class index {label} exceeds number of classes {num_classes}")
    else:
        index = int(label)
    if index >= num_classes:
        raise ValueError(f"Class index {index} exceeds number of classes {num_classes}")
    return index


def labels_to_one_hot(labels: Matrix, num_classes: int) -> Matrix:
    """Turn a column of class labels into a one-hot matrix."""
    if labels.cols != 1:
        raise ValueError(f"Labels matrix must have exactly 1 column, got {labels.cols}")
    one_hot = Matrix.zeros(labels.rows, num_classes)
    for row, label in enumerate(labels.data):
        one_hot.set(row, _class_index(label, num_classes), 1.0)
    return one_hot