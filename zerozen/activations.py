"""Activation functions applied element-wise or row-wise to matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from zerozen.matrix import Matrix


class ActivationKind(Enum):
    """The supported activation functions."""

    IDENTITY = "Identity"
    SIGMOID = "Sigmoid"
    RELU = "ReLU"
    TANH = "Tanh"
    LEAKY_RELU = "LeakyReLU"
    SOFTMAX = "SoftMax"


def _sigmoid(x: float) -> float:
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


def _softmax_row(row: list[float]) -> list[float]:
    peak = max(row)
    exps = [math.exp(x - peak) for x in row]
    total = sum(exps)
    return [e / total for e in exps]


@dataclass(frozen=True)
class Activation:
    """An activation function; ``alpha`` is the negative slope of leaky ReLU."""

    kind: ActivationKind
    alpha: float = 0.0

    def activate(self, mat: Matrix) -> Matrix:
        """Apply the activation to ``mat``."""
        kind = self.kind
        if kind is ActivationKind.IDENTITY:
            return Matrix(mat.rows, mat.cols, mat.data)
        if kind is ActivationKind.SIGMOID:
            return mat.map(_sigmoid)
        if kind is ActivationKind.RELU:
            return mat.map(lambda x: max(x, 0.0))
        if kind is ActivationKind.TANH:
            return mat.map(math.tanh)
        if kind is ActivationKind.LEAKY_RELU:
            alpha = self.alpha
            return mat.map(lambda x: max(x, alpha * x))
        return Matrix.from_rows(
            [_softmax_row(mat.data[start : start + mat.cols])
             for start in range(0, mat.rows * mat.cols, mat.cols)]
        ) if mat.rows else Matrix(0, mat.cols, [])

    def derivative(self, mat: Matrix) -> Matrix:
        """Derivative expressed in terms of the activation's output ``mat``."""
        kind = self.kind
        if kind is ActivationKind.IDENTITY:
            return Matrix.ones(mat.rows, mat.cols)
        if kind is ActivationKind.SIGMOID:
            return mat.map(lambda x: x * (1.0 - x))
        if kind is ActivationKind.RELU:
            return mat.map(lambda x: 1.0 if x > 0.0 else 0.0)
        if kind is ActivationKind.TANH:
            return mat.map(lambda x: 1.0 - x * x)
        if kind is ActivationKind.LEAKY_RELU:
            alpha = self.alpha
            return mat.map(lambda x: 1.0 if x > 0.0 else alpha)
        raise ValueError("Softmax derivative is directly called!")

    def __str__(self) -> str:
        if self.kind is ActivationKind.LEAKY_RELU:
            return f"{self.kind.value}({self.alpha!r})"
        return self.kind.value


def leaky_relu(alpha: float) -> Activation:
    """Leaky ReLU with negative slope ``alpha``."""
    return Activation(ActivationKind.LEAKY_RELU, float(alpha))