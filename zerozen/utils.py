"""Helpers for random numbers, CSV loading and classification accuracy."""

from __future__ import annotations

import math
import random
from os import PathLike
from pathlib import Path

from zerozen.matrix import Matrix


def random_float(low: float, high: float) -> float:
    """A float drawn uniformly from ``[low, high)``."""
    if not low < high:
        raise ValueError("Lower bound must be smaller than upper bound")
    while True:
        value = low + random.random() * (high - low)
        if value < high:
            return value


def _parse_value(text: str) -> float:
    if text != text.strip() or "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


def load_csv(path: str | PathLike[str], cols: int) -> Matrix:
    """Load a CSV file with a header line; unparsable fields become 0.0."""
    text = Path(path).read_text(encoding="utf-8")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    rows = [
        [_parse_value(field) for field in line.strip().split(",")]
        for line in lines[1:]
    ]
    return Matrix(len(rows), cols, (x for row in rows for x in row))


def one_hot_to_labels(one_hot: Matrix) -> list[int]:
    """Index of the largest element of each row; ties go to the last."""
    if one_hot.cols <= 1:
        raise ValueError("Matrix is not one-hot encoded.")
    if any(math.isnan(x) for x in one_hot.data):
        raise ValueError("Matrix contains NaN values.")
    labels = []
    for start in range(0, one_hot.rows * one_hot.cols, one_hot.cols):
        row = one_hot.data[start : start + one_hot.cols]
        labels.append(max(range(len(row)), key=lambda j: (row[j], j)))
    return labels


def accuracy(predictions: Matrix, targets: Matrix) -> float:
    """Percentage of rows whose predicted class matches the target class."""
    predicted = one_hot_to_labels(predictions)
    expected = one_hot_to_labels(targets)
    if len(predicted) != len(expected):
        raise ValueError("Prediction and target lengths do not match.")
    if not predicted:
        return math.nan
    correct = sum(p == t for p, t in zip(predicted, expected))
    return correct / len(predicted) * 100.0