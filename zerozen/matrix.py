"""Dense row-major matrix of floats."""

from __future__ import annotations

import random as _random
from collections.abc import Callable, Iterable, Sequence


class Matrix:
    """A two-dimensional matrix stored as a flat row-major list of floats."""

    __slots__ = ("rows", "cols", "data")

    def __init__(self, rows: int, cols: int, data: Iterable[float]) -> None:
        values = [float(x) for x in data]
        if rows * cols != len(values):
            raise ValueError(
                f"Data length {len(values)} doesn't match matrix dimensions "
                f"{rows}x{cols} (expected {rows * cols})"
            )
        self.rows = rows
        self.cols = cols
        self.data = values

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        if not rows:
            raise ValueError("At least one row is required")
        col_count = len(rows[0])
        if col_count == 0:
            raise ValueError("Rows must not be empty")
        if any(len(row) != col_count for row in rows):
            raise ValueError("All rows must have the same number of columns")
        return cls(len(rows), col_count, (x for row in rows for x in row))

    def _check_index(self, i: int, j: int) -> None:
        if not 0 <= i < self.rows:
            raise IndexError(
                f"Row index {i} out of bounds for matrix with {self.rows} rows"
            )
        if not 0 <= j < self.cols:
            raise IndexError(
                f"Column index {j} out of bounds for matrix with {self.cols} columns"
            )

    def get(self, i: int, j: int) -> float:
        """Return the element at row ``i``, column ``j``."""
        self._check_index(i, j)
        return self.data[i * self.cols + j]

    def set(self, i: int, j: int, value: float) -> None:
        """Set the element at row ``i``, column ``j``."""
        self._check_index(i, j)
        self.data[i * self.cols + j] = float(value)

    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        return cls.fill(rows, cols, 0.0)

    @classmethod
    def ones(cls, rows: int, cols: int) -> Matrix:
        return cls.fill(rows, cols, 1.0)

    @classmethod
    def fill(cls, rows: int, cols: int, value: float) -> Matrix:
        return cls(rows, cols, [float(value)] * (rows * cols))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        return cls(
            size,
            size,
            (1.0 if i == j else 0.0 for i in range(size) for j in range(size)),
        )

    @classmethod
    def random(
        cls, rows: int, cols: int, lowerbound: float, upperbound: float
    ) -> Matrix:
        """Matrix of values drawn uniformly from ``[lowerbound, upperbound)``."""
        if not lowerbound < upperbound:
            raise ValueError("Lower bound must be smaller than upper bound")
        span = upperbound - lowerbound

        def draw() -> float:
            while True:
                value = lowerbound + _random.random() * span
                if value < upperbound:
                    return value

        return cls(rows, cols, (draw() for _ in range(rows * cols)))

    def _with_data(self, data: Iterable[float]) -> Matrix:
        return Matrix(self.rows, self.cols, data)

    def map(self, func: Callable[[float], float]) -> Matrix:
        """Apply ``func`` to every element."""
        return self._with_data(func(x) for x in self.data)

    def scale(self, scalar: float) -> Matrix:
        return self._with_data(x * scalar for x in self.data)

    def _check_same_shape(self, other: Matrix, operation: str) -> None:
        if self.shape() != other.shape():
            raise ValueError(
                f"Matrix dimensions don't match for {operation}: "
                f"{self.rows}x{self.cols} vs {other.rows}x{other.cols}"
            )

    def add(self, other: Matrix) -> Matrix:
        self._check_same_shape(other, "addition")
        return self._with_data(a + b for a, b in zip(self.data, other.data))

    def sub(self, other: Matrix) -> Matrix:
        self._check_same_shape(other, "subtraction")
        return self._with_data(a - b for a, b in zip(self.data, other.data))

    def hadamard(self, other: Matrix) -> Matrix:
        """Element-wise product."""
        self._check_same_shape(other, "hadamard product")
        return self._with_data(a * b for a, b in zip(self.data, other.data))

    def _row_slices(self) -> list[list[float]]:
        return [
            self.data[start : start + self.cols]
            for start in range(0, self.rows * self.cols, self.cols)
        ] if self.cols else [[] for _ in range(self.rows)]

    def mul(self, other: Matrix) -> Matrix:
        """Matrix product."""
        if self.cols != other.rows:
            raise ValueError(
                "Matrix dimensions not compatible for matrix product: "
                f"(A: {self.rows}x{self.cols}, B: {other.rows}x{other.cols})"
            )
        other_columns = other.transpose()._row_slices()
        data = [
            sum(a * b for a, b in zip(row, column))
            for row in self._row_slices()
            for column in other_columns
        ]
        return Matrix(self.rows, other.cols, data)

    def dot(self, other: Matrix) -> float:
        """Dot product of two vectors (1xN or Nx1)."""
        is_self_vector = self.rows == 1 or self.cols == 1
        is_other_vector = other.rows == 1 or other.cols == 1
        if not (is_self_vector and is_other_vector):
            raise ValueError(
                "Dot product requires both matrices to be vectors (1xN or Nx1)."
            )
        if len(self.data) != len(other.data):
            raise ValueError(
                "Vector lengths do not match for dot product: "
                f"{len(self.data)} vs {len(other.data)}"
            )
        return sum(a * b for a, b in zip(self.data, other.data))

    def transpose(self) -> Matrix:
        rows = self._row_slices()
        return Matrix(
            self.cols,
            self.rows,
            (row[j] for j in range(self.cols) for row in rows),
        )

    def split_column(self, n: int) -> tuple[Matrix, Matrix]:
        """Split off column ``n``; return it and the remaining columns."""
        if not 0 <= n < self.cols:
            raise IndexError("Column index out of bounds")
        rows = self._row_slices()
        column = Matrix(self.rows, 1, (row[n] for row in rows))
        remaining = Matrix(
            self.rows,
            self.cols - 1,
            (x for row in rows for x in row[:n] + row[n + 1 :]),
        )
        return column, remaining

    def add_scalar(self, scalar: float) -> Matrix:
        return self._with_data(x + scalar for x in self.data)

    def sub_scalar(self, scalar: float) -> Matrix:
        return self._with_data(x - scalar for x in self.data)

    def div_scalar(self, scalar: float) -> Matrix:
        if scalar == 0.0:
            raise ZeroDivisionError("Division by zero is not allowed")
        return self._with_data(x / scalar for x in self.data)

    def sum_rows(self) -> Matrix:
        """Sum across each row, giving a column vector."""
        return Matrix(self.rows, 1, (sum(row) for row in self._row_slices()))

    def sum_cols(self) -> Matrix:
        """Sum down each column, giving a row vector."""
        return Matrix(1, self.cols, (sum(col) for col in self.transpose()._row_slices()))

    def sum_all(self) -> float:
        return sum(self.data)

    def add_bias_vector(self, bias_vector: Matrix) -> Matrix:
        """Add a 1xN row vector to every row."""
        if bias_vector.rows != 1 or self.cols != bias_vector.cols:
            raise ValueError("Bias vector dimensions are incompatible")
        bias = bias_vector.data
        return self._with_data(
            x + b for row in self._row_slices() for x, b in zip(row, bias)
        )

    def __str__(self) -> str:
        lines = ["["]
        lines.extend(
            "".join(f"{x:8.3f} " for x in row) for row in self._row_slices()
        )
        lines.append("]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, data={self.data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.cols == other.cols
            and self.data == other.data
        )

    __hash__ = None  # type: ignore[assignment]