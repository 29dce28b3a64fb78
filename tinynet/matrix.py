"""Dense row-major matrices that may view a shared flat buffer."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator, Sequence


def rand_float(rng: random.Random | None = None) -> float:
    """Return a uniformly distributed float in [0, 1)."""
    return (random if rng is None else rng).random()


def sigmoid(x: float) -> float:
    """Logistic function, evaluated without overflowing for large |x|."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


class Matrix:
    """A ``rows`` x ``cols`` matrix stored in a flat list.

    Element ``(i, j)`` lives at ``data[offset + i * stride + j]``, so several
    matrices can be views into the same buffer (see :meth:`row`).
    """

    __slots__ = ("rows", "cols", "stride", "offset", "_data")

    def __init__(
        self,
        rows: int,
        cols: int,
        data: list[float] | None = None,
        stride: int | None = None,
        offset: int = 0,
    ) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"invalid matrix shape {rows}x{cols}")
        if stride is None:
            stride = cols
        if stride < cols:
            raise ValueError(f"stride {stride} is smaller than column count {cols}")
        if offset < 0:
            raise ValueError(f"negative offset {offset}")
        if data is None:
            data = [0.0] * (offset + rows * stride)
        elif not isinstance(data, list):
            data = [float(x) for x in data]
        if rows and len(data) < offset + (rows - 1) * stride + cols:
            raise ValueError("buffer too small for matrix shape")
        self.rows = rows
        self.cols = cols
        self.stride = stride
        self.offset = offset
        self._data = data

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a new matrix from a sequence of equally long rows."""
        rows = [[float(x) for x in row] for row in rows]
        cols = len(rows[0]) if rows else 0
        if any(len(row) != cols for row in rows):
            raise ValueError("rows have different lengths")
        return cls(len(rows), cols, [x for row in rows for x in row])

    def _index(self, index: tuple[int, int]) -> int:
        i, j = index
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"index ({i}, {j}) out of range for {self.rows}x{self.cols} matrix")
        return self.offset + i * self.stride + j

    def _row_starts(self) -> range:
        return range(self.offset, self.offset + self.rows * self.stride, self.stride)

    def _check_shape(self, other: Matrix, rows: int, cols: int, what: str) -> None:
        if (other.rows, other.cols) != (rows, cols):
            raise ValueError(
                f"{what}: expected {rows}x{cols} matrix, got {other.rows}x{other.cols}"
            )

    def __getitem__(self, index: tuple[int, int]) -> float:
        return self._data[self._index(index)]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        self._data[self._index(index)] = float(value)

    def __iter__(self) -> Iterator[list[float]]:
        for start in self._row_starts():
            yield self._data[start:start + self.cols]

    def __repr__(self) -> str:
        return f"Matrix({self.rows}, {self.cols}, {self.tolist()!r})"

    def tolist(self) -> list[list[float]]:
        """Return the elements as a list of row lists."""
        return list(self)

    def fill(self, value: float) -> None:
        """Set every element to ``value``."""
        row = [float(value)] * self.cols
        for start in self._row_starts():
            self._data[start:start + self.cols] = row

    def randomize(
        self, low: float = 0.0, high: float = 1.0, rng: random.Random | None = None
    ) -> None:
        """Fill with uniform random values in [low, high)."""
        for start in self._row_starts():
            self._data[start:start + self.cols] = [
                rand_float(rng) * (high - low) + low for _ in range(self.cols)
            ]

    def row(self, index: int) -> Matrix:
        """Return a 1 x cols view of row ``index`` sharing this buffer."""
        if not 0 <= index < self.rows:
            raise IndexError(f"row {index} out of range for {self.rows} rows")
        return Matrix(1, self.cols, self._data, self.stride, self.offset + index * self.stride)

    def copy_from(self, src: Matrix) -> None:
        """Copy all elements of ``src``, which must have the same shape."""
        self._check_shape(src, self.rows, self.cols, "copy")
        for start, values in zip(self._row_starts(), list(src)):
            self._data[start:start + self.cols] = values

    def dot(self, a: Matrix, b: Matrix) -> None:
        """Store the matrix product ``a @ b`` in this matrix."""
        if a.cols != b.rows:
            raise ValueError(f"dot: inner dimensions differ ({a.cols} vs {b.rows})")
        self._check_shape(self, a.rows, b.cols, "dot destination")
        columns = [[b[k, j] for k in range(b.rows)] for j in range(b.cols)]
        product = [
            [sum(x * y for x, y in zip(a_row, column)) for column in columns]
            for a_row in a
        ]
        for start, values in zip(self._row_starts(), product):
            self._data[start:start + self.cols] = values

    def add(self, other: Matrix) -> None:
        """Add ``other`` element-wise into this matrix."""
        self._check_shape(other, self.rows, self.cols, "add")
        for start, mine, theirs in zip(self._row_starts(), list(self), list(other)):
            self._data[start:start + self.cols] = [x + y for x, y in zip(mine, theirs)]

    def apply_sigmoid(self) -> None:
        """Replace every element by its sigmoid."""
        for start, values in zip(self._row_starts(), list(self)):
            self._data[start:start + self.cols] = [sigmoid(x) for x in values]

    def append_col(self, src: Matrix, column: Matrix) -> None:
        """Store ``src`` with ``column`` (rows x 1) appended on the right."""
        self._check_shape(src, self.rows, self.cols - 1, "append_col source")
        self._check_shape(column, self.rows, 1, "append_col column")
        for start, values, extra in zip(self._row_starts(), list(src), list(column)):
            self._data[start:start + self.cols] = values + extra

    def append_row(self, src: Matrix, row: Matrix) -> None:
        """Store ``src`` with ``row`` (1 x cols) appended at the bottom."""
        self._check_shape(src, self.rows - 1, self.cols, "append_row source")
        self._check_shape(row, 1, self.cols, "append_row row")
        for start, values in zip(self._row_starts(), list(src) + list(row)):
            self._data[start:start + self.cols] = values

    def format(self, name: str, padding: int = 0) -> str:
        """Render the matrix as a named, indented block of text."""
        pad = " " * padding
        lines = [f"{pad}{name} = ["]
        lines.extend(
            pad + "    " + "".join(f"{x:f} " for x in values) for values in self
        )
        lines.append(f"{pad}]")
        return "\n".join(lines) + "\n"