"""Dense matrices of numbers and the linear-algebra helpers built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from numbers import Real
from typing import Callable, Optional, Union

from .vector import Vector

Operand = Union["Matrix", Real]


class Matrix:
    """A mutable rectangular matrix stored row by row.

    Arithmetic with a scalar applies to every element; arithmetic with
    another matrix of the same shape is element-wise (``*`` is not the
    matrix product, use :func:`dot` for that).
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[Real]]) -> None:
        data = [list(row) for row in rows]
        if not data or not data[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("all rows of a matrix must have the same length")
        self._rows = data

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        """Return a ``rows`` x ``columns`` matrix filled with zeros."""
        if rows < 1 or columns < 1:
            raise ValueError(f"invalid matrix shape {rows}x{columns}")
        return cls([[0] * columns for _ in range(rows)])

    @property
    def shape(self) -> tuple[int, int]:
        """``(rows, columns)``."""
        return len(self._rows), len(self._rows[0])

    def __getitem__(self, index):
        if isinstance(index, tuple):
            i, j = index
            return self._rows[i][j]
        return list(self._rows[index])

    def __setitem__(self, index, value) -> None:
        if isinstance(index, tuple):
            i, j = index
            self._rows[i][j] = value
            return
        row = list(value)
        if len(row) != self.shape[1]:
            raise ValueError(
                f"row length {len(row)} does not match {self.shape[1]} columns"
            )
        self._rows[index] = row

    def __iter__(self) -> Iterator[Real]:
        """Iterate over the elements in row-major order."""
        for row in self._rows:
            yield from row

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def __str__(self) -> str:
        rows, columns = self.shape
        body = "".join(
            " ".join(str(x) for x in row) + "\n  " for row in self._rows
        )
        return f"Mat[{rows}x{columns}]:\n  {body}"

    def _copy_rows(self) -> list[list]:
        return [list(row) for row in self._rows]

    def _map(self, other: Operand, op: Callable[[Real, Real], Real]) -> "Matrix":
        if isinstance(other, Matrix):
            if other.shape != self.shape:
                raise ValueError(
                    f"matrix shapes differ: {self.shape} and {other.shape}"
                )
            return Matrix(
                [op(a, b) for a, b in zip(ra, rb)]
                for ra, rb in zip(self._rows, other._rows)
            )
        return Matrix([op(a, other) for a in row] for row in self._rows)

    def _binary(self, other: object, op) -> "Matrix":
        if not isinstance(other, (Matrix, Real)):
            return NotImplemented
        return self._map(other, op)

    def __add__(self, other: Operand) -> "Matrix":
        return self._binary(other, lambda a, b: a + b)

    def __radd__(self, other: Real) -> "Matrix":
        return self._binary(other, lambda a, b: a + b)

    def __sub__(self, other: Operand) -> "Matrix":
        return self._binary(other, lambda a, b: a - b)

    def __rsub__(self, other: Real) -> "Matrix":
        """Scalar on the left: subtracts the scalar from every element."""
        return self._binary(other, lambda a, b: a - b)

    def __mul__(self, other: Operand) -> "Matrix":
        return self._binary(other, lambda a, b: a * b)

    def __rmul__(self, other: Real) -> "Matrix":
        return self._binary(other, lambda a, b: a * b)

    def __truediv__(self, other: Operand) -> "Matrix":
        return self._binary(other, lambda a, b: a / b)


def _elementwise_select(m: Matrix, other: Operand, keep_other) -> Matrix:
    if isinstance(other, Matrix):
        if other.shape != m.shape:
            raise ValueError(f"matrix shapes differ: {m.shape} and {other.shape}")
        return Matrix(
            [b if keep_other(b, a) else a for a, b in zip(ra, rb)]
            for ra, rb in zip(m._rows, other._rows)
        )
    return Matrix(
        [other if keep_other(other, a) else a for a in row] for row in m._rows
    )


def minimum(m: Matrix, other: Optional[Operand] = None):
    """Smallest element of ``m``, or the element-wise minimum with ``other``."""
    if other is None:
        return min(m)
    return _elementwise_select(m, other, lambda candidate, current: candidate < current)


def maximum(m: Matrix, other: Optional[Operand] = None):
    """Largest element of ``m``, or the element-wise maximum with ``other``."""
    if other is None:
        return max(m)
    return _elementwise_select(m, other, lambda candidate, current: candidate > current)


def absolute(m: Matrix) -> Matrix:
    """Element-wise absolute value."""
    return Matrix([-x if x < 0 else x for x in row] for row in m._rows)


def sign(m: Matrix) -> Matrix:
    """Element-wise sign: -1, 0 or 1."""
    return Matrix([(x > 0) - (x < 0) for x in row] for row in m._rows)


def to_row_matrix(v: Vector) -> Matrix:
    """A 1 x N matrix holding the vector."""
    return Matrix([list(v)])


def to_column_matrix(v: Vector) -> Matrix:
    """An N x 1 matrix holding the vector."""
    return Matrix([x] for x in v)


def to_vector(m: Matrix) -> Vector:
    """Turn a row or column matrix into a vector."""
    rows, columns = m.shape
    if rows != 1 and columns != 1:
        raise ValueError(f"only a row or column matrix converts to a vector, got {m.shape}")
    return Vector(m)


def dot(a, b):
    """Matrix product of two matrices, or of a matrix and a vector."""
    if isinstance(a, Matrix) and isinstance(b, Matrix):
        if a.shape[1] != b.shape[0]:
            raise ValueError(f"cannot multiply shapes {a.shape} and {b.shape}")
        columns = list(zip(*b._rows))
        return Matrix(
            [sum(x * y for x, y in zip(row, col)) for col in columns]
            for row in a._rows
        )
    if isinstance(a, Matrix) and isinstance(b, Vector):
        if a.shape[1] != len(b):
            raise ValueError(f"cannot multiply shape {a.shape} by vector of size {len(b)}")
        return Vector(sum(x * y for x, y in zip(row, b)) for row in a._rows)
    if isinstance(a, Vector) and isinstance(b, Matrix):
        if len(a) != b.shape[0]:
            raise ValueError(f"cannot multiply vector of size {len(a)} by shape {b.shape}")
        return Vector(sum(x * y for x, y in zip(a, col)) for col in zip(*b._rows))
    raise TypeError(
        f"unsupported operand types: {type(a).__name__} and {type(b).__name__}"
    )


def identity(n: int) -> Matrix:
    """The ``n`` x ``n`` identity matrix."""
    result = Matrix.zeros(n, n)
    for i in range(n):
        result[i, i] = 1
    return result


def transpose(m: Matrix) -> Matrix:
    """The transpose of ``m``."""
    return Matrix(list(col) for col in zip(*m._rows))


def direct_sum(a: Matrix, b: Matrix) -> Matrix:
    """Block-diagonal matrix with ``a`` top-left and ``b`` bottom-right."""
    n, m = a.shape
    p, q = b.shape
    rows = [row + [0] * q for row in a._copy_rows()]
    rows += [[0] * m + row for row in b._copy_rows()]
    return Matrix(rows)


def kronecker_product(a: Matrix, b: Matrix) -> Matrix:
    """Kronecker product of two matrices."""
    n, m = a.shape
    p, q = b.shape
    return Matrix(
        [a[i // p, j // q] * b[i % p, j % q] for j in range(m * q)]
        for i in range(n * p)
    )


def _require_square(m: Matrix) -> int:
    rows, columns = m.shape
    if rows != columns:
        raise ValueError(f"matrix must be square, got {m.shape}")
    return rows


def determinant(m: Matrix):
    """Determinant by fraction-free elimination with row swaps."""
    n = _require_square(m)
    a = m._copy_rows()
    result_sign = 1
    for k in range(n - 1):
        if a[k][k] == 0:
            for j in range(k + 1, n):
                if a[j][k] != 0:
                    a[j], a[k] = a[k], a[j]
                    result_sign = -result_sign
                    break
            else:
                return 0
        for i in range(k + 1, n):
            for j in range(k + 1, n):
                a[i][j] = a[k][k] * a[i][j] - a[i][k] * a[k][j]
                if k != 0:
                    a[i][j] /= a[k - 1][k - 1]
    return result_sign * a[n - 1][n - 1]


def inverse(m: Matrix) -> Matrix:
    """Inverse by Gauss-Jordan elimination.

    The matrix is not checked for singularity beforehand; a zero pivot
    raises ``ZeroDivisionError``.
    """
    n = _require_square(m)
    a = m._copy_rows()
    result = identity(n)._copy_rows()

    # Move the last row to the top of both halves of the augmented matrix.
    a.insert(0, a.pop())
    result.insert(0, result.pop())

    for i in range(n):
        for j in range(n):
            if j != i:
                factor = a[j][i] / a[i][i]
                a[j] = [x - y * factor for x, y in zip(a[j], a[i])]
                result[j] = [x - y * factor for x, y in zip(result[j], result[i])]

    for i in range(n):
        pivot = a[i][i]
        result[i] = [x / pivot for x in result[i]]

    return Matrix(result)


def expand(m: Matrix) -> Matrix:
    """Embed an N x N matrix into an (N+1) x (N+1) one with a trailing 1."""
    n = _require_square(m)
    rows = [row + [0] for row in m._copy_rows()]
    rows.append([0] * n + [1])
    return Matrix(rows)


def expm(m: Matrix, tolerance: float = 1e-3, max_iteration: int = 30) -> Matrix:
    """Matrix exponential by its Taylor series.

    Stops when two successive partial sums differ by less than
    ``tolerance`` in every element, or after ``max_iteration`` terms.
    """
    n = _require_square(m)
    factorial = 1
    power = identity(n)
    previous = Matrix.zeros(n, n)
    result = identity(n)
    for k in range(1, max_iteration):
        factorial *= k
        power = dot(power, m)
        result = result + (1 / factorial) * power
        if maximum(absolute(previous - result)) < tolerance:
            return result
        previous = result
    return result