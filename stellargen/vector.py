"""Fixed-size mathematical vector with element-wise arithmetic."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from numbers import Real
from typing import Callable, Union

Scalar = Real
Operand = Union["Vector", Real]


class Vector:
    """A mutable vector of numbers.

    Arithmetic with a scalar applies to every component; arithmetic with
    another vector is element-wise (``*`` is not a dot product).
    """

    __slots__ = ("_components",)

    def __init__(self, components: Iterable[Real] = ()) -> None:
        self._components = list(components)

    @classmethod
    def filled(cls, size: int, value: Real) -> "Vector":
        """Return a vector of ``size`` components all equal to ``value``."""
        if size < 0:
            raise ValueError(f"vector size must be non-negative, got {size}")
        return cls([value] * size)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Real]:
        return iter(self._components)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self._components[index])
        return self._components[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._components == other._components

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Vector({self._components!r})"

    def norm2(self) -> Real:
        """Square of the Euclidean norm."""
        return sum(c * c for c in self._components)

    def norm(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.norm2())

    def normalize(self) -> None:
        """Scale the vector in place to unit length."""
        n = self.norm()
        self._components = [c / n for c in self._components]

    def _combine(self, other: Operand, op: Callable[[Real, Real], Real]) -> list:
        if isinstance(other, Vector):
            if len(other) != len(self):
                raise ValueError(
                    f"vector sizes differ: {len(self)} and {len(other)}"
                )
            return [op(a, b) for a, b in zip(self._components, other._components)]
        if isinstance(other, Real):
            return [op(a, other) for a in self._components]
        raise TypeError(f"unsupported operand type: {type(other).__name__}")

    def _binary(self, other: Operand, op) -> "Vector":
        if not isinstance(other, (Vector, Real)):
            return NotImplemented
        return Vector(self._combine(other, op))

    def _inplace(self, other: Operand, op) -> "Vector":
        if not isinstance(other, (Vector, Real)):
            return NotImplemented
        self._components = self._combine(other, op)
        return self

    def __add__(self, other: Operand) -> "Vector":
        return self._binary(other, lambda a, b: a + b)

    def __sub__(self, other: Operand) -> "Vector":
        return self._binary(other, lambda a, b: a - b)

    def __mul__(self, other: Operand) -> "Vector":
        return self._binary(other, lambda a, b: a * b)

    def __truediv__(self, other: Operand) -> "Vector":
        return self._binary(other, lambda a, b: a / b)

    def __iadd__(self, other: Operand) -> "Vector":
        return self._inplace(other, lambda a, b: a + b)

    def __isub__(self, other: Operand) -> "Vector":
        return self._inplace(other, lambda a, b: a - b)

    def __imul__(self, other: Operand) -> "Vector":
        return self._inplace(other, lambda a, b: a * b)

    def __itruediv__(self, other: Operand) -> "Vector":
        return self._inplace(other, lambda a, b: a / b)