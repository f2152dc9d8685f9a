"""Complex numbers stored as a real and an imaginary part."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Union

Operand = Union["Complex", Real]


@dataclass
class Complex:
    """A mutable complex number.

    Adding or subtracting a real number changes only the real part;
    multiplying or dividing by one scales both parts.
    """

    real: float = 0.0
    imag: float = 0.0

    @classmethod
    def from_polar(cls, modulus: float, argument: float) -> "Complex":
        """Build a complex number from its polar form."""
        c = cls()
        c.set_polar(modulus, argument)
        return c

    def modulus2(self) -> float:
        """Square of the modulus."""
        return self.real * self.real + self.imag * self.imag

    def modulus(self) -> float:
        """The modulus."""
        return math.sqrt(self.modulus2())

    def argument(self) -> float:
        """The argument, in radians."""
        return math.atan2(self.imag, self.real)

    def conjugate(self) -> None:
        """Conjugate in place."""
        self.imag = -self.imag

    def normalize(self) -> None:
        """Scale in place to unit modulus."""
        m = self.modulus()
        self.real /= m
        self.imag /= m

    def set_polar(self, modulus: float, argument: float) -> None:
        """Set both parts from a polar form."""
        self.real = modulus * math.cos(argument)
        self.imag = modulus * math.sin(argument)

    def polar(self) -> tuple[float, float]:
        """Return ``(modulus, argument)``."""
        return self.modulus(), self.argument()

    def _parts(self, other: Operand) -> tuple[float, float]:
        if isinstance(other, Complex):
            return other.real, other.imag
        return other, 0

    def _sum(self, other: Operand, sign: int) -> tuple[float, float]:
        re, im = self._parts(other)
        return self.real + sign * re, self.imag + sign * im

    def _product(self, other: Operand) -> tuple[float, float]:
        if isinstance(other, Complex):
            return (
                self.real * other.real - self.imag * other.imag,
                self.real * other.imag + self.imag * other.real,
            )
        return self.real * other, self.imag * other

    def _quotient(self, other: Operand) -> tuple[float, float]:
        if isinstance(other, Complex):
            d = other.modulus2()
            return (
                (self.real * other.real + self.imag * other.imag) / d,
                (self.imag * other.real - self.real * other.imag) / d,
            )
        return self.real / other, self.imag / other

    @staticmethod
    def _supported(other: object) -> bool:
        return isinstance(other, (Complex, Real))

    def __add__(self, other: Operand) -> "Complex":
        if not self._supported(other):
            return NotImplemented
        return Complex(*self._sum(other, 1))

    def __sub__(self, other: Operand) -> "Complex":
        if not self._supported(other):
            return NotImplemented
        return Complex(*self._sum(other, -1))

    def __mul__(self, other: Operand) -> "Complex":
        if not self._supported(other):
            return NotImplemented
        return Complex(*self._product(other))

    def __truediv__(self, other: Operand) -> "Complex":
        if not self._supported(other):
            return NotImplemented
        return Complex(*self._quotient(other))

    def __iadd__(self, other: Operand) -> "Complex":
        if not self._supported(other):
            return NotImplemented
        self.real, self.imag = self._sum(other, 1)
        return self

    def __isub__(self, other: Operand) -> "Complex":
        if not self._supported(other):
            return NotImplemented
        self.real, self.imag = self._sum(other, -1)
        return self

    def __imul__(self, other: Operand) -> "Complex":
        if not self._supported(other):
            return NotImplemented
        self.real, self.imag = self._product(other)
        return self

    def __itruediv__(self, other: Operand) -> "Complex":
        if not self._supported(other):
            return NotImplemented
        self.real, self.imag = self._quotient(other)
        return self