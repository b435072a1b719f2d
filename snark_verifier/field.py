"""Prime field elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

FR_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617
"""Order of the scalar field of BN254."""

FQ_MODULUS = 21888242871839275222246405745257275088696311157297823662689037894645226208583
"""Order of the base field of BN254."""

_Operand = Union["FieldElement", int]


@dataclass(frozen=True, eq=False)
class FieldElement:
    """An element of the prime field of the given modulus."""

    value: int
    modulus: int

    def __post_init__(self) -> None:
        if self.modulus < 2:
            raise ValueError("modulus must be at least 2")
        object.__setattr__(self, "value", self.value % self.modulus)

    def _coerce(self, other: object) -> Optional[FieldElement]:
        if isinstance(other, FieldElement):
            if other.modulus != self.modulus:
                raise ValueError("field elements belong to different fields")
            return other
        if isinstance(other, int):
            return FieldElement(other, self.modulus)
        return None

    def _new(self, value: int) -> FieldElement:
        return FieldElement(value, self.modulus)

    def __add__(self, other: _Operand) -> FieldElement:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._new(self.value + rhs.value)

    __radd__ = __add__

    def __sub__(self, other: _Operand) -> FieldElement:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._new(self.value - rhs.value)

    def __rsub__(self, other: _Operand) -> FieldElement:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._new(lhs.value - self.value)

    def __mul__(self, other: _Operand) -> FieldElement:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._new(self.value * rhs.value)

    __rmul__ = __mul__

    def __truediv__(self, other: _Operand) -> FieldElement:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        inverse = rhs.invert()
        if inverse is None:
            raise ZeroDivisionError("division by zero field element")
        return self * inverse

    def __neg__(self) -> FieldElement:
        return self._new(-self.value)

    def __pow__(self, exp: int) -> FieldElement:
        if not isinstance(exp, int):
            return NotImplemented
        if exp < 0:
            inverse = self.invert()
            if inverse is None:
                raise ZeroDivisionError("zero has no inverse")
            return inverse**-exp
        return self._new(pow(self.value, exp, self.modulus))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return self.modulus == other.modulus and self.value == other.value
        if isinstance(other, int):
            return self.value == other % self.modulus
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"FieldElement({self.value:#x}, modulus={self.modulus:#x})"

    def square(self) -> FieldElement:
        """Return the square of this element."""
        return self * self

    def invert(self) -> Optional[FieldElement]:
        """Return the multiplicative inverse, or None for zero."""
        if self.value == 0:
            return None
        return self._new(pow(self.value, -1, self.modulus))

    def is_zero(self) -> bool:
        """Whether this is the additive identity."""
        return self.value == 0


def fr(value: int) -> FieldElement:
    """An element of the BN254 scalar field."""
    return FieldElement(value, FR_MODULUS)


def fq(value: int) -> FieldElement:
    """An element of the BN254 base field."""
    return FieldElement(value, FQ_MODULUS)