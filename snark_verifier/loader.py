"""Abstractions of field elements and elliptic curve points for generic verifiers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import reduce
from typing import Any, Iterable, List, Optional, Protocol, Sequence, Tuple

from .field import FieldElement


class CurveAffine(Protocol):
    """The curve a loader works with: it must name its identity and generator."""

    def identity(self) -> Any:
        ...

    def generator(self) -> Any:
        ...


class LoadedEcPoint(ABC):
    """An elliptic curve point held by a loader."""

    @abstractmethod
    def loader(self) -> Loader:
        """The loader that holds this point."""


class LoadedScalar(ABC):
    """A field element held by a loader, supporting field arithmetic."""

    @abstractmethod
    def loader(self) -> ScalarLoader:
        """The loader that holds this scalar."""

    @abstractmethod
    def __add__(self, other: LoadedScalar) -> LoadedScalar:
        ...

    @abstractmethod
    def __sub__(self, other: LoadedScalar) -> LoadedScalar:
        ...

    @abstractmethod
    def __mul__(self, other: LoadedScalar) -> LoadedScalar:
        ...

    @abstractmethod
    def __neg__(self) -> LoadedScalar:
        ...

    @abstractmethod
    def invert(self) -> Optional[LoadedScalar]:
        """Return the inverse, or None if there is none."""

    def square(self) -> LoadedScalar:
        """Return the square."""
        return self * self

    def pow_const(self, exp: int) -> LoadedScalar:
        """Return this scalar raised to a positive constant exponent."""
        if exp <= 0:
            raise ValueError("exponent must be positive")
        base = self
        while exp & 1 == 0:
            base = base.square()
            exp >>= 1
        acc = base
        while exp > 1:
            exp >>= 1
            base = base.square()
            if exp & 1:
                acc = acc * base
        return acc

    def powers(self, n: int) -> List[LoadedScalar]:
        """Return the powers of this scalar from 0 up to n - 1."""
        if n < 1:
            raise ValueError("number of powers must be positive")
        result = [self.loader().load_one()]
        if n > 1:
            result.append(self)
            while len(result) < n:
                result.append(result[-1] * self)
        return result


class EcPointLoader(ABC):
    """Loader of elliptic curve points."""

    @property
    @abstractmethod
    def curve(self) -> CurveAffine:
        """The curve whose points are loaded."""

    @abstractmethod
    def ec_point_load_const(self, value: Any) -> LoadedEcPoint:
        """Load a constant point."""

    def ec_point_load_zero(self) -> LoadedEcPoint:
        """Load the identity as a constant."""
        return self.ec_point_load_const(self.curve.identity())

    def ec_point_load_one(self) -> LoadedEcPoint:
        """Load the generator as a constant."""
        return self.ec_point_load_const(self.curve.generator())

    @abstractmethod
    def ec_point_assert_eq(
        self, annotation: str, lhs: LoadedEcPoint, rhs: LoadedEcPoint
    ) -> None:
        """Assert two points are equal, raising AssertionFailure otherwise."""

    @abstractmethod
    def multi_scalar_multiplication(
        self, pairs: Sequence[Tuple[LoadedScalar, LoadedEcPoint]]
    ) -> LoadedEcPoint:
        """Return the sum of each point multiplied by its scalar."""


class ScalarLoader(ABC):
    """Loader of field elements."""

    @property
    @abstractmethod
    def scalar_modulus(self) -> int:
        """Modulus of the scalar field."""

    def _field(self, value: int) -> FieldElement:
        return FieldElement(value, self.scalar_modulus)

    @abstractmethod
    def load_const(self, value: FieldElement) -> LoadedScalar:
        """Load a constant field element."""

    def load_zero(self) -> LoadedScalar:
        """Load zero as a constant."""
        return self.load_const(self._field(0))

    def load_one(self) -> LoadedScalar:
        """Load one as a constant."""
        return self.load_const(self._field(1))

    @abstractmethod
    def assert_eq(self, annotation: str, lhs: LoadedScalar, rhs: LoadedScalar) -> None:
        """Assert two scalars are equal, raising AssertionFailure otherwise."""

    def sum_with_coeff_and_const(
        self,
        values: Sequence[Tuple[FieldElement, LoadedScalar]],
        constant: FieldElement,
    ) -> LoadedScalar:
        """Return sum(coeff * value) + constant."""
        if not values:
            return self.load_const(constant)
        loader = values[0][1].loader()
        terms = [] if constant == 0 else [loader.load_const(constant)]
        terms.extend(
            value if coeff == 1 else loader.load_const(coeff) * value
            for coeff, value in values
        )
        return reduce(lambda acc, term: acc + term, terms)

    def sum_products_with_coeff_and_const(
        self,
        values: Sequence[Tuple[FieldElement, LoadedScalar, LoadedScalar]],
        constant: FieldElement,
    ) -> LoadedScalar:
        """Return sum(coeff * lhs * rhs) + constant."""
        if not values:
            return self.load_const(constant)
        loader = values[0][1].loader()
        terms = [] if constant == 0 else [loader.load_const(constant)]
        terms.extend(
            lhs * rhs if coeff == 1 else loader.load_const(coeff) * lhs * rhs
            for coeff, lhs, rhs in values
        )
        return reduce(lambda acc, term: acc + term, terms)

    def sum_with_coeff(
        self, values: Sequence[Tuple[FieldElement, LoadedScalar]]
    ) -> LoadedScalar:
        """Return sum(coeff * value)."""
        return self.sum_with_coeff_and_const(values, self._field(0))

    def sum_with_const(
        self, values: Sequence[LoadedScalar], constant: FieldElement
    ) -> LoadedScalar:
        """Return sum(values) + constant."""
        one = self._field(1)
        return self.sum_with_coeff_and_const([(one, value) for value in values], constant)

    def sum(self, values: Sequence[LoadedScalar]) -> LoadedScalar:
        """Return the sum of the values."""
        return self.sum_with_const(values, self._field(0))

    def sum_products_with_coeff(
        self, values: Sequence[Tuple[FieldElement, LoadedScalar, LoadedScalar]]
    ) -> LoadedScalar:
        """Return sum(coeff * lhs * rhs)."""
        return self.sum_products_with_coeff_and_const(values, self._field(0))

    def sum_products_with_const(
        self,
        values: Sequence[Tuple[LoadedScalar, LoadedScalar]],
        constant: FieldElement,
    ) -> LoadedScalar:
        """Return sum(lhs * rhs) + constant."""
        one = self._field(1)
        return self.sum_products_with_coeff_and_const(
            [(one, lhs, rhs) for lhs, rhs in values], constant
        )

    def sum_products(
        self, values: Sequence[Tuple[LoadedScalar, LoadedScalar]]
    ) -> LoadedScalar:
        """Return sum(lhs * rhs)."""
        return self.sum_products_with_const(values, self._field(0))

    def product(self, values: Iterable[LoadedScalar]) -> LoadedScalar:
        """Return the product of the values."""
        return reduce(lambda acc, value: acc * value, values, self.load_one())

    def batch_invert(self, values: Iterable[LoadedScalar]) -> List[LoadedScalar]:
        """Invert each value; a value without an inverse is kept as it is."""
        inverted = []
        for value in values:
            inverse = value.invert()
            inverted.append(value if inverse is None else inverse)
        return inverted


class Loader(EcPointLoader, ScalarLoader):
    """A loader of both points and scalars, with cost metering hooks."""

    def start_cost_metering(self, identifier: str) -> None:
        """Start cost metering under an identifier."""

    def end_cost_metering(self) -> None:
        """End the most recently started cost metering."""