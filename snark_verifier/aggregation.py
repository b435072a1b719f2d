"""Aggregating several SNARKs into one circuit with a KZG accumulator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from .field import FR_MODULUS, FieldElement, fr

LIMBS = 4
"""Number of limbs an accumulator coordinate is split into."""

BITS = 68
"""Number of bits in each limb."""

Point = Tuple[FieldElement, FieldElement]


def fe_to_limbs(
    value: Union[FieldElement, int], limbs: int = LIMBS, bits: int = BITS
) -> List[FieldElement]:
    """Split a field element into little-endian limbs of ``bits`` bits each.

    Each limb is returned as an element of the scalar field.
    """
    if limbs < 1 or bits < 1:
        raise ValueError("limbs and bits must be positive")
    if bits >= FR_MODULUS.bit_length():
        raise ValueError("limbs do not fit in the scalar field")
    number = int(value)
    if number < 0:
        raise ValueError("value must not be negative")
    if number >> (limbs * bits):
        raise ValueError(f"value does not fit in {limbs} limbs of {bits} bits")
    mask = (1 << bits) - 1
    return [fr((number >> (bits * i)) & mask) for i in range(limbs)]


@dataclass(frozen=True)
class Snark:
    """A proof with the protocol it was made for and its public instances."""

    protocol: Any
    instances: List[List[FieldElement]]
    proof: bytes


@dataclass(frozen=True)
class SnarkWitness:
    """A SNARK as a witness of the aggregation circuit; ``None`` marks unknown values."""

    protocol: Any
    instances: List[List[Optional[FieldElement]]]
    proof_data: Optional[bytes]

    @classmethod
    def from_snark(cls, snark: Snark) -> SnarkWitness:
        """A witness whose values are all known from the SNARK."""
        return cls(
            protocol=snark.protocol,
            instances=[list(column) for column in snark.instances],
            proof_data=bytes(snark.proof),
        )

    def without_witnesses(self) -> SnarkWitness:
        """The same witness with every instance and the proof unknown."""
        return SnarkWitness(
            protocol=self.protocol,
            instances=[[None] * len(column) for column in self.instances],
            proof_data=None,
        )

    def proof(self) -> Optional[bytes]:
        """The proof bytes, or None when unknown."""
        return self.proof_data


@dataclass(frozen=True)
class KzgAccumulator:
    """A KZG accumulator: two affine points given as (x, y) coordinates."""

    lhs: Point
    rhs: Point

    def coordinates(self) -> Tuple[FieldElement, ...]:
        """The coordinates in the order lhs.x, lhs.y, rhs.x, rhs.y."""
        return (*self.lhs, *self.rhs)


@dataclass(frozen=True)
class AggregationCircuit:
    """A circuit that aggregates SNARKs and exposes the accumulator as limbs."""

    svk: Any
    snarks: List[SnarkWitness] = field(default_factory=list)
    accumulator_limbs: List[FieldElement] = field(default_factory=list)
    as_proof_data: Optional[bytes] = None

    @classmethod
    def from_accumulator(
        cls,
        svk: Any,
        snarks: Iterable[Union[Snark, SnarkWitness]],
        accumulator: KzgAccumulator,
        as_proof: bytes,
    ) -> AggregationCircuit:
        """Build the circuit from SNARKs and the accumulator their proofs fold into."""
        witnesses = [
            snark if isinstance(snark, SnarkWitness) else SnarkWitness.from_snark(snark)
            for snark in snarks
        ]
        limbs = [
            limb
            for coordinate in accumulator.coordinates()
            for limb in fe_to_limbs(coordinate, LIMBS, BITS)
        ]
        return cls(
            svk=svk,
            snarks=witnesses,
            accumulator_limbs=limbs,
            as_proof_data=bytes(as_proof),
        )

    @staticmethod
    def accumulator_indices() -> List[Tuple[int, int]]:
        """Positions of the accumulator limbs among the instances."""
        return [(0, idx) for idx in range(4 * LIMBS)]

    @staticmethod
    def num_instance() -> List[int]:
        """Number of instances in each instance column."""
        return [4 * LIMBS]

    def instances(self) -> List[List[FieldElement]]:
        """The public instances: the accumulator limbs."""
        return [list(self.accumulator_limbs)]

    def as_proof(self) -> Optional[bytes]:
        """The accumulation proof, or None when unknown."""
        return self.as_proof_data

    def without_witnesses(self) -> AggregationCircuit:
        """The same circuit with its witnesses cleared."""
        return AggregationCircuit(
            svk=self.svk,
            snarks=[snark.without_witnesses() for snark in self.snarks],
            accumulator_limbs=[],
            as_proof_data=None,
        )


def limbs_to_fe(limbs: Sequence[Union[FieldElement, int]], bits: int = BITS) -> int:
    """Recombine little-endian limbs into the integer they encode."""
    return sum(int(limb) << (bits * i) for i, limb in enumerate(limbs))