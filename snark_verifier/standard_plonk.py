"""A standard PLONK circuit and a small constraint system to check it against.

The circuit enforces one custom gate on every row:

    q_a·a + q_b·b + q_c·c + q_ab·a·b + constant + instance = 0

and copies a single advice cell into the ``b`` and ``c`` columns.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple, Union

from .errors import AssertionFailure, InvalidInstances
from .field import FR_MODULUS, FieldElement, fr

GATE_NAME = "q_a·a + q_b·b + q_c·c + q_ab·a·b + constant + instance = 0"

_Value = Union[FieldElement, int]


class ColumnKind(enum.Enum):
    """The kind of a column in the circuit's table."""

    ADVICE = "advice"
    FIXED = "fixed"
    INSTANCE = "instance"


@dataclass(frozen=True)
class Column:
    """A column of the table, identified by its kind and index within that kind."""

    kind: ColumnKind
    index: int


@dataclass
class ConstraintSystem:
    """The columns, equality permutation and gates a circuit declares."""

    advice_columns: List[Column] = field(default_factory=list)
    fixed_columns: List[Column] = field(default_factory=list)
    instance_columns: List[Column] = field(default_factory=list)
    equality: Set[Column] = field(default_factory=set)
    gates: List[str] = field(default_factory=list)
    minimum_degree: Optional[int] = None

    def _new_column(self, kind: ColumnKind, columns: List[Column]) -> Column:
        column = Column(kind, len(columns))
        columns.append(column)
        return column

    def advice_column(self) -> Column:
        """Allocate a new advice column."""
        return self._new_column(ColumnKind.ADVICE, self.advice_columns)

    def fixed_column(self) -> Column:
        """Allocate a new fixed column."""
        return self._new_column(ColumnKind.FIXED, self.fixed_columns)

    def instance_column(self) -> Column:
        """Allocate a new instance column."""
        return self._new_column(ColumnKind.INSTANCE, self.instance_columns)

    def _columns_of(self, kind: ColumnKind) -> List[Column]:
        return {
            ColumnKind.ADVICE: self.advice_columns,
            ColumnKind.FIXED: self.fixed_columns,
            ColumnKind.INSTANCE: self.instance_columns,
        }[kind]

    def enable_equality(self, column: Column) -> None:
        """Allow the column to take part in copy constraints."""
        if column not in self._columns_of(column.kind):
            raise ValueError(f"unknown column {column}")
        self.equality.add(column)

    def set_minimum_degree(self, degree: int) -> None:
        """Require the constraint system to have at least this degree."""
        if degree < 1:
            raise ValueError("minimum degree must be positive")
        self.minimum_degree = degree


@dataclass(frozen=True)
class AssignedCell:
    """A cell that has been assigned a value."""

    column: Column
    row: int
    value: FieldElement


def _to_fr(value: _Value) -> FieldElement:
    if isinstance(value, FieldElement):
        if value.modulus != FR_MODULUS:
            raise ValueError("value is not an element of the scalar field")
        return value
    return fr(value)


class Region:
    """Assignments of values to cells, with the copy constraints between them."""

    def __init__(
        self,
        meta: ConstraintSystem,
        instances: Sequence[Sequence[_Value]] = (),
    ) -> None:
        self.meta = meta
        self._instances = [[_to_fr(value) for value in column] for column in instances]
        self._cells: Dict[Tuple[Column, int], FieldElement] = {}
        self.copies: List[Tuple[Tuple[Column, int], Tuple[Column, int]]] = []

    def _assign(
        self, kind: ColumnKind, column: Column, row: int, value: _Value
    ) -> AssignedCell:
        if column.kind is not kind:
            raise ValueError(f"column {column} is not a {kind.value} column")
        if column not in self.meta._columns_of(kind):
            raise ValueError(f"unknown column {column}")
        if row < 0:
            raise ValueError("row must not be negative")
        element = _to_fr(value)
        self._cells[(column, row)] = element
        return AssignedCell(column, row, element)

    def assign_advice(self, column: Column, row: int, value: _Value) -> AssignedCell:
        """Assign a witness value to an advice cell."""
        return self._assign(ColumnKind.ADVICE, column, row, value)

    def assign_fixed(self, column: Column, row: int, value: _Value) -> AssignedCell:
        """Assign a constant value to a fixed cell."""
        return self._assign(ColumnKind.FIXED, column, row, value)

    def copy_advice(self, source: AssignedCell, column: Column, row: int) -> AssignedCell:
        """Copy an assigned cell into an advice cell and constrain them equal."""
        copied = self.assign_advice(column, row, source.value)
        self.copies.append(((source.column, source.row), (column, row)))
        return copied

    def value(self, column: Column, row: int) -> FieldElement:
        """The value of a cell; unassigned cells hold zero."""
        if column.kind is ColumnKind.INSTANCE:
            if column.index < len(self._instances):
                values = self._instances[column.index]
                if row < len(values):
                    return values[row]
            return fr(0)
        return self._cells.get((column, row), fr(0))

    @property
    def num_rows(self) -> int:
        """Number of rows used by assignments or instances."""
        rows = [row + 1 for _, row in self._cells]
        rows.extend(len(values) for values in self._instances)
        return max(rows, default=0)


@dataclass(frozen=True)
class StandardPlonkConfig:
    """The columns of the standard PLONK gate."""

    a: Column
    b: Column
    c: Column
    q_a: Column
    q_b: Column
    q_c: Column
    q_ab: Column
    constant: Column
    instance: Column

    @classmethod
    def configure(cls, meta: ConstraintSystem) -> StandardPlonkConfig:
        """Declare the columns and the gate in the constraint system."""
        a, b, c = (meta.advice_column() for _ in range(3))
        q_a, q_b, q_c, q_ab, constant = (meta.fixed_column() for _ in range(5))
        instance = meta.instance_column()
        for column in (a, b, c):
            meta.enable_equality(column)
        meta.gates.append(GATE_NAME)
        return cls(a, b, c, q_a, q_b, q_c, q_ab, constant, instance)

    def _evaluate_gate(self, region: Region, row: int) -> FieldElement:
        a, b, c = (region.value(column, row) for column in (self.a, self.b, self.c))
        q_a, q_b, q_c, q_ab, constant = (
            region.value(column, row)
            for column in (self.q_a, self.q_b, self.q_c, self.q_ab, self.constant)
        )
        instance = region.value(self.instance, row)
        return q_a * a + q_b * b + q_c * c + q_ab * a * b + constant + instance


@dataclass(frozen=True)
class StandardPlonk:
    """A circuit whose single public instance equals its witness."""

    value: FieldElement = field(default_factory=lambda: fr(0))

    @classmethod
    def rand(cls, rng) -> StandardPlonk:
        """A circuit with a random 32-bit witness drawn from ``rng``."""
        return cls(fr(rng.getrandbits(32)))

    @staticmethod
    def num_instance() -> List[int]:
        """Number of instances in each instance column."""
        return [1]

    def instances(self) -> List[List[FieldElement]]:
        """The public instances of this circuit."""
        return [[self.value]]

    def without_witnesses(self) -> StandardPlonk:
        """The same circuit with its witness cleared."""
        return type(self)()

    @classmethod
    def configure(cls, meta: ConstraintSystem) -> StandardPlonkConfig:
        """Configure the constraint system for this circuit."""
        meta.set_minimum_degree(4)
        return StandardPlonkConfig.configure(meta)

    def synthesize(self, config: StandardPlonkConfig, region: Region) -> None:
        """Assign the circuit's cells in the region."""
        region.assign_advice(config.a, 0, self.value)
        region.assign_fixed(config.q_a, 0, -fr(1))

        region.assign_advice(config.a, 1, -fr(5))
        fixed = (config.q_a, config.q_b, config.q_c, config.q_ab, config.constant)
        for idx, column in enumerate(fixed, start=1):
            region.assign_fixed(column, 1, fr(idx))

        a = region.assign_advice(config.a, 2, fr(1))
        region.copy_advice(a, config.b, 3)
        region.copy_advice(a, config.c, 4)


def mock_verify(circuit: StandardPlonk, instances: Sequence[Sequence[_Value]]) -> Region:
    """Synthesize the circuit and check every gate and copy constraint.

    Returns the synthesized region; raises InvalidInstances when the instances
    do not fit the instance columns and AssertionFailure when a constraint fails.
    """
    meta = ConstraintSystem()
    config = type(circuit).configure(meta)
    if len(instances) != len(meta.instance_columns):
        raise InvalidInstances()

    region = Region(meta, instances)
    circuit.synthesize(config, region)

    for row in range(region.num_rows):
        if not config._evaluate_gate(region, row).is_zero():
            raise AssertionFailure(f"gate '{GATE_NAME}' is not satisfied at row {row}")

    for (src_column, src_row), (dst_column, dst_row) in region.copies:
        for column in (src_column, dst_column):
            if column not in meta.equality:
                raise AssertionFailure(f"equality is not enabled for column {column}")
        if region.value(src_column, src_row) != region.value(dst_column, dst_row):
            raise AssertionFailure(
                f"copy constraint between {src_column} row {src_row} "
                f"and {dst_column} row {dst_row} is not satisfied"
            )
    return region