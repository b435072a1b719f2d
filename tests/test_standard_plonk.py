import random

import pytest
from hypothesis import given, strategies as st

from snark_verifier.errors import AssertionFailure, InvalidInstances
from snark_verifier.field import fq, fr
from snark_verifier.standard_plonk import (
    Column,
    ColumnKind,
    ConstraintSystem,
    Region,
    StandardPlonk,
    StandardPlonkConfig,
    mock_verify,
)


def _configured():
    meta = ConstraintSystem()
    config = StandardPlonk.configure(meta)
    return meta, config


def test_configure_declares_columns_and_gate():
    meta, config = _configured()
    assert len(meta.advice_columns) == 3
    assert len(meta.fixed_columns) == 5
    assert len(meta.instance_columns) == 1
    assert meta.equality == {config.a, config.b, config.c}
    assert meta.minimum_degree == 4
    assert meta.gates == ["q_a·a + q_b·b + q_c·c + q_ab·a·b + constant + instance = 0"]


def test_config_column_kinds():
    _, config = _configured()
    assert {config.a.kind, config.b.kind, config.c.kind} == {ColumnKind.ADVICE}
    assert config.instance.kind is ColumnKind.INSTANCE
    assert config.constant == Column(ColumnKind.FIXED, 4)


def test_num_instance_and_instances():
    circuit = StandardPlonk(fr(7))
    assert StandardPlonk.num_instance() == [1]
    assert circuit.instances() == [[fr(7)]]


def test_rand_is_deterministic_and_32_bit():
    first = StandardPlonk.rand(random.Random(1))
    second = StandardPlonk.rand(random.Random(1))
    assert first == second
    assert 0 <= int(first.value) < 2**32


def test_without_witnesses_clears_value():
    circuit = StandardPlonk(fr(42))
    assert circuit.without_witnesses().value == fr(0)


def test_mock_verify_accepts_valid_circuit():
    circuit = StandardPlonk(fr(11))
    region = mock_verify(circuit, circuit.instances())
    _, config = _configured()
    assert region.value(config.a, 0) == fr(11)
    assert region.value(config.b, 3) == fr(1)
    assert region.value(config.c, 4) == fr(1)
    assert region.value(config.a, 1) == -fr(5)
    assert region.value(config.instance, 0) == fr(11)
    assert region.num_rows == 5


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_mock_verify_accepts_any_witness(value):
    circuit = StandardPlonk(fr(value))
    region = mock_verify(circuit, circuit.instances())
    assert len(region.copies) == 2


def test_mock_verify_rejects_wrong_instance():
    circuit = StandardPlonk(fr(3))
    with pytest.raises(AssertionFailure):
        mock_verify(circuit, [[fr(4)]])


def test_mock_verify_rejects_wrong_instance_column_count():
    circuit = StandardPlonk(fr(3))
    with pytest.raises(InvalidInstances):
        mock_verify(circuit, [[fr(3)], [fr(3)]])


def test_without_witnesses_verifies_with_zero_instance():
    circuit = StandardPlonk(fr(9)).without_witnesses()
    region = mock_verify(circuit, [[0]])
    assert region.value(Column(ColumnKind.ADVICE, 0), 0) == fr(0)


class _TamperedCopy(StandardPlonk):
    def synthesize(self, config, region):
        super().synthesize(config, region)
        region.assign_advice(config.c, 4, fr(2))


class _CopyIntoUnequalColumn(StandardPlonk):
    def synthesize(self, config, region):
        super().synthesize(config, region)
        extra = region.meta.advice_column()
        source = region.assign_advice(config.a, 5, fr(0))
        region.copy_advice(source, extra, 5)


def test_mock_verify_rejects_broken_copy():
    circuit = _TamperedCopy(fr(1))
    with pytest.raises(AssertionFailure, match="copy constraint"):
        mock_verify(circuit, circuit.instances())


def test_mock_verify_rejects_copy_without_equality():
    circuit = _CopyIntoUnequalColumn(fr(1))
    with pytest.raises(AssertionFailure, match="equality"):
        mock_verify(circuit, circuit.instances())


def test_region_rejects_wrong_column_kind():
    meta, config = _configured()
    region = Region(meta)
    with pytest.raises(ValueError):
        region.assign_advice(config.q_a, 0, 1)
    with pytest.raises(ValueError):
        region.assign_fixed(config.a, 0, 1)


def test_region_rejects_negative_row_and_foreign_field():
    meta, config = _configured()
    region = Region(meta)
    with pytest.raises(ValueError):
        region.assign_advice(config.a, -1, 1)
    with pytest.raises(ValueError):
        region.assign_advice(config.a, 0, fq(1))


def test_region_copy_records_constraint():
    meta, config = _configured()
    region = Region(meta)
    cell = region.assign_advice(config.a, 0, 5)
    copied = region.copy_advice(cell, config.b, 1)
    assert copied.value == fr(5)
    assert region.copies == [((config.a, 0), (config.b, 1))]
    assert region.value(config.c, 9) == fr(0)


def test_enable_equality_rejects_unknown_column():
    meta = ConstraintSystem()
    with pytest.raises(ValueError):
        meta.enable_equality(Column(ColumnKind.ADVICE, 0))


def test_set_minimum_degree_rejects_non_positive():
    meta = ConstraintSystem()
    with pytest.raises(ValueError):
        meta.set_minimum_degree(0)


def test_standard_plonk_config_configure_without_minimum_degree():
    meta = ConstraintSystem()
    config = StandardPlonkConfig.configure(meta)
    assert meta.minimum_degree is None
    assert config.q_ab == Column(ColumnKind.FIXED, 3)