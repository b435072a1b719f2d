# snark_verifier

Building blocks for a generic (S)NARK verifier, in pure Python with no
runtime dependencies.

## Modules

- `snark_verifier.field` — prime-field elements. `FieldElement` supports
  `+`, `-`, `*`, `/`, unary `-`, `**` (negative exponents invert) and
  comparison with other elements or plain integers, plus `square()`,
  `invert()` (returns `None` for zero) and `is_zero()`. `fr(value)` and
  `fq(value)` build elements of the BN254 scalar and base fields, whose
  orders are `FR_MODULUS` and `FQ_MODULUS`.
- `snark_verifier.loader` — abstract base classes for verifiers that work
  over some representation of scalars and curve points:
  - `LoadedScalar`, with `square`, `pow_const(exp)` (positive exponents
    only) and `powers(n)` (the powers 0 to n - 1);
  - `LoadedEcPoint`;
  - `ScalarLoader`, with `load_const`, `load_zero`, `load_one`, `assert_eq`
    and the helpers `sum_with_coeff_and_const`, `sum_with_coeff`,
    `sum_with_const`, `sum`, `sum_products_with_coeff_and_const`,
    `sum_products_with_coeff`, `sum_products_with_const`, `sum_products`,
    `product` and `batch_invert` (returns a new list; values without an
    inverse are kept unchanged);
  - `EcPointLoader`, with `ec_point_load_const`, `ec_point_load_zero`,
    `ec_point_load_one`, `ec_point_assert_eq` and
    `multi_scalar_multiplication`;
  - `Loader`, combining both, with no-op `start_cost_metering` and
    `end_cost_metering` hooks.
- `snark_verifier.cost` — `Cost`, a frozen record of verification cost
  (`num_instance`, `num_commitment`, `num_evaluation`, `num_msm`,
  `num_pairing`) that adds field by field with `+`, and the abstract
  `CostEstimation` interface with the class method `estimate_cost(input)`.
- `snark_verifier.errors` — `VerifierError` and its subclasses
  `InvalidInstances`, `InvalidProtocol`, `AssertionFailure` and
  `TranscriptError` (which carries a `kind` and a `message`).
- `snark_verifier.standard_plonk` — a small constraint system
  (`ConstraintSystem`, `Column`, `ColumnKind`, `Region`) and the standard
  PLONK example circuit `StandardPlonk`, whose gate is
  `q_a·a + q_b·b + q_c·c + q_ab·a·b + constant + instance = 0`.
  `mock_verify(circuit, instances)` synthesizes the circuit, checks the gate
  on every row and every copy constraint, and returns the `Region`; it
  raises `InvalidInstances` when the number of instance columns is wrong
  and `AssertionFailure` when a constraint fails.
- `snark_verifier.aggregation` — data types for aggregating proofs:
  `Snark`, `SnarkWitness` (unknown values are `None`), `KzgAccumulator`
  and `AggregationCircuit`, which exposes an accumulator's four coordinates
  as 4 × 4 limbs of 68 bits. `fe_to_limbs` splits a value into
  little-endian limbs and `limbs_to_fe` joins them back.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import random

from snark_verifier.aggregation import AggregationCircuit, KzgAccumulator, limbs_to_fe
from snark_verifier.cost import Cost
from snark_verifier.field import fq, fr
from snark_verifier.standard_plonk import StandardPlonk, mock_verify

a = fr(3)
assert a * a.invert() == fr(1)

total = Cost(num_instance=1, num_msm=2) + Cost(num_pairing=1)
assert total.num_pairing == 1

circuit = StandardPlonk.rand(random.Random(0))
mock_verify(circuit, circuit.instances())  # raises on an unsatisfied constraint

accumulator = KzgAccumulator(lhs=(fq(1), fq(2)), rhs=(fq(3), fq(4)))
agg = AggregationCircuit.from_accumulator(None, [], accumulator, b"")
limbs = agg.instances()[0]
assert len(limbs) == 16
assert limbs_to_fe(limbs[:4]) == 1
```

## What this package does not do

There are no concrete loaders, curve arithmetic, pairings, polynomial
commitments or transcripts here: the loader classes are interfaces to be
subclassed. The package does not generate or verify real proofs, does not
compute KZG accumulators (an `AggregationCircuit` is given one), and does
not produce or run verifier contracts. `mock_verify` only checks a
circuit's assignment against its own constraints. There is no command-line
tool.