"""Estimating the cost of a verifier."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class Cost:
    """Cost of verification."""

    num_instance: int = 0
    """Number of instances."""
    num_commitment: int = 0
    """Number of commitments in the proof."""
    num_evaluation: int = 0
    """Number of evaluations in the proof."""
    num_msm: int = 0
    """Number of scalar multiplications to perform."""
    num_pairing: int = 0
    """Number of pairings to perform."""

    def __add__(self, other: Cost) -> Cost:
        if not isinstance(other, Cost):
            return NotImplemented
        return Cost(
            **{
                f.name: getattr(self, f.name) + getattr(other, f.name)
                for f in fields(self)
            }
        )


class CostEstimation(ABC):
    """Something whose verification cost can be estimated from an input."""

    @classmethod
    @abstractmethod
    def estimate_cost(cls, input: Any) -> Cost:
        """Estimate the cost of the verifier given the input."""