"""Errors raised while verifying a proof."""

from __future__ import annotations


class VerifierError(Exception):
    """Base class of every error raised during verification."""


class InvalidInstances(VerifierError):
    """Instances don't match the amount specified in the protocol."""

    def __init__(
        self, message: str = "instances don't match the amount specified in protocol"
    ) -> None:
        super().__init__(message)
        self.message = message


class InvalidProtocol(VerifierError):
    """Protocol that is unreasonable for a verifier."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AssertionFailure(VerifierError):
    """An assertion made during verification did not hold."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TranscriptError(VerifierError):
    """Reading from or writing to a transcript failed."""

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(f"{kind}: {message}")
        self.kind = kind
        self.message = message