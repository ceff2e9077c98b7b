# src/palletrt/runtime/errors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ApplyError(Exception):
    """Canonical error type for pallet and dispatch failures.

    These are recoverable: the block executor records them per extrinsic and
    moves on to the next one.
    """

    code: str
    reason: str
    details: Any | None = None

    def __str__(self) -> str:
        if self.details is None:
            return f"{self.code}:{self.reason}"
        return f"{self.code}:{self.reason}:{self.details}"


class InsufficientBalance(ApplyError):
    def __init__(self, details: Any | None = None) -> None:
        super().__init__("balances", "insufficient_balance", details)


class Overflow(ApplyError):
    def __init__(self, details: Any | None = None) -> None:
        super().__init__("balances", "overflow", details)


class AlreadyClaimed(ApplyError):
    def __init__(self, details: Any | None = None) -> None:
        super().__init__("proof_of_existence", "already_claimed", details)


class ClaimNotFound(ApplyError):
    def __init__(self, details: Any | None = None) -> None:
        super().__init__("proof_of_existence", "claim_not_found", details)


class NotClaimOwner(ApplyError):
    def __init__(self, details: Any | None = None) -> None:
        super().__init__("proof_of_existence", "not_claim_owner", details)


class ExecutorError(RuntimeError):
    """Fatal, block-level failure. Surfaces out of execute_block()."""


class InvalidBlockNumber(ExecutorError):
    def __init__(self, expected: int, got: int) -> None:
        self.expected = int(expected)
        self.got = int(got)
        super().__init__(f"invalid_block_number: expected {self.expected}, got {self.got}")


class StateOverflowError(ExecutorError):
    """A counter would leave its configured width. Treated as fatal."""


__all__ = [
    "ApplyError",
    "InsufficientBalance",
    "Overflow",
    "AlreadyClaimed",
    "ClaimNotFound",
    "NotClaimOwner",
    "ExecutorError",
    "InvalidBlockNumber",
    "StateOverflowError",
]
