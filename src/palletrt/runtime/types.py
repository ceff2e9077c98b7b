# src/palletrt/runtime/types.py
from __future__ import annotations

"""Concrete types chosen by the composing runtime.

Pallets never hard-code widths. They receive a RuntimeTypes at construction
and check every counter/balance update against it, so a runtime assembled
with (say) 64-bit balances behaves like one with u64 storage.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Hashable, List, Optional, TypeVar

AccountId = str
Balance = int
BlockNumber = int
Nonce = int
Content = str

Json = Dict[str, Any]

A = TypeVar("A", bound=Hashable)  # account id
C = TypeVar("C", bound=Hashable)  # claim content
CallT = TypeVar("CallT")


@dataclass(frozen=True)
class RuntimeTypes:
    balance_bits: int = 128
    nonce_bits: int = 32
    block_number_bits: int = 32

    @property
    def max_balance(self) -> int:
        return (1 << int(self.balance_bits)) - 1

    @property
    def max_nonce(self) -> int:
        return (1 << int(self.nonce_bits)) - 1

    @property
    def max_block_number(self) -> int:
        return (1 << int(self.block_number_bits)) - 1


def checked_add(value: int, delta: int, maximum: int) -> Optional[int]:
    out = int(value) + int(delta)
    if out > int(maximum):
        return None
    return out


def checked_sub(value: int, delta: int) -> Optional[int]:
    out = int(value) - int(delta)
    if out < 0:
        return None
    return out


def require_unsigned(value: Any, name: str) -> int:
    """Return `value` if it is a non-negative int, else raise ValueError. Floats and bools are refused."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer; got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be unsigned; got {value}")
    return value


@dataclass(frozen=True)
class Header:
    block_number: BlockNumber

    def to_json(self) -> Json:
        return {"block_number": int(self.block_number)}


@dataclass(frozen=True)
class Extrinsic(Generic[A, CallT]):
    """An external instruction: who is calling, and which call they make."""

    caller: A
    call: CallT


@dataclass(frozen=True)
class Block(Generic[A, CallT]):
    header: Header
    extrinsics: List[Extrinsic[A, CallT]] = field(default_factory=list)

    @property
    def block_number(self) -> BlockNumber:
        return self.header.block_number
