# src/palletrt/runtime/apply/__init__.py
"""Pallets: self-contained units of state plus the operations over it.

Each pallet owns its storage outright and only ever raises ApplyError
subclasses; logging and receipts belong to the block executor.
"""

from __future__ import annotations

__all__ = [
    "system",
    "balances",
    "proof_of_existence",
]
