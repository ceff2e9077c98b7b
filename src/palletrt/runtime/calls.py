# src/palletrt/runtime/calls.py
from __future__ import annotations

"""The closed union of every dispatchable call in the runtime.

One variant per pallet, each wrapping that pallet's own call value. Adding a
pallet means adding a variant here and an arm in runtime.dispatch.
"""

from dataclasses import dataclass
from typing import Union

from palletrt.runtime.apply.balances import BalancesCall
from palletrt.runtime.apply.proof_of_existence import ProofOfExistenceCall


@dataclass(frozen=True)
class Balances:
    call: BalancesCall

    pallet = "balances"


@dataclass(frozen=True)
class ProofOfExistence:
    call: ProofOfExistenceCall

    pallet = "proof_of_existence"


RuntimeCall = Union[Balances, ProofOfExistence]


def call_name(call: RuntimeCall) -> str:
    """Human readable `pallet.call` label used in receipts and logs."""
    pallet = getattr(call, "pallet", type(call).__name__)
    inner = getattr(getattr(call, "call", None), "name", "?")
    return f"{pallet}.{inner}"


__all__ = ["Balances", "ProofOfExistence", "RuntimeCall", "call_name"]
