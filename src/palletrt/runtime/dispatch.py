# src/palletrt/runtime/dispatch.py
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from palletrt.runtime.calls import Balances, ProofOfExistence, RuntimeCall

if TYPE_CHECKING:  # pragma: no cover
    from palletrt.runtime.runtime import Runtime


def dispatch(runtime: "Runtime", caller: Any, call: RuntimeCall) -> None:
    """Route `call` to the pallet that owns it.

    Pure routing: no state is touched here, and pallet errors (ApplyError
    subclasses) propagate unchanged.
    """
    if isinstance(call, Balances):
        runtime.balances.dispatch(caller, call.call)
        return
    if isinstance(call, ProofOfExistence):
        runtime.proof_of_existence.dispatch(caller, call.call)
        return
    raise TypeError(f"unknown runtime call: {call!r}")


__all__ = ["dispatch"]
