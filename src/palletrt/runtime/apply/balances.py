# src/palletrt/runtime/apply/balances.py
from __future__ import annotations

"""palletrt.runtime.apply.balances

Per-account balances with a single dispatchable call, `transfer`.

Invariants:
  - absent accounts read as 0
  - a transfer either moves exactly `amount` from caller to `to`, or
    changes nothing (both new values are computed before either is stored)
"""

from dataclasses import dataclass
from typing import Dict, Generic, Optional

from palletrt.runtime.errors import InsufficientBalance, Overflow
from palletrt.runtime.types import A, Balance, Json, RuntimeTypes, checked_add, checked_sub, require_unsigned


@dataclass(frozen=True)
class Transfer(Generic[A]):
    to: A
    amount: Balance

    name = "transfer"

    def __post_init__(self) -> None:
        require_unsigned(self.amount, "amount")


BalancesCall = Transfer


class BalancesPallet(Generic[A]):
    def __init__(self, types: Optional[RuntimeTypes] = None) -> None:
        self.types = types or RuntimeTypes()
        self._balances: Dict[A, Balance] = {}

    def balance(self, account: A) -> Balance:
        return self._balances.get(account, 0)

    def set_balance(self, account: A, value: Balance) -> None:
        """Privileged overwrite used for genesis seeding. Not dispatchable."""
        self._balances[account] = int(value)

    def transfer(self, caller: A, to: A, amount: Balance) -> None:
        amount = require_unsigned(amount, "amount")
        caller_balance = self.balance(caller)
        to_balance = self.balance(to)

        new_caller_balance = checked_sub(caller_balance, amount)
        if new_caller_balance is None:
            raise InsufficientBalance({"account": caller, "balance": caller_balance, "amount": amount})

        if caller == to:
            # Debit and credit cancel; nothing to store.
            return

        new_to_balance = checked_add(to_balance, amount, self.types.max_balance)
        if new_to_balance is None:
            raise Overflow({"account": to, "balance": to_balance, "amount": amount})

        self._balances[caller] = new_caller_balance
        self._balances[to] = new_to_balance

    def total_issuance(self) -> Balance:
        return sum(self._balances.values())

    def dispatch(self, caller: A, call: BalancesCall) -> None:
        if isinstance(call, Transfer):
            self.transfer(caller, call.to, call.amount)
            return
        raise TypeError(f"not a balances call: {call!r}")

    def to_json(self) -> Json:
        return {str(k): int(self._balances[k]) for k in sorted(self._balances, key=str)}
