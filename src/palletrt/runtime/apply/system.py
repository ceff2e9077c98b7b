# src/palletrt/runtime/apply/system.py
from __future__ import annotations

"""palletrt.runtime.apply.system

Account nonces and the global block number.

Storage:
  block_number: int              (starts at 0, +1 per executed block)
  nonces: {account_id: int}      (absent accounts read as 0)

No dispatchable calls: the block executor is the only writer.
"""

from typing import Dict, Generic, Optional

from palletrt.runtime.errors import StateOverflowError
from palletrt.runtime.types import A, BlockNumber, Json, Nonce, RuntimeTypes, checked_add


class SystemPallet(Generic[A]):
    def __init__(self, types: Optional[RuntimeTypes] = None) -> None:
        self.types = types or RuntimeTypes()
        self._block_number: BlockNumber = 0
        self._nonces: Dict[A, Nonce] = {}

    def block_number(self) -> BlockNumber:
        return self._block_number

    def inc_block_number(self) -> None:
        nxt = checked_add(self._block_number, 1, self.types.max_block_number)
        if nxt is None:
            raise StateOverflowError(
                f"block_number overflow at {self._block_number} (max {self.types.max_block_number})"
            )
        self._block_number = nxt

    def nonce(self, account: A) -> Nonce:
        return self._nonces.get(account, 0)

    def inc_nonce(self, account: A) -> None:
        cur = self._nonces.get(account, 0)
        nxt = checked_add(cur, 1, self.types.max_nonce)
        if nxt is None:
            raise StateOverflowError(f"nonce overflow for {account!r} (max {self.types.max_nonce})")
        self._nonces[account] = nxt

    def to_json(self) -> Json:
        return {
            "block_number": int(self._block_number),
            "nonces": {str(k): int(self._nonces[k]) for k in sorted(self._nonces, key=str)},
        }
