# src/palletrt/runtime/runtime.py
from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List, Optional

from palletrt.runtime.apply.balances import BalancesPallet
from palletrt.runtime.apply.proof_of_existence import ProofOfExistencePallet
from palletrt.runtime.apply.system import SystemPallet
from palletrt.runtime.calls import RuntimeCall
from palletrt.runtime.dispatch import dispatch
from palletrt.runtime.executor import BlockReport, ExtrinsicReceipt, execute_block
from palletrt.runtime.genesis import apply_genesis, load_genesis
from palletrt.runtime.runtime_config import RuntimeConfig, default_runtime_config, validate_runtime_config
from palletrt.runtime.types import AccountId, Block, Content

Json = Dict[str, Any]


class Runtime:
    """Owns every pallet and is the only way state moves forward.

    All state is created here (empty maps, zero counters) and lives as long as
    the instance does. Genesis balances, if configured, are seeded before the
    first block; after that, execute_block() is the sole writer.
    """

    def __init__(self, config: Optional[RuntimeConfig] = None) -> None:
        self.config = config or default_runtime_config()
        validate_runtime_config(self.config)

        types = self.config.types()
        self.system: SystemPallet[AccountId] = SystemPallet(types)
        self.balances: BalancesPallet[AccountId] = BalancesPallet(types)
        self.proof_of_existence: ProofOfExistencePallet[AccountId, Content] = ProofOfExistencePallet()

        self._failures: Deque[ExtrinsicReceipt] = deque(maxlen=int(self.config.max_failure_log))

        if self.config.genesis_path:
            apply_genesis(self, load_genesis(self.config.genesis_path))

    @classmethod
    def new(cls, config: Optional[RuntimeConfig] = None) -> "Runtime":
        return cls(config)

    @property
    def chain_id(self) -> str:
        return self.config.chain_id

    def dispatch(self, caller: AccountId, call: RuntimeCall) -> None:
        dispatch(self, caller, call)

    def execute_block(self, block: Block) -> BlockReport:
        return execute_block(self, block)

    def record_failure(self, receipt: ExtrinsicReceipt) -> None:
        self._failures.append(receipt)

    @property
    def failures(self) -> List[ExtrinsicReceipt]:
        return list(self._failures)

    def snapshot(self) -> Json:
        return {
            "chain_id": self.chain_id,
            "system": self.system.to_json(),
            "balances": self.balances.to_json(),
            "proof_of_existence": self.proof_of_existence.to_json(),
        }

    def __repr__(self) -> str:
        return (
            f"Runtime(chain_id={self.chain_id!r}, block_number={self.system.block_number()}, "
            f"accounts={len(self.balances.to_json())})"
        )


__all__ = ["Runtime"]
