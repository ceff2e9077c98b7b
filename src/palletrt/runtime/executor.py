# src/palletrt/runtime/executor.py
from __future__ import annotations

"""Block execution.

Order of operations for a candidate block:

  1. system.inc_block_number()
  2. compare the new block number with block.header.block_number; on a
     mismatch raise InvalidBlockNumber (the increment from step 1 stays)
  3. for each extrinsic, in order: inc_nonce(caller), then dispatch.
     An ApplyError is recorded as a failed receipt and execution continues.

Nothing here is retried; fatal errors go straight back to the caller.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Tuple

from palletrt.runtime.calls import call_name
from palletrt.runtime.dispatch import dispatch
from palletrt.runtime.errors import ApplyError, InvalidBlockNumber
from palletrt.runtime.metrics import inc_counter, set_gauge
from palletrt.runtime.types import Block, BlockNumber
from palletrt.structured_logging import log_event

if TYPE_CHECKING:  # pragma: no cover
    from palletrt.runtime.runtime import Runtime

Json = Dict[str, Any]

log = logging.getLogger("palletrt.executor")


@dataclass(frozen=True)
class ExtrinsicReceipt:
    block_number: BlockNumber
    index: int
    caller: Any
    call: str
    ok: bool
    error: str = ""
    code: str = ""
    reason: str = ""

    def to_json(self) -> Json:
        out: Json = {
            "block_number": int(self.block_number),
            "index": int(self.index),
            "caller": self.caller,
            "call": self.call,
            "ok": bool(self.ok),
        }
        if not self.ok:
            out["error"] = self.error
            out["code"] = self.code
            out["reason"] = self.reason
        return out


@dataclass(frozen=True)
class BlockReport:
    block_number: BlockNumber
    receipts: Tuple[ExtrinsicReceipt, ...] = field(default_factory=tuple)

    @property
    def applied_count(self) -> int:
        return sum(1 for r in self.receipts if r.ok)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.receipts if not r.ok)

    @property
    def failures(self) -> List[ExtrinsicReceipt]:
        return [r for r in self.receipts if not r.ok]


def execute_block(runtime: "Runtime", block: Block) -> BlockReport:
    """Apply `block` to `runtime`. Raises InvalidBlockNumber on a header mismatch."""
    system = runtime.system

    system.inc_block_number()
    current = system.block_number()
    set_gauge("block_number", current)

    if block.header.block_number != current:
        inc_counter("blocks_rejected_total")
        log_event(
            log,
            "block_rejected",
            level=logging.ERROR,
            expected=current,
            got=block.header.block_number,
        )
        raise InvalidBlockNumber(current, block.header.block_number)

    receipts: List[ExtrinsicReceipt] = []
    for index, ext in enumerate(block.extrinsics):
        caller = ext.caller
        name = call_name(ext.call)

        # The nonce is consumed even when the call itself is rejected.
        system.inc_nonce(caller)

        try:
            dispatch(runtime, caller, ext.call)
        except ApplyError as e:
            receipt = ExtrinsicReceipt(
                block_number=current,
                index=index,
                caller=caller,
                call=name,
                ok=False,
                error=str(e),
                code=e.code,
                reason=e.reason,
            )
            runtime.record_failure(receipt)
            inc_counter("extrinsics_failed_total")
            log_event(
                log,
                "extrinsic_failed",
                level=logging.WARNING,
                block_number=current,
                index=index,
                caller=str(caller),
                call=name,
                error=str(e),
            )
        else:
            receipt = ExtrinsicReceipt(block_number=current, index=index, caller=caller, call=name, ok=True)
            inc_counter("extrinsics_applied_total")
        receipts.append(receipt)

    report = BlockReport(block_number=current, receipts=tuple(receipts))
    inc_counter("blocks_executed_total")
    log_event(
        log,
        "block_executed",
        block_number=current,
        extrinsics=len(receipts),
        applied=report.applied_count,
        failed=report.failed_count,
    )
    return report


__all__ = ["BlockReport", "ExtrinsicReceipt", "execute_block"]
