# src/palletrt/runtime/genesis.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

import yaml

from palletrt.structured_logging import log_event

if TYPE_CHECKING:  # pragma: no cover
    from palletrt.runtime.runtime import Runtime

Json = Dict[str, Any]

log = logging.getLogger("palletrt.genesis")


@dataclass(frozen=True)
class GenesisConfig:
    balances: Dict[str, int] = field(default_factory=dict)


def genesis_from_json(obj: Any) -> GenesisConfig:
    """Build a GenesisConfig from a parsed mapping.

    Supported input shape:
      { "balances": { "alice": 100, "bob": 5 } }
    """
    if obj is None:
        obj = {}
    if not isinstance(obj, dict):
        raise ValueError("genesis config must be a mapping")

    raw = obj.get("balances")
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError("genesis 'balances' must be a mapping of account -> balance")

    balances: Dict[str, int] = {}
    for acct, value in raw.items():
        a = str(acct).strip()
        if not a:
            raise ValueError("genesis account id must be non-empty")
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"genesis balance for {a!r} must be an integer; got {value!r}")
        if value < 0:
            raise ValueError(f"genesis balance for {a!r} must be >= 0; got {value}")
        balances[a] = int(value)

    return GenesisConfig(balances=balances)


def load_genesis(path: str) -> GenesisConfig:
    """Load a GenesisConfig from a YAML (.yaml/.yml) or JSON file."""
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(str(p))

    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() in {".yaml", ".yml"}:
        obj = yaml.safe_load(text)
    else:
        obj = json.loads(text)

    return genesis_from_json(obj)


def apply_genesis(runtime: "Runtime", cfg: GenesisConfig) -> None:
    """Seed balances before the first block. All-or-nothing."""
    if runtime.system.block_number() != 0:
        raise ValueError(f"genesis can only be applied at block 0; runtime is at {runtime.system.block_number()}")

    max_balance = runtime.balances.types.max_balance
    for acct, value in cfg.balances.items():
        if value > max_balance:
            raise ValueError(f"genesis balance for {acct!r} exceeds max_balance {max_balance}")

    for acct, value in sorted(cfg.balances.items()):
        runtime.balances.set_balance(acct, value)

    log_event(
        log,
        "genesis_applied",
        accounts=len(cfg.balances),
        total_issuance=sum(cfg.balances.values()),
    )
