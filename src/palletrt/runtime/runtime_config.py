# src/palletrt/runtime/runtime_config.py
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from palletrt.env import load_dotenv_if_present
from palletrt.runtime.types import RuntimeTypes
from palletrt.structured_logging import configure_structured_logging

Json = Dict[str, Any]


def _as_int(v: Any, default: int) -> int:
    if v is None:
        return int(default)
    try:
        return int(v)
    except (TypeError, ValueError):
        raise ValueError(f"expected an integer, got {v!r}") from None


def _as_str(v: Any, default: str) -> str:
    if v is None:
        return str(default)
    s = str(v)
    return s if s.strip() else str(default)


@dataclass(frozen=True)
class RuntimeConfig:
    chain_id: str

    # Widths of the runtime's unsigned integer types.
    balance_bits: int
    nonce_bits: int
    block_number_bits: int

    # Capacity of the in-memory failed-extrinsic log (0 disables it).
    max_failure_log: int

    # Optional YAML/JSON file seeded into balances at construction.
    genesis_path: str

    log_level: str

    def types(self) -> RuntimeTypes:
        return RuntimeTypes(
            balance_bits=int(self.balance_bits),
            nonce_bits=int(self.nonce_bits),
            block_number_bits=int(self.block_number_bits),
        )


_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def validate_runtime_config(cfg: RuntimeConfig) -> None:
    """Fail-fast validation. Raises ValueError on the first problem found."""

    if not isinstance(cfg.chain_id, str) or not cfg.chain_id.strip():
        raise ValueError("chain_id must be a non-empty string")

    for name in ("balance_bits", "nonce_bits", "block_number_bits"):
        v = int(getattr(cfg, name))
        if v < 1 or v > 256:
            raise ValueError(f"{name} must be 1..256; got: {v}")

    if int(cfg.max_failure_log) < 0:
        raise ValueError(f"max_failure_log must be >= 0; got: {cfg.max_failure_log}")

    if str(cfg.log_level).strip().upper() not in _LOG_LEVELS:
        raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}; got: {cfg.log_level!r}")


def default_runtime_config() -> RuntimeConfig:
    return RuntimeConfig(
        chain_id="palletrt-dev",
        balance_bits=128,
        nonce_bits=32,
        block_number_bits=32,
        max_failure_log=1_000,
        genesis_path="",
        log_level="INFO",
    )


def read_runtime_config_file(path: str) -> RuntimeConfig:
    p = Path(path)
    raw = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("runtime config must be a JSON object")

    d = default_runtime_config()

    cfg = RuntimeConfig(
        chain_id=_as_str(raw.get("chain_id"), d.chain_id),
        balance_bits=_as_int(raw.get("balance_bits"), d.balance_bits),
        nonce_bits=_as_int(raw.get("nonce_bits"), d.nonce_bits),
        block_number_bits=_as_int(raw.get("block_number_bits"), d.block_number_bits),
        max_failure_log=_as_int(raw.get("max_failure_log"), d.max_failure_log),
        genesis_path=str(raw.get("genesis_path") or ""),
        log_level=_as_str(raw.get("log_level"), d.log_level).upper(),
    )

    validate_runtime_config(cfg)
    return cfg


def load_runtime_config(*, config_path: Optional[str] = None) -> RuntimeConfig:
    load_dotenv_if_present()
    p = config_path or os.environ.get("PALLETRT_CONFIG_PATH")
    if p:
        cfg = read_runtime_config_file(p)
    else:
        cfg = default_runtime_config()
        validate_runtime_config(cfg)

    apply_runtime_config_to_logging(cfg)
    return cfg


def apply_runtime_config_to_logging(cfg: RuntimeConfig) -> None:
    validate_runtime_config(cfg)
    configure_structured_logging(cfg.log_level)
