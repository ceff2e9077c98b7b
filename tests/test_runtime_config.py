# tests/test_runtime_config.py
from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

import pytest

from palletrt.runtime.runtime import Runtime
from palletrt.runtime.runtime_config import (
    default_runtime_config,
    load_runtime_config,
    read_runtime_config_file,
    validate_runtime_config,
)


def test_defaults_are_valid() -> None:
    cfg = default_runtime_config()
    validate_runtime_config(cfg)
    types = cfg.types()
    assert types.max_balance == 2**128 - 1
    assert types.max_nonce == 2**32 - 1
    assert types.max_block_number == 2**32 - 1


@pytest.mark.parametrize(
    "changes",
    [
        {"chain_id": "  "},
        {"balance_bits": 0},
        {"nonce_bits": 257},
        {"max_failure_log": -1},
        {"log_level": "LOUD"},
    ],
)
def test_invalid_config_fails_fast(changes: dict) -> None:
    with pytest.raises(ValueError):
        validate_runtime_config(replace(default_runtime_config(), **changes))


def test_read_file_fills_defaults(tmp_path: Path) -> None:
    p = tmp_path / "runtime.json"
    p.write_text(json.dumps({"chain_id": "test-1", "balance_bits": 64, "log_level": "debug", "extra": 1}))

    cfg = read_runtime_config_file(str(p))

    assert cfg.chain_id == "test-1"
    assert cfg.balance_bits == 64
    assert cfg.nonce_bits == 32
    assert cfg.log_level == "DEBUG"
    assert cfg.genesis_path == ""


def test_read_file_rejects_non_object(tmp_path: Path) -> None:
    p = tmp_path / "runtime.json"
    p.write_text("[1, 2]")
    with pytest.raises(ValueError):
        read_runtime_config_file(str(p))


def test_read_file_rejects_non_integer_width(tmp_path: Path) -> None:
    p = tmp_path / "runtime.json"
    p.write_text(json.dumps({"balance_bits": "wide"}))
    with pytest.raises(ValueError):
        read_runtime_config_file(str(p))


def test_load_uses_env_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    p = tmp_path / "runtime.json"
    p.write_text(json.dumps({"chain_id": "from-env"}))
    monkeypatch.setenv("PALLETRT_CONFIG_PATH", str(p))

    assert load_runtime_config().chain_id == "from-env"


def test_load_without_path_returns_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PALLETRT_CONFIG_PATH", raising=False)
    assert load_runtime_config() == default_runtime_config()


def test_runtime_rejects_invalid_config() -> None:
    with pytest.raises(ValueError):
        Runtime(replace(default_runtime_config(), block_number_bits=0))


def test_log_level_from_file_is_applied(tmp_path: Path) -> None:
    p = tmp_path / "runtime.json"
    p.write_text(json.dumps({"log_level": "DEBUG"}))

    cfg = load_runtime_config(config_path=str(p))

    assert cfg.log_level == "DEBUG"
    assert logging.getLogger().level == logging.DEBUG


def test_default_log_level_is_applied(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PALLETRT_CONFIG_PATH", raising=False)
    logging.getLogger().setLevel(logging.ERROR)

    load_runtime_config()

    assert logging.getLogger().level == logging.INFO
