# tests/test_system_pallet.py
from __future__ import annotations

import pytest

from palletrt.runtime.apply.system import SystemPallet
from palletrt.runtime.errors import StateOverflowError
from palletrt.runtime.types import RuntimeTypes


def test_fresh_state_reads_zero() -> None:
    system = SystemPallet()
    assert system.block_number() == 0
    assert system.nonce("alice") == 0
    assert system.nonce("never-seen") == 0


def test_inc_block_number_is_plus_one() -> None:
    system = SystemPallet()
    system.inc_block_number()
    assert system.block_number() == 1
    system.inc_block_number()
    assert system.block_number() == 2


def test_inc_nonce_is_monotonic_per_account() -> None:
    system = SystemPallet()
    seen = []
    for _ in range(5):
        system.inc_nonce("alice")
        seen.append(system.nonce("alice"))
    assert seen == [1, 2, 3, 4, 5]
    assert system.nonce("bob") == 0


def test_block_number_overflow_is_fatal_and_leaves_counter() -> None:
    system = SystemPallet(RuntimeTypes(block_number_bits=2))
    for _ in range(3):
        system.inc_block_number()
    assert system.block_number() == 3

    with pytest.raises(StateOverflowError):
        system.inc_block_number()
    assert system.block_number() == 3


def test_nonce_overflow_is_fatal_and_never_wraps() -> None:
    system = SystemPallet(RuntimeTypes(nonce_bits=1))
    system.inc_nonce("alice")
    with pytest.raises(StateOverflowError):
        system.inc_nonce("alice")
    assert system.nonce("alice") == 1


def test_to_json_is_sorted() -> None:
    system = SystemPallet()
    system.inc_nonce("charlie")
    system.inc_nonce("alice")
    assert list(system.to_json()["nonces"].keys()) == ["alice", "charlie"]
