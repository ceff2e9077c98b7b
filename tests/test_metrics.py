# tests/test_metrics.py
from __future__ import annotations

import pytest

from palletrt.runtime import metrics
from palletrt.runtime.apply.balances import Transfer
from palletrt.runtime.calls import Balances
from palletrt.runtime.errors import InvalidBlockNumber
from palletrt.runtime.runtime import Runtime
from palletrt.runtime.types import Block, Extrinsic, Header


@pytest.fixture(autouse=True)
def _clean_metrics():
    metrics.reset()
    yield
    metrics.reset()


def test_disabled_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PALLETRT_METRICS_ENABLED", raising=False)
    metrics.inc_counter("x")
    assert metrics.snapshot()["counters"] == {}


def test_executor_counts_blocks_and_extrinsics(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PALLETRT_METRICS_ENABLED", "1")
    rt = Runtime.new()
    rt.balances.set_balance("alice", 1)

    ok = Extrinsic(caller="alice", call=Balances(Transfer(to="bob", amount=1)))
    bad = Extrinsic(caller="carol", call=Balances(Transfer(to="bob", amount=1)))
    rt.execute_block(Block(header=Header(block_number=1), extrinsics=[ok, bad]))
    with pytest.raises(InvalidBlockNumber):
        rt.execute_block(Block(header=Header(block_number=9)))

    snap = metrics.snapshot()
    assert snap["counters"] == {
        "blocks_executed_total": 1,
        "blocks_rejected_total": 1,
        "extrinsics_applied_total": 1,
        "extrinsics_failed_total": 1,
    }
    assert snap["gauges"] == {"block_number": 2}


def test_prometheus_text(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PALLETRT_METRICS_ENABLED", "true")
    metrics.inc_counter("blocks_executed_total", 3)
    metrics.set_gauge("block_number", 3)

    text = metrics.format_prometheus()

    assert text.startswith("palletrt_uptime_ms ")
    assert "palletrt_blocks_executed_total 3\n" in text
    assert "palletrt_block_number 3\n" in text
