from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Ensure local "src/" takes precedence over any globally-installed "palletrt" package.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

src_str = str(SRC)
if src_str not in sys.path:
    sys.path.insert(0, src_str)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """load_runtime_config() configures the root logger; undo it per test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    configured = getattr(root, "_palletrt_configured", None)
    yield
    root.handlers = handlers
    root.setLevel(level)
    if configured is None:
        if hasattr(root, "_palletrt_configured"):
            delattr(root, "_palletrt_configured")
    else:
        setattr(root, "_palletrt_configured", configured)
