"""Tests for DebugLogger in no-op mode."""

from __future__ import annotations

from nputils.utils.debug_logger import DebugLogger


def test_debug_logger_noop(tmp_path):
    """When disabled, no file is created."""

    path = tmp_path / "debug.jsonl"
    logger = DebugLogger(enabled=False, path=str(path))
    logger.log({"type": "noop"})
    logger.close()
    assert not path.exists()
