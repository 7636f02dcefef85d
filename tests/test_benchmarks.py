"""Structural tests for the patlint benchmark module."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "benchmarks"))


def test_bench_throughput_importable() -> None:
    mod = importlib.import_module("bench_throughput")
    assert hasattr(mod, "bench_engine_throughput")


def test_engine_throughput_returns_expected_keys() -> None:
    from bench_throughput import bench_engine_throughput

    result = bench_engine_throughput(file_count=10, max_workers=2)
    assert result["files"] == 10
    assert result["operation"] == "engine_throughput_pooled"
    assert result["annotations"] > 0
    assert "files_per_second" in result
