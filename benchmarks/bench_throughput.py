"""Benchmark: patlint engine throughput.

Lints a synthetic batch of in-memory files with a handful of rules and
reports files per second, once serially and once on the default pool.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from patlint.linter import LintEngine
from patlint.ruleset import parse_rule_set

_FILE_COUNT: int = 2_000

_RULES = {
    "global-exclude-paths": ["vendor/**"],
    "rules": [
        {"name": "no-debugger", "pattern": r"^\s*debugger;?$"},
        {"name": "no-todo", "pattern": "TODO", "severity": "warning"},
        {"name": "no-print", "pattern": r"\bprint\(", "overridden-include-paths": ["**/*.py"]},
        {"name": "trailing-space", "pattern": r"[ \t]+$", "severity": "warning"},
    ],
}

_SAMPLE = "def handler(event):\n    value = event['x']  \n    # TODO: validate\n    return value\n" * 20


def _files(count: int) -> list[tuple[str, str]]:
    return [(f"src/module_{i:05}.py", _SAMPLE) for i in range(count)]


def bench_engine_throughput(file_count: int = _FILE_COUNT, max_workers: int | None = None) -> dict[str, object]:
    """Benchmark ``LintEngine.run`` over ``file_count`` files.

    Returns
    -------
    dict with keys: operation, files, annotations, total_seconds,
    files_per_second.
    """
    rule_set, _ = parse_rule_set(_RULES)
    engine = LintEngine(rule_set, max_workers=max_workers)
    files = _files(file_count)

    start = time.perf_counter()
    result = engine.run(files)
    total = time.perf_counter() - start

    label = "serial" if max_workers == 1 else "pooled"
    summary: dict[str, object] = {
        "operation": f"engine_throughput_{label}",
        "files": file_count,
        "annotations": len(result.annotations),
        "total_seconds": round(total, 4),
        "files_per_second": round(file_count / total, 1) if total else float(file_count),
    }
    print(
        f"[bench_throughput] {summary['operation']}: "
        f"{summary['files_per_second']:,.0f} files/sec  "
        f"({summary['annotations']} annotations)"
    )
    return summary


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for workers, fname in [(1, "engine_serial_baseline.json"), (None, "engine_pooled_baseline.json")]:
        summary = bench_engine_throughput(max_workers=workers)
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(summary, fh, indent=2)
        print(f"Results saved to {output_path}")
