"""Benchmark: has_link latency — per-query p50/p99.

Builds a layered role tree with every link valid at the request time and
measures SessionRoleManager.has_link() for a target at the deepest layer,
which forces a near-complete walk of the tree.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from session_role_manager.roles.manager import SessionRoleManager

_BRANCHING: int = 4
_DEPTH: int = 5
_WARMUP: int = 50
_ITERATIONS: int = 500


def _build_tree() -> tuple[SessionRoleManager, str]:
    rm = SessionRoleManager(max_hierarchy_level=_DEPTH + 1)
    layer = ["root"]
    for _ in range(_DEPTH):
        next_layer: list[str] = []
        for parent in layer:
            for i in range(_BRANCHING):
                child = f"{parent}.{i}"
                rm.add_link(parent, child, 0, 100)
                next_layer.append(child)
        layer = next_layer
    return rm, layer[-1]


def bench_has_link_latency() -> dict[str, object]:
    """Benchmark SessionRoleManager.has_link() per-call latency.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_latency_ms, p99_latency_ms.
    """
    rm, deepest = _build_tree()

    for _ in range(_WARMUP):
        rm.has_link("root", deepest, 50)

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        rm.has_link("root", deepest, 50)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": "has_link_latency",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_latency_ms": round(sorted_lats[n // 2], 4),
        "p99_latency_ms": round(sorted_lats[min(int(n * 0.99), n - 1)], 4),
    }
    print(
        f"[bench_has_link_latency] {result['operation']}: "
        f"p50={result['p50_latency_ms']:.4f}ms  "
        f"p99={result['p99_latency_ms']:.4f}ms"
    )
    return result


def run_benchmark() -> dict[str, object]:
    """Entry point returning the benchmark result dict."""
    return bench_has_link_latency()


if __name__ == "__main__":
    result = run_benchmark()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "has_link_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
