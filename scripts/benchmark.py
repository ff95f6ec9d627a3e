#!/usr/bin/env python3
"""Benchmark script for structdi performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of structdi package."""
    start = time.perf_counter()
    import structdi  # noqa: F401

    return time.perf_counter() - start


def benchmark_definitions() -> float:
    """Measure interface + class definition time with checking enabled."""
    from structdi import Container

    container = Container()
    start = time.perf_counter()
    for _ in range(10000):
        service = container.define_interface({"run": lambda self, job: None})
        container.define_class({"run": lambda self, job: job}, implements=[service])
    return time.perf_counter() - start


def benchmark_make() -> float:
    """Measure resolution of a three-level dependency chain."""
    from structdi import Container

    container = Container()
    store = container.define_interface({"get": lambda self, key: None}, name="Store")
    memory = container.define_class({"get": lambda self, key: key}, implements=[store])
    repo = container.define_class({}, dependencies={"store": store}, name="Repo")
    service = container.define_class({}, dependencies={"repo": repo}, name="Service")
    container.bind(store, memory)
    container.bind(service, service)

    start = time.perf_counter()
    for _ in range(10000):
        container.make(service)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run structdi benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {
            "name": "Definitions (10k iterations)",
            "unit": "seconds",
            "value": benchmark_definitions(),
        },
        {"name": "make() chain (10k iterations)", "unit": "seconds", "value": benchmark_make()},
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
