#!/usr/bin/env python3
"""Benchmark archive verification: latency (p50, p95) of verify-all runs.

Usage:
    export API_URL=http://localhost:8000
    python scripts/bench_verify.py [--runs 10]
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark record verification")
    parser.add_argument("--runs", type=int, default=10, help="Number of verify-all requests")
    parser.add_argument("--actor", type=str, default="bench", help="Actor sent as X-Actor")
    parser.add_argument("--output", type=str, default="", help="Optional summary file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    headers = {"X-Actor": args.actor}

    with httpx.Client(timeout=300.0) as client:
        r = client.get(f"{api_url}/v1/records/stats", headers=headers)
        r.raise_for_status()
        total_records = r.json()["total"]

        latencies: list[float] = []
        errors = 0
        last: dict = {}
        print(f"Running {args.runs} verify-all requests over {total_records} records...")
        for _ in range(args.runs):
            t0 = time.perf_counter()
            r = client.post(f"{api_url}/v1/records/verify-all", headers=headers)
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
                last = r.json()
            else:
                errors += 1

    n = len(latencies)
    if n == 0:
        print("No successful runs.")
        return 1

    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    per_record = (p50 / total_records) if total_records else 0.0

    summary = (
        f"Verify benchmark (records={total_records}, runs={n}, errors={errors})\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, per record={per_record:.2f} ms\n"
        f"  Last run: verified={last.get('verified')} failed={last.get('failed')} "
        f"errors={last.get('errors')}\n"
    )
    print(summary)

    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
