"""Benchmarks package, uses pytest-benchmark.

Run with::

    pytest tests/benchmarks/bench_retry.py -v
    pytest tests/benchmarks/bench_retry.py -v --benchmark-sort=median
    pytest tests/benchmarks/bench_retry.py -v --benchmark-json=results.json

To run as plain functional tests without benchmark overhead::

    pytest tests/benchmarks/bench_retry.py --benchmark-disable
"""
