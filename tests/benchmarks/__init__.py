"""Registry and histogram benchmarks (pytest-benchmark).

Run with::

    pytest tests/benchmarks/ --benchmark-sort=median

Pass ``--benchmark-disable`` to run them as plain functional tests.
"""
