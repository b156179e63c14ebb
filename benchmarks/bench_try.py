"""Benchmarks comparing scipio vs the returns library.

Run with: uv run pytest benchmarks/bench_try.py --benchmark-only -v
"""

# returns library imports
from returns.result import Failure as RFailure
from returns.result import Success as RSuccess
from returns.result import safe as r_safe

# scipio imports
from scipio import Failure, Success, collect, of
from scipio import safe as s_safe

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    """Benchmark Success/Failure creation."""

    def test_scipio_success_creation(self, benchmark):
        benchmark(Success, 42)

    def test_returns_success_creation(self, benchmark):
        benchmark(RSuccess, 42)

    def test_scipio_failure_creation(self, benchmark):
        error = ValueError('error')
        benchmark(Failure, error)

    def test_returns_failure_creation(self, benchmark):
        error = ValueError('error')
        benchmark(RFailure, error)

    def test_scipio_of_raising(self, benchmark):
        """of() on the exception path."""
        benchmark(of, lambda: 1 / 0)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestMethodCalls:
    """Benchmark common method calls."""

    def test_scipio_map(self, benchmark):
        s = Success(5)
        benchmark(s.map, lambda x: x * 2)

    def test_returns_map(self, benchmark):
        s = RSuccess(5)
        benchmark(s.map, lambda x: x * 2)

    def test_scipio_flat_map(self, benchmark):
        s = Success(5)
        benchmark(s.flat_map, lambda x: Success(x * 2))

    def test_returns_bind(self, benchmark):
        s = RSuccess(5)
        benchmark(s.bind, lambda x: RSuccess(x * 2))

    def test_scipio_recover(self, benchmark):
        f = Failure(ValueError('x'))
        benchmark(f.recover, lambda e: 0)

    def test_returns_lash(self, benchmark):
        f = RFailure(ValueError('x'))
        benchmark(f.lash, lambda e: RSuccess(0))


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestChaining:
    """Benchmark chained operations."""

    def test_scipio_chain_10(self, benchmark):
        def chain():
            t = Success(0)
            for i in range(10):
                t = t.map(lambda x, i=i: x + i)
            return t

        benchmark(chain)

    def test_returns_chain_10(self, benchmark):
        def chain():
            r = RSuccess(0)
            for i in range(10):
                r = r.map(lambda x, i=i: x + i)
            return r

        benchmark(chain)

    def test_scipio_collect_100(self, benchmark):
        tries = [Success(i) for i in range(100)]
        benchmark(collect, tries)


# =============================================================================
# Safe decorator benchmarks
# =============================================================================


class TestSafeDecorator:
    """Benchmark @safe decorator."""

    def test_scipio_safe_failure(self, benchmark):
        @s_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 0)

    def test_returns_safe_failure(self, benchmark):
        @r_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 0)
