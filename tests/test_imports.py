"""Tests for the public import surface."""

import scipio
import scipio.decorators
import scipio.errors
import scipio.types


class TestFlatImports:
    """Everything in __all__ is importable from the top-level package."""

    def test_all_names_resolve(self):
        for name in scipio.__all__:
            assert hasattr(scipio, name), name

    def test_types_reexported(self):
        assert scipio.Success is scipio.types.Success
        assert scipio.Failure is scipio.types.Failure
        assert scipio.Nothing is scipio.types.Nothing

    def test_errors_reexported(self):
        assert scipio.InvalidArgumentError is scipio.errors.InvalidArgumentError
        assert scipio.FoldError is scipio.errors.FoldError

    def test_decorators_reexported(self):
        assert scipio.safe is scipio.decorators.safe


class TestSubmoduleImports:
    """Submodules expose their own __all__."""

    def test_types_all(self):
        for name in scipio.types.__all__:
            assert hasattr(scipio.types, name), name

    def test_errors_all(self):
        for name in scipio.errors.__all__:
            assert hasattr(scipio.errors, name), name
