"""Decorators: @safe."""

from scipio.decorators.safe import safe

__all__ = ['safe']
