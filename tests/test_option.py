"""Tests for the Option type returned by to_optional()."""

import pytest
from hypothesis import given
from scipio import Failure, InvalidArgumentError, Nothing, NothingType, Some, Success

from tests.strategies import integers


class TestOptionBasics:
    """Creation, querying and equality."""

    def test_some_holds_value(self):
        assert Some(42).value == 42
        assert Some(42).is_some() is True
        assert Some(42).is_none() is False

    def test_nothing_is_none(self):
        assert Nothing.is_none() is True
        assert Nothing.is_some() is False

    def test_nothing_singleton_equality(self):
        """Every NothingType compares equal to Nothing."""
        assert NothingType() == Nothing

    def test_some_equality(self):
        assert Some(1) == Some(1)
        assert Some(1) != Some(2)
        assert Some(1) != Nothing

    def test_repr(self):
        assert repr(Some('x')) == "Some('x')"
        assert repr(Nothing) == 'Nothing'

    def test_some_is_frozen(self):
        with pytest.raises(AttributeError):
            Some(1).value = 2  # type: ignore[misc]


class TestOptionUnwrap:
    """unwrap() and its fallbacks."""

    def test_some_unwrap(self):
        assert Some(42).unwrap() == 42

    def test_nothing_unwrap_raises(self):
        with pytest.raises(ValueError, match='Called unwrap on Nothing'):
            Nothing.unwrap()

    def test_unwrap_or(self):
        assert Some(42).unwrap_or(0) == 42
        assert Nothing.unwrap_or(0) == 0

    def test_unwrap_or_else_lazy(self):
        """The fallback is only computed for Nothing."""
        calls = []
        assert Some(42).unwrap_or_else(lambda: calls.append(1) or 0) == 42
        assert calls == []
        assert Nothing.unwrap_or_else(lambda: 7) == 7


class TestOptionTransform:
    """map, and_then, filter, or_else, or_."""

    @given(integers)
    def test_map(self, x):
        assert Some(x).map(lambda n: n + 1) == Some(x + 1)
        assert Nothing.map(lambda n: n + 1) is Nothing

    def test_and_then(self):
        assert Some(4).and_then(lambda n: Some(n // 2)) == Some(2)
        assert Some(4).and_then(lambda n: Nothing) is Nothing
        assert Nothing.and_then(lambda n: Some(n)) is Nothing

    def test_filter(self):
        assert Some(4).filter(lambda n: n % 2 == 0) == Some(4)
        assert Some(3).filter(lambda n: n % 2 == 0) is Nothing
        assert Nothing.filter(lambda n: True) is Nothing

    def test_or_else(self):
        assert Some(1).or_else(lambda: Some(2)) == Some(1)
        assert Nothing.or_else(lambda: Some(2)) == Some(2)

    def test_or(self):
        assert Some(1).or_(Some(2)) == Some(1)
        assert Nothing.or_(Some(2)) == Some(2)

    def test_iteration(self):
        assert list(Some(1)) == [1]
        assert list(Nothing) == []


class TestOptionToTry:
    """Round trip between Option and Try."""

    def test_some_to_try(self):
        assert Some(42).to_try(ValueError('missing')) == Success(42)

    def test_nothing_to_try(self):
        error = LookupError('missing')
        assert Nothing.to_try(error) == Failure(error)

    def test_some_none_to_try_rejected(self):
        """Some(None) cannot become a Success."""
        with pytest.raises(InvalidArgumentError):
            Some(None).to_try(ValueError('unused'))

    @given(integers)
    def test_round_trip(self, x):
        """Success survives to_optional().to_try()."""
        assert Success(x).to_optional().to_try(ValueError('unused')) == Success(x)
