"""Tests for the Failed variant."""

from unittest.mock import Mock

import pytest

import boite as bt

MESSAGE = "Exception thrown"
CAUSE = Exception()
FILE_NOT_FOUND = FileNotFoundError(MESSAGE)

failure = bt.Failed(CAUSE)


def test_failed_is_empty() -> None:
    """Test Failed is empty and not defined."""
    assert failure.is_empty() is True
    assert failure.is_defined() is False


def test_get_raises_without_cause() -> None:
    """Test get on Failed raises BoxEmptyError rather than the cause."""
    with pytest.raises(bt.BoxEmptyError, match="Box does not contain a value"):
        bt.Failed(FILE_NOT_FOUND).get()


def test_get_or_else_returns_default() -> None:
    """Test get_or_else returns the default value on failure."""
    assert failure.get_or_else(lambda: 404) == 404


def test_map_keeps_cause() -> None:
    """Test map returns an equal failure without calling the function."""
    f = Mock()
    mapped = failure.map(f)
    assert mapped == failure
    assert isinstance(mapped, bt.Failed)
    assert mapped.cause is CAUSE
    f.assert_not_called()


def test_flat_map_keeps_cause() -> None:
    """Test flat_map returns an equal failure without calling the function."""
    f = Mock()
    assert failure.flat_map(f) == failure
    f.assert_not_called()


def test_foreach_does_not_call() -> None:
    """Test foreach never calls the function."""
    calculate = Mock()
    failure.foreach(calculate)
    calculate.assert_not_called()


def test_to_list() -> None:
    """Test to_list gives an empty list."""
    assert failure.to_list() == []
    assert list(failure) == []


def test_equality_follows_causes() -> None:
    """Test failures are equal iff their causes are."""
    assert bt.Failed(FILE_NOT_FOUND) == bt.Failed(FILE_NOT_FOUND)
    assert bt.Failed(FILE_NOT_FOUND) != bt.Failed(FileNotFoundError(MESSAGE))
    assert bt.Failed(FILE_NOT_FOUND) != bt.ABSENT
    assert bt.ABSENT != bt.Failed(FILE_NOT_FOUND)


def test_equality_uses_cause_equality() -> None:
    """Test causes defining value equality make failures equal."""

    class ParseError(Exception):
        def __eq__(self, other: object) -> bool:
            return isinstance(other, ParseError) and self.args == other.args

        def __hash__(self) -> int:
            return hash(self.args)

    left = bt.Failed(ParseError("line 3"))
    right = bt.Failed(ParseError("line 3"))
    assert left == right
    assert hash(left) == hash(right)
    assert left != bt.Failed(ParseError("line 4"))


def test_hash_is_cause_hash() -> None:
    """Test Failed hashes as its cause."""
    assert hash(bt.Failed(FILE_NOT_FOUND)) == hash(FILE_NOT_FOUND)


def test_from_message() -> None:
    """Test from_message wraps the text in a generic exception."""
    box = bt.Failed.from_message(MESSAGE)
    assert type(box.cause) is Exception
    assert str(box.cause) == MESSAGE


def test_repr_contains_message() -> None:
    """Test the textual form of Failed includes the cause message."""
    assert repr(bt.Failed(FILE_NOT_FOUND)) == "Failed(FileNotFoundError('Exception thrown'))"
    assert MESSAGE in str(bt.Failed.from_message(MESSAGE))
