"""Assertion helpers for test suites working with `Box` values.

Each helper raises `AssertionError` with a readable message, so they work from pytest
as well as any runner relying on plain assertions.

Example:
    ```python
    >>> from boite import ABSENT, Present
    >>> from boite.testing import assert_empty, assert_not_empty
    >>> assert_empty(ABSENT)
    >>> assert_empty(Present("foo"))
    Traceback (most recent call last):
        ...
    AssertionError: Present(foo) was not empty
    >>> assert_not_empty(ABSENT)
    Traceback (most recent call last):
        ...
    AssertionError: Empty was empty

    ```
"""

from __future__ import annotations

from typing import Any, Final

from ._box import Absent, Box, Failed

_UNSET: Final = object()


def _label(box: Box[Any]) -> str:
    match box:
        case Absent():
            return "Empty"
        case _:
            return repr(box)


def assert_empty(box: Box[Any]) -> None:
    """Fails unless `box` is `ABSENT`. A `Failed` box is not empty: use `assert_failure` for it."""
    if not isinstance(box, Absent):
        msg = f"{_label(box)} was not empty"
        raise AssertionError(msg)


def assert_not_empty(box: Box[Any]) -> None:
    """Fails if `box` is `ABSENT`."""
    if isinstance(box, Absent):
        msg = f"{_label(box)} was empty"
        raise AssertionError(msg)


def assert_present(box: Box[Any], value: object = _UNSET) -> None:
    """
    Fails unless `box` is `Present`, and holds `value` when one is given.

    Args:
        box: The box under test.
        value: The expected content, compared with `==`.
    """
    if not box.is_defined():
        msg = f"{_label(box)} was not present"
        raise AssertionError(msg)
    if value is not _UNSET and box.get() != value:
        msg = f"{_label(box)} did not contain {value!r}"
        raise AssertionError(msg)


def assert_failure(
    box: Box[Any],
    kind: type[BaseException] | None = None,
    message: str | None = None,
) -> None:
    """
    Fails unless `box` is `Failed`.

    Args:
        box: The box under test.
        kind: If given, the cause must be an instance of it.
        message: If given, must occur in the text of the cause.
    """
    if not isinstance(box, Failed):
        msg = f"{_label(box)} was not a failure"
        raise AssertionError(msg)
    if kind is not None and not isinstance(box.cause, kind):
        msg = f"{_label(box)} was not a failure caused by {kind.__name__}"
        raise AssertionError(msg)
    if message is not None and message not in str(box.cause):
        msg = f"{_label(box)} did not fail saying {message!r}"
        raise AssertionError(msg)
