from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Final, Never, TypeIs

import cytoolz

from .._core import Pipeable
from ._fatal import is_fatal

logger = logging.getLogger(__name__)


class BoxEmptyError(LookupError): ...


def _unreachable(box: object) -> Never:
    msg = f"unreachable: {type(box).__qualname__} is not a Box variant"
    raise RuntimeError(msg)


class Box[T](ABC, Pipeable):
    """
    A value that is either `Present`, `Absent`, or `Failed`.

    `Absent` means there was no value to begin with, `Failed` means there was none
    because computing it raised, and keeps what was raised as its `cause`.

    The set of variants is closed: subclassing `Box` outside of this module raises `TypeError`.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            msg = f"cannot subclass Box as {cls.__qualname__}: variants are Present, Absent and Failed"
            raise TypeError(msg)

    @staticmethod
    def from_optional[U](value: U | None) -> Box[U]:
        """
        Converts an optional value to a `Box`.

        Args:
            value: The value, or `None` if there is none.

        Returns:
            `Present(value)`, or `ABSENT` if `value` is `None`.

        Example:
            ```python
            >>> from boite import Box
            >>> Box.from_optional("Gilbert")
            Present(Gilbert)
            >>> Box.from_optional(None)
            Absent

            ```
        """
        if value is None:
            return ABSENT
        return Present(value)

    @staticmethod
    def wrap[**P, R](
        func: Callable[P, R | None], *args: P.args, **kwargs: P.kwargs
    ) -> Box[R]:
        """
        Calls `func` once and boxes the outcome.

        A `None` result gives `ABSENT`, any other result gives `Present(result)`.
        A recoverable exception is captured into a `Failed` instead of propagating.
        Fatal conditions (see `is_fatal`) are re-raised untouched.

        Args:
            func: The callable to evaluate.
            *args: Positional arguments to pass to `func`.
            **kwargs: Keyword arguments to pass to `func`.

        Returns:
            The boxed outcome of the call.

        Example:
            ```python
            >>> from boite import Box
            >>> Box.wrap(int, "42")
            Present(42)
            >>> Box.wrap(dict(a=1).get, "b")
            Absent
            >>> Box.wrap(int, "forty-two").is_empty()
            True
            >>> Box.wrap(int, "forty-two").cause
            ValueError("invalid literal for int() with base 10: 'forty-two'")

            ```
        """
        try:
            value = func(*args, **kwargs)
        except Exception as exc:
            if is_fatal(exc):
                raise
            logger.debug("captured %s raised by %r", type(exc).__name__, func)
            return Failed(exc)
        return Box.from_optional(value)

    @abstractmethod
    def is_empty(self) -> TypeIs[Absent | Failed]:  # type: ignore[misc]
        """
        Returns `True` if the box holds no value, whether `Absent` or `Failed`.

        Example:
            ```python
            >>> from boite import ABSENT, Failed, Present
            >>> Present(2).is_empty()
            False
            >>> ABSENT.is_empty()
            True
            >>> Failed.from_message("no luck").is_empty()
            True

            ```
        """
        ...

    def is_defined(self) -> TypeIs[Present[T]]:  # type: ignore[misc]
        """Returns `True` if the box holds a value."""
        return not self.is_empty()

    @abstractmethod
    def get(self) -> T:
        """
        Returns the contained value.

        The cause of a `Failed` box is not part of the error: use `match` or `Failed.cause` to reach it.

        Raises:
            BoxEmptyError: If the box is `Absent` or `Failed`.

        Example:
            ```python
            >>> from boite import ABSENT, Present
            >>> Present("car").get()
            'car'
            >>> ABSENT.get()
            Traceback (most recent call last):
                ...
            boite._box._box.BoxEmptyError: Box does not contain a value

            ```
        """
        ...

    def get_or_else(self, default: Callable[[], T]) -> T:
        """
        Returns the contained value, or computes one from `default`.

        `default` is only called when the box is empty.

        Args:
            default: A function that returns the fallback value.

        Example:
            ```python
            >>> from boite import ABSENT, Present
            >>> Present(4).get_or_else(lambda: 404)
            4
            >>> ABSENT.get_or_else(lambda: 404)
            404

            ```
        """
        match self:
            case Present(value):
                return value
            case Absent() | Failed():
                return default()
            case _:
                _unreachable(self)

    def get_or(self, default: T) -> T:
        """Returns the contained value or `default`."""
        return self.get_or_else(lambda: default)

    def map[U](self, f: Callable[[T], U]) -> Box[U]:
        """
        Applies `f` to the contained value and boxes the result.

        `f` is not called on an empty box. `Absent` maps to `ABSENT`,
        `Failed` maps to a new `Failed` carrying the same cause.

        Differs from `flat_map` in that `f` is not expected to return a `Box`.

        Args:
            f: The function to apply to the value.

        Example:
            ```python
            >>> from boite import ABSENT, Present
            >>> Present("Hello, World!").map(len)
            Present(13)
            >>> ABSENT.map(len)
            Absent

            ```
        """
        match self:
            case Present(value):
                return Present(f(value))
            case Failed(cause):
                return Failed(cause)
            case Absent():
                return ABSENT
            case _:
                _unreachable(self)

    def flat_map[U](self, f: Callable[[T], Box[U]]) -> Box[U]:
        """
        Applies `f` to the contained value and returns its result as is.

        Empty boxes propagate exactly as in `map`.

        Args:
            f: The function to apply to the value, returning a `Box`.

        Example:
            ```python
            >>> from boite import ABSENT, Box, Present
            >>> def half(x: int) -> Box[int]:
            ...     return Present(x // 2) if x % 2 == 0 else ABSENT
            >>> Present(8).flat_map(half).flat_map(half)
            Present(2)
            >>> Present(6).flat_map(half).flat_map(half)
            Absent

            ```
        """
        match self:
            case Present(value):
                return f(value)
            case Failed(cause):
                return Failed(cause)
            case Absent():
                return ABSENT
            case _:
                _unreachable(self)

    def foreach(self, f: Callable[[T], object]) -> None:
        """
        Calls `f` with the contained value, if there is one.

        Example:
            ```python
            >>> from boite import ABSENT, Present
            >>> Present("foo").foreach(print)
            foo
            >>> ABSENT.foreach(print)

            ```
        """
        match self:
            case Present(value):
                f(value)
            case Absent() | Failed():
                return
            case _:
                _unreachable(self)

    def to_list(self) -> list[T]:
        """Returns `[value]` if the box holds a value, `[]` otherwise."""
        match self:
            case Present(value):
                return [value]
            case Absent() | Failed():
                return []
            case _:
                _unreachable(self)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return 1 if self.is_defined() else 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        match self, other:
            case Present(left), Present(right):
                return left == right
            case Failed(left), Failed(right):
                return left == right
            case _:
                return self is other

    def __hash__(self) -> int:
        match self:
            case Present(value):
                return hash(value)
            case Failed(cause):
                return hash(cause)
            case _:
                return object.__hash__(self)


@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Present[T](Box[T]):
    """Box variant holding a value."""

    value: T

    def __repr__(self) -> str:
        return f"Present({self.value})"

    def is_empty(self) -> TypeIs[Absent | Failed]:  # type: ignore[misc]
        return False

    def get(self) -> T:
        return self.value


class Absent(Box[Any]):
    """
    Box variant holding no value and no error.

    There is a single instance, `ABSENT`: calling `Absent()` returns it.
    """

    __slots__ = ()

    def __new__(cls) -> Absent:
        return ABSENT

    def __repr__(self) -> str:
        return "Absent"

    def is_empty(self) -> TypeIs[Absent | Failed]:  # type: ignore[misc]
        return True

    def get(self) -> Never:
        raise BoxEmptyError("Box does not contain a value")


ABSENT: Final[Absent] = object.__new__(Absent)
"""Singleton instance representing the absence of a value."""


@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Failed(Box[Any]):
    """
    Box variant holding no value because computing it raised `cause`.

    Two failures are equal when their causes are.
    """

    cause: BaseException

    @classmethod
    def from_message(cls, message: str) -> Failed:
        """
        Builds a failure from a reason, for callers without an exception at hand.

        Args:
            message: The reason of the failure.

        Example:
            ```python
            >>> from boite import Failed
            >>> Failed.from_message("disk full")
            Failed(Exception('disk full'))

            ```
        """
        return cls(Exception(message))

    def __repr__(self) -> str:
        return f"Failed({self.cause!r})"

    def is_empty(self) -> TypeIs[Absent | Failed]:  # type: ignore[misc]
        return True

    def get(self) -> Never:
        raise BoxEmptyError("Box does not contain a value")


def flatten[T](boxes: Iterable[Box[T]]) -> Iterator[T]:
    """
    Lazily yields the values of the `Present` boxes in `boxes`, skipping the empty ones.

    Args:
        boxes: The boxes to flatten.

    Returns:
        An iterator over the contained values.

    Example:
        ```python
        >>> from boite import ABSENT, Failed, Present, flatten
        >>> list(flatten([Present(1), ABSENT, Failed.from_message("nope"), Present(3)]))
        [1, 3]

        ```
    """
    return cytoolz.concat(boxes)
