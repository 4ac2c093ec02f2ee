"""Classification of raised conditions into recoverable failures and fatal ones."""

from __future__ import annotations

from typing import Final

FATAL_EXCEPTIONS: Final[tuple[type[BaseException], ...]] = (
    AssertionError,
    MemoryError,
    RecursionError,
    SystemError,
)
"""`Exception` subclasses that signal a broken program or interpreter rather than an expected failure."""


def is_fatal(exc: BaseException) -> bool:
    """
    Returns `True` if `exc` must never be captured into a `Failed` box.

    Anything outside the `Exception` hierarchy (`KeyboardInterrupt`, `SystemExit`, `GeneratorExit`...)
    is fatal, as is any instance of `FATAL_EXCEPTIONS`.

    Args:
        exc: The raised condition to classify.

    Returns:
        `True` for fatal conditions, `False` for recoverable ones.

    Example:
        ```python
        >>> from boite import is_fatal
        >>> is_fatal(ValueError("bad input"))
        False
        >>> is_fatal(AssertionError())
        True
        >>> is_fatal(KeyboardInterrupt())
        True

        ```
    """
    if not isinstance(exc, Exception):
        return True
    return isinstance(exc, FATAL_EXCEPTIONS)
