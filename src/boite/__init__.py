import logging
from importlib.metadata import PackageNotFoundError, version

from ._box import (
    ABSENT,
    FATAL_EXCEPTIONS,
    Absent,
    Box,
    BoxEmptyError,
    Failed,
    Present,
    flatten,
    is_fatal,
)
from ._core import Pipeable

try:
    __version__ = version("boite")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ABSENT",
    "FATAL_EXCEPTIONS",
    "Absent",
    "Box",
    "BoxEmptyError",
    "Failed",
    "Pipeable",
    "Present",
    "flatten",
    "is_fatal",
]
