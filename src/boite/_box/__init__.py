from ._box import ABSENT, Absent, Box, BoxEmptyError, Failed, Present, flatten
from ._fatal import FATAL_EXCEPTIONS, is_fatal

__all__ = [
    "ABSENT",
    "FATAL_EXCEPTIONS",
    "Absent",
    "Box",
    "BoxEmptyError",
    "Failed",
    "Present",
    "flatten",
    "is_fatal",
]
