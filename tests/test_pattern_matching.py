"""Tests for structural pattern matching over Box variants."""

from __future__ import annotations

import pytest

from boite import ABSENT, Absent, Box, Failed, Present


def _describe(box: Box[int]) -> str:
    match box:
        case Present(value):
            return f"value {value}"
        case Failed(cause):
            return f"failed with {type(cause).__name__}"
        case Absent():
            return "nothing"
        case _:
            raise RuntimeError("unreachable")


@pytest.mark.parametrize(
    ("box", "expected"),
    [
        (Present(10), "value 10"),
        (ABSENT, "nothing"),
        (Failed(ZeroDivisionError()), "failed with ZeroDivisionError"),
        (Box.wrap(lambda: 1 // 0), "failed with ZeroDivisionError"),
    ],
)
def test_box_pattern_matching(box: Box[int], expected: str) -> None:
    """Test each variant is matched by its own class pattern."""
    assert _describe(box) == expected


def test_nested_pattern_matching() -> None:
    """Test nested boxes destructure in one pattern."""
    boxes: list[Box[Box[int]]] = [Present(Present(10)), Present(ABSENT), ABSENT]
    described: list[str] = []
    for box in boxes:
        match box:
            case Present(Present(value)):
                described.append(f"Present(Present({value}))")
            case Present(Absent()):
                described.append("Present(Absent)")
            case _:
                described.append("Absent")
    assert described == ["Present(Present(10))", "Present(Absent)", "Absent"]


def test_pattern_matching_with_guards() -> None:
    """Test guards apply to the destructured value."""
    threshold = 10
    boxes: list[Box[int]] = [Present(5), Present(15), Failed.from_message("invalid")]
    large: list[int] = []
    for box in boxes:
        match box:
            case Present(value) if value > threshold:
                large.append(value)
            case _:
                pass
    assert large == [15]
