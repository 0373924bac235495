from datetime import datetime
from dataclasses import FrozenInstanceError

import pytest

from scribe_engine.buffer import BufferCapture, InvalidInput


def test_capture_holds_copied_state() -> None:
    capture = BufferCapture(text="Hello", cursor=5, font_size=12)

    assert capture.text == "Hello"
    assert capture.cursor == 5
    assert capture.font_size == 12
    assert isinstance(capture.created_at, datetime)
    assert capture.is_valid() is True


def test_capture_is_immutable() -> None:
    capture = BufferCapture(text="", cursor=0, font_size=12)

    with pytest.raises(FrozenInstanceError):
        capture.text = "changed"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("text", "cursor", "font_size", "field"),
    [
        (None, 0, 12, "text"),
        ("abc", -1, 12, "position"),
        ("abc", 1.5, 12, "position"),
        ("abc", 0, 0, "font_size"),
        ("abc", 0, -3, "font_size"),
        ("abc", 0, 11.5, "font_size"),
        ("abc", True, 12, "position"),
        ("ab", 3, 12, "position"),
    ],
)
def test_capture_rejects_invalid_fields(text, cursor, font_size, field) -> None:
    with pytest.raises(InvalidInput) as excinfo:
        BufferCapture(text=text, cursor=cursor, font_size=font_size)

    assert excinfo.value.field == field


def test_capture_equality_ignores_timestamp() -> None:
    first = BufferCapture(text="a", cursor=1, font_size=14)
    second = BufferCapture(text="a", cursor=1, font_size=14)

    assert first == second


@pytest.mark.parametrize(("name", "value"), [("cursor", True), ("cursor", 3), ("font_size", True)])
def test_is_valid_rechecks_fields(name: str, value: object) -> None:
    capture = BufferCapture(text="ab", cursor=1, font_size=12)
    object.__setattr__(capture, name, value)

    assert capture.is_valid() is False
