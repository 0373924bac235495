import logging

import pytest

from scribe_engine.buffer import BufferCapture, EditableDocument, InvalidInput


def make_document(text: str = "", *, font_size: int = 12) -> EditableDocument:
    document = EditableDocument(font_size=font_size)
    if text:
        document.write(text)
    return document


def test_new_document_is_empty() -> None:
    document = make_document()

    assert document.text == ""
    assert document.cursor == 0
    assert document.font_size == 12


def test_write_inserts_at_cursor_and_advances() -> None:
    document = make_document("Hello")
    document.set_cursor(0)

    document.write(">> ")

    assert document.text == ">> Hello"
    assert document.cursor == 3


@pytest.mark.parametrize("bad", ["", None, 42, b"bytes"])
def test_write_rejects_empty_or_non_text(bad) -> None:
    document = make_document("keep")

    with pytest.raises(InvalidInput):
        document.write(bad)

    assert document.text == "keep"
    assert document.cursor == 4


def test_delete_removes_characters_before_cursor() -> None:
    document = make_document("Hello World")

    document.delete(6)

    assert document.text == "Hello"
    assert document.cursor == 5


def test_delete_defaults_to_one_character() -> None:
    document = make_document("abc")

    document.delete()

    assert document.text == "ab"
    assert document.cursor == 2


def test_delete_past_start_is_logged_noop(caplog: pytest.LogCaptureFixture) -> None:
    document = make_document("abc")
    document.set_cursor(1)

    with caplog.at_level(logging.WARNING, logger="scribe_engine"):
        document.delete(3)

    assert document.text == "abc"
    assert document.cursor == 1
    assert any("document.delete_skipped" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("bad", [-1, 1.0, "2", None])
def test_delete_rejects_invalid_count(bad) -> None:
    document = make_document("abc")

    with pytest.raises(InvalidInput):
        document.delete(bad)

    assert document.text == "abc"


def test_write_then_delete_restores_content_and_cursor() -> None:
    document = make_document("start")
    document.set_cursor(2)
    document.set_font_size(20)

    document.write("inserted")
    document.delete(len("inserted"))

    assert document.text == "start"
    assert document.cursor == 2
    assert document.font_size == 20


def test_set_cursor_clamps_to_text_length() -> None:
    document = make_document("Hello")

    document.set_cursor(1000)

    assert document.cursor == 5


@pytest.mark.parametrize("bad", [-1, 2.5, None])
def test_set_cursor_rejects_invalid_position(bad) -> None:
    document = make_document("Hello")

    with pytest.raises(InvalidInput):
        document.set_cursor(bad)

    assert document.cursor == 5


def test_set_font_size() -> None:
    document = make_document()

    document.set_font_size(18)

    assert document.font_size == 18


@pytest.mark.parametrize("bad", [0, -2, 10.5, True])
def test_set_font_size_rejects_invalid(bad) -> None:
    document = make_document()

    with pytest.raises(InvalidInput):
        document.set_font_size(bad)

    assert document.font_size == 12


def test_snapshot_and_restore_roundtrip() -> None:
    document = make_document("Hello")
    document.set_font_size(16)
    capture = document.snapshot()

    document.write(" World")
    document.set_font_size(9)
    document.restore_from(capture)

    assert (document.text, document.cursor, document.font_size) == ("Hello", 5, 16)


def test_restore_rejects_missing_capture() -> None:
    document = make_document("Hello")

    with pytest.raises(InvalidInput):
        document.restore_from(None)  # type: ignore[arg-type]

    assert document.text == "Hello"


def test_restore_uses_capture_built_elsewhere() -> None:
    document = make_document()

    document.restore_from(BufferCapture(text="external", cursor=3, font_size=30))

    assert document.view().render().splitlines()[:3] == [
        'Content: "external"',
        "Cursor at position: 3",
        "Font size: 30",
    ]


def test_reset_returns_to_defaults() -> None:
    document = make_document("abc", font_size=14)
    document.set_font_size(40)

    document.reset()

    assert (document.text, document.cursor, document.font_size) == ("", 0, 14)


def test_default_font_size_comes_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCRIBE_ENGINE_FONT_SIZE", "15")

    assert EditableDocument().font_size == 15


def test_restore_cannot_place_cursor_past_content() -> None:
    document = make_document("xyz")

    with pytest.raises(InvalidInput):
        document.restore_from(BufferCapture(text="ab", cursor=10, font_size=12))

    assert (document.text, document.cursor) == ("xyz", 3)
