import pytest

from modaledit.buffer import Buffer
from modaledit.model import Cursor


def type_text(buffer, cursor, text):
    for char in text:
        if char == "\n":
            buffer.new_line(cursor)
        else:
            buffer.add_char(cursor, char)


def test_new_buffer_has_one_empty_line():
    buffer = Buffer()
    assert buffer.text() == ""
    assert buffer.line_length(0) == 0
    assert buffer.line_length(1) is None
    assert buffer.path_to_file is None


def test_typing_moves_cursor():
    buffer, cursor = Buffer(), Cursor()
    type_text(buffer, cursor, "hello")
    assert buffer.text() == "hello"
    assert cursor.column == len("hello")
    assert cursor.line == 0


def test_insert_in_middle():
    buffer, cursor = Buffer(), Cursor()
    type_text(buffer, cursor, "ac")
    cursor.column = 1
    buffer.add_char(cursor, "b")
    assert buffer.text() == "abc"
    assert cursor.column == len("ab")


def test_delete_on_same_line():
    buffer, cursor = Buffer(), Cursor()
    type_text(buffer, cursor, "abc")
    buffer.delete_char(cursor)
    assert buffer.text() == "ab"
    assert cursor.column == len("ab")


def test_delete_at_start_of_buffer_does_nothing():
    buffer, cursor = Buffer(), Cursor()
    type_text(buffer, cursor, "abc")
    cursor.column = 0
    buffer.delete_char(cursor)
    assert buffer.text() == "abc"
    assert cursor == Cursor()


def test_new_line_splits_line():
    buffer, cursor = Buffer(), Cursor()
    type_text(buffer, cursor, "hello")
    cursor.column = len("he")
    buffer.new_line(cursor)
    assert buffer.text() == "he\nllo"
    assert cursor == Cursor(line=1, column=0)


def test_delete_at_line_start_merges_lines():
    buffer, cursor = Buffer(), Cursor()
    type_text(buffer, cursor, "he\nllo")
    cursor.column = 0
    buffer.delete_char(cursor)
    assert buffer.text() == "hello"
    assert cursor == Cursor(line=0, column=len("he"))


@pytest.mark.parametrize("text", ["", "one", "one\ntwo", "a\n\nb\n", "\n\n"])
def test_typing_round_trips(text):
    buffer, cursor = Buffer(), Cursor()
    type_text(buffer, cursor, text)
    assert buffer.text() == text
    assert cursor.line == text.count("\n")


def test_cursor_past_last_line_is_ignored():
    buffer, cursor = Buffer(), Cursor(line=5, column=0)
    buffer.add_char(cursor, "x")
    buffer.new_line(cursor)
    buffer.delete_char(cursor)
    assert buffer.text() == ""
    assert cursor == Cursor(line=5, column=0)


@pytest.mark.parametrize("method", ["new_line", "delete_char"])
def test_column_past_end_raises(method):
    buffer = Buffer()
    with pytest.raises(IndexError):
        getattr(buffer, method)(Cursor(line=0, column=3))


def test_add_char_column_past_end_raises():
    with pytest.raises(IndexError):
        Buffer().add_char(Cursor(line=0, column=3), "x")


def test_validate_cursor_clamps():
    buffer, cursor = Buffer(), Cursor()
    type_text(buffer, cursor, "ab\nc")
    cursor.line, cursor.column = 10, 10
    buffer.validate_cursor(cursor)
    assert cursor.line == buffer.text().count("\n")
    assert cursor.column == buffer.line_length(cursor.line)


def test_validate_cursor_keeps_valid_position():
    buffer, cursor = Buffer(), Cursor()
    type_text(buffer, cursor, "abc")
    cursor.column = 1
    buffer.validate_cursor(cursor)
    assert cursor == Cursor(line=0, column=1)