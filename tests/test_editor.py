"""
Tests for the entry editor's text buffer.
"""
import pytest

from daybook.editor import TextBuffer


@pytest.fixture
def buf():
    b = TextBuffer()
    b.set_content("first line\nsecond\nthird line here")
    return b


def test_set_content_moves_cursor_to_end_and_resets_scroll():
    b = TextBuffer()
    b.scroll_offset = 4
    b.set_content("日記を書く")
    assert b.cursor_position == 5
    assert b.scroll_offset == 0


def test_insert_counts_characters_not_bytes():
    b = TextBuffer()
    b.set_content("ab")
    b.cursor_position = 1
    for c in "日本語":
        b.insert_char(c)
    assert b.content == "a日本語b"
    assert b.cursor_position == 4
    assert len(b.content) == 5


def test_insert_then_delete_restores_text():
    b = TextBuffer()
    b.set_content("héllo wörld")
    b.cursor_position = 3
    b.insert_char("ß")
    b.delete_char()
    assert b.content == "héllo wörld"
    assert b.cursor_position == 3


def test_delete_removes_multibyte_character_whole():
    b = TextBuffer()
    b.set_content("a😀b")
    b.cursor_position = 2
    b.delete_char()
    assert b.content == "ab"
    assert b.cursor_position == 1


def test_delete_at_start_is_noop():
    b = TextBuffer()
    b.set_content("abc")
    b.cursor_position = 0
    b.delete_char()
    assert b.content == "abc"
    assert b.cursor_position == 0


def test_insert_newline_splits_line():
    b = TextBuffer()
    b.set_content("abcd")
    b.cursor_position = 2
    b.insert_newline()
    assert b.lines() == ["ab", "cd"]
    assert b.cursor_line_col() == (1, 0)


def test_left_right_clamp():
    b = TextBuffer()
    b.set_content("xy")
    b.move_cursor_right()
    assert b.cursor_position == 2
    b.move_cursor_left()
    b.move_cursor_left()
    b.move_cursor_left()
    assert b.cursor_position == 0


def test_cursor_line_col(buf):
    assert buf.cursor_line_col() == (2, 15)
    buf.cursor_position = 11
    assert buf.cursor_line_col() == (1, 0)
    buf.cursor_position = 10
    assert buf.cursor_line_col() == (0, 10)


def test_cursor_after_trailing_newline_is_on_empty_last_line():
    b = TextBuffer()
    b.set_content("abc\n")
    assert b.cursor_line_col() == (1, 0)
    b.move_cursor_up()
    assert b.cursor_position == 0


def test_move_up_clamps_column_to_shorter_line(buf):
    buf.move_cursor_up()
    assert buf.cursor_line_col() == (1, 6)
    buf.move_cursor_up()
    assert buf.cursor_line_col() == (0, 6)


def test_move_up_on_first_line_is_noop(buf):
    buf.cursor_position = 3
    buf.move_cursor_up()
    assert buf.cursor_position == 3


def test_move_down_keeps_column(buf):
    buf.cursor_position = 4
    buf.move_cursor_down()
    assert buf.cursor_line_col() == (1, 4)
    buf.move_cursor_down()
    assert buf.cursor_line_col() == (2, 4)
    buf.move_cursor_down()
    assert buf.cursor_line_col() == (2, 4)


def test_up_then_down_returns_to_same_line(buf):
    buf.cursor_position = 11 + 3
    buf.move_cursor_up()
    buf.move_cursor_down()
    assert buf.cursor_line_col() == (1, 3)


def test_column_measured_in_characters():
    b = TextBuffer()
    b.set_content("日本語の文\nabcdef")
    b.move_cursor_up()
    assert b.cursor_line_col() == (0, 5)
    b.cursor_position = 2
    b.move_cursor_down()
    assert b.cursor_line_col() == (1, 2)
    assert b.content[b.cursor_position] == "c"


@pytest.mark.parametrize("height", [1, 2, 3, 7])
def test_display_lines_always_height_entries(buf, height):
    assert len(buf.get_display_lines(height)) == height


def test_display_lines_pads_with_empty_lines(buf):
    assert buf.get_display_lines(5) == ["first line", "second", "third line here", "", ""]


def test_display_lines_starts_at_scroll_offset(buf):
    buf.scroll_offset = 1
    assert buf.get_display_lines(2) == ["second", "third line here"]


def test_display_lines_past_end_are_empty(buf):
    buf.scroll_offset = 10
    assert buf.get_display_lines(3) == ["", "", ""]


def test_display_lines_minimum_one():
    assert TextBuffer().get_display_lines(0) == [""]


def test_adjust_scroll_follows_cursor_down_and_up():
    b = TextBuffer()
    b.set_content("\n".join(str(i) for i in range(10)))
    b.adjust_scroll(3)
    assert b.scroll_offset == 7
    for _ in range(5):
        b.move_cursor_up()
    b.adjust_scroll(3)
    assert b.cursor_line_col()[0] == 4
    assert b.scroll_offset == 4


def test_adjust_scroll_leaves_visible_cursor_alone():
    b = TextBuffer()
    b.set_content("a\nb\nc\nd")
    b.scroll_offset = 1
    b.cursor_position = 4
    b.adjust_scroll(3)
    assert b.scroll_offset == 1
