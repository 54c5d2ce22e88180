"""
In-memory text buffer behind the entry editor.

The cursor is a character index into ``content`` and ``scroll_offset`` counts
logical lines (split on "\\n") hidden above the viewport. Wrapping is left to
the renderer. Every operation clamps instead of raising.
"""


class TextBuffer:
    def __init__(self, content: str = ""):
        self.content = content
        self.cursor_position = len(content)
        self.scroll_offset = 0

    def set_content(self, content: str):
        self.content = content
        self.cursor_position = len(content)
        self.scroll_offset = 0

    # -----------------------------------------------------------------
    # EDITING
    # -----------------------------------------------------------------
    def insert_char(self, c: str):
        pos = self.cursor_position
        self.content = self.content[:pos] + c + self.content[pos:]
        self.cursor_position += len(c)

    def insert_newline(self):
        self.insert_char("\n")

    def delete_char(self):
        if self.cursor_position > 0:
            pos = self.cursor_position - 1
            self.content = self.content[:pos] + self.content[pos + 1:]
            self.cursor_position = pos

    # -----------------------------------------------------------------
    # CURSOR MOTION
    # -----------------------------------------------------------------
    def move_cursor_left(self):
        if self.cursor_position > 0:
            self.cursor_position -= 1

    def move_cursor_right(self):
        if self.cursor_position < len(self.content):
            self.cursor_position += 1

    def move_cursor_up(self):
        line, col = self.cursor_line_col()
        if line > 0:
            self.cursor_position = self._position_at(line - 1, col)

    def move_cursor_down(self):
        lines = self.lines()
        line, col = self.cursor_line_col()
        if line < len(lines) - 1:
            self.cursor_position = self._position_at(line + 1, col)

    def lines(self):
        return self.content.split("\n")

    def cursor_line_col(self):
        """Return the (line, column) of the cursor, both zero-based."""
        count = 0
        lines = self.lines()
        for i, line in enumerate(lines):
            if count + len(line) >= self.cursor_position:
                return i, self.cursor_position - count
            count += len(line) + 1
        return len(lines) - 1, len(lines[-1])

    def _position_at(self, line_index: int, col: int) -> int:
        lines = self.lines()
        pos = sum(len(l) + 1 for l in lines[:line_index])
        return pos + min(col, len(lines[line_index]))

    # -----------------------------------------------------------------
    # VIEWPORT
    # -----------------------------------------------------------------
    def get_display_lines(self, height: int):
        height = max(1, height)
        visible = self.lines()[self.scroll_offset:self.scroll_offset + height]
        return visible + [""] * (height - len(visible))

    def adjust_scroll(self, viewport_height: int):
        viewport_height = max(1, viewport_height)
        line, _ = self.cursor_line_col()
        if line < self.scroll_offset:
            self.scroll_offset = line
        elif line >= self.scroll_offset + viewport_height:
            self.scroll_offset = line - viewport_height + 1
