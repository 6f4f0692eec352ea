"""Drawing the model onto a curses screen."""

from __future__ import annotations

import curses

from modaledit.model import CommandMode, InsertMode, Mode, Model, NormalMode

NEW_FILE_TITLE = "New file"
NOPE_TEXT = " Nope !!!"
COMMAND_PROMPT = " :"

PALETTE = {
    curses.COLOR_GREEN: 1,
    curses.COLOR_BLUE: 2,
    curses.COLOR_YELLOW: 3,
    curses.COLOR_WHITE: 4,
    curses.COLOR_RED: 5,
}

_EDITOR_PERCENT, _STATUS_PERCENT, _COMMAND_PERCENT = 95, 3, 2


def mode_color(mode: Mode) -> int:
    """Border colour for a mode."""
    match mode:
        case InsertMode():
            return curses.COLOR_BLUE
        case NormalMode():
            return curses.COLOR_GREEN
        case CommandMode():
            return curses.COLOR_YELLOW
    raise TypeError(f"not a mode: {mode!r}")


def compute_layout(height: int) -> tuple[tuple[int, int], ...]:
    """Split the screen height into editor, status and command rows.

    Each area is (top, rows). The two bottom areas keep a row each while
    the screen has room for them.
    """
    height = max(height, 0)
    command = min(height, max(1, round(height * _COMMAND_PERCENT / 100)))
    status = min(height - command, max(1, round(height * _STATUS_PERCENT / 100)))
    editor = height - status - command
    return ((0, editor), (editor, status), (editor + status, command))


def title(model: Model) -> str:
    """Name shown on the editor border."""
    path = model.buffer.path_to_file
    return NEW_FILE_TITLE if path is None else path


def _color_attr(color: int) -> int:
    try:
        return curses.color_pair(PALETTE[color])
    except curses.error:
        return 0


def _put(screen, y: int, x: int, text: str, limit: int, attr: int = 0) -> None:
    text = text[: max(0, limit - x)]
    if not text:
        return
    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        pass


def _draw_editor(screen, model: Model, area: tuple[int, int], width: int) -> None:
    top, rows = area
    if rows < 2 or width < 2:
        return
    border = _color_attr(mode_color(model.mode))
    bottom = top + rows - 1
    _put(screen, top, 0, "┏" + "━" * (width - 2) + "┓", width, border)
    for y in range(top + 1, bottom):
        _put(screen, y, 0, "┃", width, border)
        _put(screen, y, width - 1, "┃", width, border)
    _put(screen, bottom, 0, "┗" + "━" * (width - 2) + "┛", width, border)
    _put(screen, bottom, 1, title(model), width - 1, border | curses.A_BOLD)

    text_attr = _color_attr(curses.COLOR_WHITE)
    lines = model.buffer.text().split("\n")
    for y, line in zip(range(top + 1, bottom), lines):
        _put(screen, y, 1, line, width - 1, text_attr)

    cursor = model.cursor
    if cursor.line < rows - 2 and cursor.column < width - 2:
        try:
            screen.move(top + 1 + cursor.line, 1 + cursor.column)
        except curses.error:
            pass


def draw(screen, model: Model) -> None:
    """Render one frame of the editor."""
    screen.erase()
    height, width = screen.getmaxyx()
    editor, status, command = compute_layout(height)

    if model.nope > 0 and status[1] > 0:
        _put(screen, status[0], 0, NOPE_TEXT, width, _color_attr(curses.COLOR_RED))

    if isinstance(model.mode, CommandMode) and command[1] > 0:
        _put(screen, command[0], 0, COMMAND_PROMPT + model.mode.command_line.user_input, width)

    _draw_editor(screen, model, editor, width)
    screen.refresh()