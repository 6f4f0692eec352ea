"""Applying messages to the model."""

from __future__ import annotations

import sys
from typing import Optional

from modaledit.model import (
    ChangeMode,
    CommandMode,
    Delete,
    Message,
    Mode,
    Model,
    NewChar,
    NewLine,
    NormalMode,
    Nope,
    Quit,
    RunningState,
    SaveFile,
)

BLINKING_BLOCK = "\x1b[1 q"
STEADY_BLOCK = "\x1b[2 q"
NOPE_FRAMES = 30


def cursor_style(mode: Mode) -> str:
    """Terminal sequence selecting the cursor shape for a mode."""
    if isinstance(mode, NormalMode):
        return BLINKING_BLOCK
    return STEADY_BLOCK


def update(model: Model, message: Message) -> Optional[Message]:
    """Apply a message; return a follow-up message, if any."""
    mode = model.mode
    match message:
        case NewChar(char=char):
            if isinstance(mode, CommandMode):
                mode.command_line.add_char(char)
            else:
                model.buffer.add_char(model.cursor, char)
        case Delete():
            if isinstance(mode, CommandMode):
                mode.command_line.remove_char()
            else:
                model.buffer.delete_char(model.cursor)
        case NewLine():
            if isinstance(mode, CommandMode):
                commands = mode.command_line.execute()
                if commands is None:
                    return Nope()
                for command in commands:
                    update(model, command)
                return ChangeMode(NormalMode())
            model.buffer.new_line(model.cursor)
        case Quit():
            model.running_state = RunningState.DONE
        case ChangeMode(mode=new_mode):
            sys.stdout.write(cursor_style(new_mode))
            sys.stdout.flush()
            model.mode = new_mode
        case Nope():
            model.nope = NOPE_FRAMES
            return ChangeMode(NormalMode())
        case SaveFile():
            pass
    return None