"""Editor state: cursor, modes, messages and the model that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from modaledit.buffer import Buffer


@dataclass
class Cursor:
    """Position of the editing cursor inside the buffer."""

    line: int = 0
    column: int = 0


class RunningState(Enum):
    """Whether the main loop keeps going."""

    RUNNING = "running"
    DONE = "done"


@dataclass
class CommandLine:
    """Text typed after ':' in command mode."""

    user_input: str = ""

    def add_char(self, c: str) -> None:
        self.user_input += c

    def remove_char(self) -> None:
        self.user_input = self.user_input[:-1]

    def execute(self) -> Optional[list[Message]]:
        """Return the messages the typed command stands for.

        An unknown command clears the input and gives None.
        """
        match self.user_input:
            case "w":
                return [SaveFile()]
            case "wq":
                return [SaveFile(), Quit()]
        self.user_input = ""
        return None


@dataclass(frozen=True)
class NormalMode:
    """Keys are commands."""


@dataclass(frozen=True)
class InsertMode:
    """Keys are typed into the buffer."""


@dataclass
class CommandMode:
    """Keys are typed into the command line."""

    command_line: CommandLine = field(default_factory=CommandLine)


Mode = Union[NormalMode, InsertMode, CommandMode]


@dataclass(frozen=True)
class NewChar:
    char: str


@dataclass(frozen=True)
class Delete:
    pass


@dataclass(frozen=True)
class NewLine:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class ChangeMode:
    mode: Mode


@dataclass(frozen=True)
class SaveFile:
    pass


@dataclass(frozen=True)
class Nope:
    pass


Message = Union[NewChar, Delete, NewLine, Quit, ChangeMode, SaveFile, Nope]


class Model:
    """Everything the editor knows between two frames."""

    def __init__(self, path_to_file: Optional[str] = None) -> None:
        self.buffer = Buffer(path_to_file)
        self.cursor = Cursor()
        self.mode: Mode = NormalMode()
        self.running_state = RunningState.RUNNING
        self.nope = 0

    def __repr__(self) -> str:
        return (
            f"Model(path_to_file={self.buffer.path_to_file!r}, cursor={self.cursor!r}, "
            f"mode={self.mode!r}, running_state={self.running_state!r}, nope={self.nope})"
        )