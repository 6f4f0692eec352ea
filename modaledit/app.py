"""Command-line entry point and main loop."""

from __future__ import annotations

import argparse
import curses
from typing import Optional, Sequence

from modaledit.events import read_message
from modaledit.model import Model, RunningState
from modaledit.update import update
from modaledit.view import PALETTE, draw

_ESCAPE_DELAY_MS = 25


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the optional file name."""
    parser = argparse.ArgumentParser(prog="modaledit", description="The editor")
    parser.add_argument("file_name", nargs="?", default=None, help="file to edit")
    return parser.parse_args(argv)


def _setup_terminal() -> None:
    try:
        curses.set_escdelay(_ESCAPE_DELAY_MS)
    except curses.error:
        pass
    try:
        curses.start_color()
        curses.use_default_colors()
        for color, pair in PALETTE.items():
            curses.init_pair(pair, color, -1)
    except curses.error:
        pass


def run(screen, model: Model) -> Model:
    """Draw, read and update until the model says it is done."""
    _setup_terminal()
    while model.running_state is not RunningState.DONE:
        if model.nope > 0:
            model.nope -= 1
        draw(screen, model)
        message = read_message(screen, model)
        while message is not None:
            message = update(model, message)
    return model


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    model = Model(args.file_name)
    curses.wrapper(run, model)
    return 0