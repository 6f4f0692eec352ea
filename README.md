# modaledit

A small modal text editor that runs in the terminal through `curses`. It has
three modes: Normal, Insert and Command. The frame around the text is
coloured by mode.

## Installing

```
pip install .
```

It needs only the standard library, including `curses`, so it runs where
Python ships `curses` (Linux, macOS and other POSIX systems).

## Running

```
modaledit [FILE_NAME]
```

The file name you give is shown at the bottom of the frame. Without one, the
frame shows "New file". The buffer always starts empty.

## Keys

Normal mode (the starting mode, green frame):

| Key | Action                  |
|-----|-------------------------|
| `i` | switch to Insert mode   |
| `:` | switch to Command mode  |
| `q` | quit                    |

Insert mode (blue frame):

| Key                  | Action                                                               |
|----------------------|----------------------------------------------------------------------|
| printable character  | insert it at the cursor                                              |
| Backspace            | delete the character before the cursor, or join with the line above  |
| Enter                | split the line at the cursor                                         |
| Esc                  | back to Normal mode                                                  |

Command mode (yellow frame): what you type shows on the bottom line after
`:`. Backspace removes the last character, Esc goes back to Normal mode and
Enter runs the command and returns to Normal mode:

| Command | Action                                         |
|---------|------------------------------------------------|
| `w`     | accepted; nothing is written (see below)       |
| `wq`    | quit                                           |

Any other command, including an empty one, shows "Nope !!!" on the status
line for a few frames and returns to Normal mode.

## What it does not do

- It does not read the file named on the command line; the name is only used
  as the title.
- It does not save. `:w` and `:wq` are recognised, but the `SaveFile`
  message they produce changes nothing, so `:wq` simply quits.
- There are no keys for moving the cursor; it moves only as you type,
  delete and split lines.

## Using it from Python

The editing logic does not need a terminal. `modaledit.model.Model` holds a
`Buffer`, a `Cursor`, the current mode (`NormalMode`, `InsertMode` or
`CommandMode`) and the running state. `modaledit.update.update(model, message)`
applies one message (`NewChar`, `Delete`, `NewLine`, `ChangeMode`, `Quit`,
`SaveFile` or `Nope`) and returns a follow-up message or `None`:

```python
from modaledit.model import Model, NewChar, NewLine, ChangeMode, InsertMode
from modaledit.update import update

model = Model(None)
message = ChangeMode(InsertMode())
while message is not None:
    message = update(model, message)
for ch in "hi":
    update(model, NewChar(ch))
update(model, NewLine())
print(model.buffer.text())
```

Applying `ChangeMode` writes a cursor-shape escape sequence to standard
output.

`modaledit.events.handle_key(mode, key)` turns a key (a character string or a
`curses` key code) into a message for the given mode, and
`modaledit.view.compute_layout(height)` splits a screen height into editor,
status and command rows.

## Tests

```
pip install .[test]
pytest
```