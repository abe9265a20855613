"""Raw-mode terminal session with an alternate screen buffer."""

import os
import shutil
import sys
import termios
import tty
from typing import Tuple


ENTER_ALT_SCREEN = "\x1b[?1049h"
LEAVE_ALT_SCREEN = "\x1b[?1049l"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CURSOR_HOME = "\x1b[H"

FALLBACK_SIZE = (80, 24)
READ_CHUNK = 32


class TerminalSession:
    """Owns the terminal for the lifetime of a `with` block.

    Raw mode is only entered when stdin is a TTY. The alternate screen and
    cursor are restored on exit whatever the exit path.
    """

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._saved_attrs = None

    def __enter__(self):
        if self.stdin.isatty():
            fd = self.stdin.fileno()
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setraw(fd)
            # Keep "\n" -> "\r\n" on output; only input should be raw.
            attrs = termios.tcgetattr(fd)
            attrs[1] |= termios.OPOST | termios.ONLCR
            termios.tcsetattr(fd, termios.TCSANOW, attrs)
        self._write(ENTER_ALT_SCREEN + HIDE_CURSOR)
        return self

    def __exit__(self, exc_type, exc, tb):
        self._write(LEAVE_ALT_SCREEN + SHOW_CURSOR)
        if self._saved_attrs is not None:
            termios.tcsetattr(self.stdin.fileno(), termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None
        return False

    def size(self) -> Tuple[int, int]:
        """Drawable (width, height); the bottom row is kept for the status bar."""
        columns, rows = shutil.get_terminal_size(fallback=FALLBACK_SIZE)
        return columns, rows - 1

    def read_key(self) -> bytes:
        """Block until input arrives; b"" means end of input."""
        return os.read(self.stdin.fileno(), READ_CHUNK)

    def draw(self, buffer: str):
        self._write(CURSOR_HOME + buffer)

    def _write(self, text: str):
        self.stdout.write(text)
        self.stdout.flush()
