"""Non-blocking key press detection for the poll loop."""

import os
import select
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager

if os.name == "nt":
    import msvcrt
else:
    import termios
    import tty


def _stdin_is_tty() -> bool:
    return sys.stdin is not None and sys.stdin.isatty()


def key_pressed() -> bool:
    """Return True if a key press is waiting on stdin, consuming that key."""
    if not _stdin_is_tty():
        return False

    if os.name == "nt":
        if not msvcrt.kbhit():
            return False
        msvcrt.getch()
        return True

    readable, _, _ = select.select([sys.stdin], [], [], 0)
    if not readable:
        return False
    os.read(sys.stdin.fileno(), 1)
    return True


@contextmanager
def key_watcher() -> Iterator[Callable[[], bool]]:
    """
    Watch the terminal for a key press.

    On POSIX the terminal is switched to cbreak mode so a single key is seen
    without Enter; the previous mode is restored on exit.

    Yields:
        Callable returning True once a key has been pressed
    """
    if os.name == "nt" or not _stdin_is_tty():
        yield key_pressed
        return

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    tty.setcbreak(fd)
    try:
        yield key_pressed
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
