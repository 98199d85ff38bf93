"""Terminal Output

Status lines go to stdout, diagnostics and the progress spinner to stderr,
so redirecting stdout captures only what the user is meant to read.
"""

import itertools
import os
import sys
import threading


class Colors:
    """ANSI escape codes used by the status lines."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'


def _color_wanted(stream) -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    return hasattr(stream, 'isatty') and stream.isatty()


def _can_encode(text: str) -> bool:
    try:
        text.encode(sys.stdout.encoding or 'utf-8')
        return True
    except (UnicodeEncodeError, LookupError):
        return False


COLORS_ENABLED = _color_wanted(sys.stdout)
UNICODE_ENABLED = _can_encode('✓✗⠋')

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'


def disable_colors() -> None:
    """Turn off ANSI codes for the rest of the run (--no-color)."""
    global COLORS_ENABLED
    COLORS_ENABLED = False


def _paint(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return ''.join(codes) + text + Colors.RESET


def bold(text: str) -> str:
    return _paint(text, Colors.BOLD)


def dim(text: str) -> str:
    return _paint(text, Colors.DIM)


def print_success(message: str) -> None:
    print(f"{_paint(CHECK, Colors.GREEN)} {message}")


def print_error(message: str) -> None:
    print(_paint(f"{CROSS} {message}", Colors.RED), file=sys.stderr)


class Spinner:
    """Progress indicator on stderr while the commit message is generated.

    Draws nothing unless stderr is a terminal.
    """
    FRAMES = '⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏' if UNICODE_ENABLED else '-\\|/'
    INTERVAL = 0.08

    def __init__(self, label: str = "Generating commit message..."):
        self.label = label
        self._stream = None
        self._thread = None
        self._done = threading.Event()

    def _draw(self, frame: str) -> None:
        self._stream.write(f'\r\033[K{frame} {self.label}')
        self._stream.flush()

    def _run(self, frames) -> None:
        while not self._done.wait(self.INTERVAL):
            self._draw(next(frames))

    def __enter__(self):
        self._stream = sys.stderr
        if self._stream.isatty():
            frames = itertools.cycle(self.FRAMES)
            self._draw(next(frames))
            self._done.clear()
            self._thread = threading.Thread(target=self._run, args=(frames,), daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *exc):
        self._done.set()
        if self._thread:
            self._thread.join()
            self._thread = None
            self._stream.write('\r\033[K')
            self._stream.flush()
        return False


__all__ = [
    "COLORS_ENABLED", "UNICODE_ENABLED", "CHECK", "CROSS",
    "disable_colors", "bold", "dim",
    "print_success", "print_error",
    "Spinner",
]
