"""Terminal backends: attach, read keys, draw frames."""

import codecs
import os
import sys
import time
from collections import deque
from collections.abc import Iterable
from typing import IO, Protocol

import readchar
from rich.console import Console
from rich.errors import LiveError
from rich.live import Live
from rich.text import Text

from termmenu.keys import decode_key, take_sequences

if os.name == "posix":
    import select
    import termios
    import tty

    _ATTACH_ERRORS: tuple[type[Exception], ...] = (OSError, termios.error, LiveError)
else:
    _ATTACH_ERRORS = (OSError, LiveError)

# Poll interval for Windows, which cannot select() on the console
WINDOWS_POLL_INTERVAL = 0.02
READ_CHUNK_SIZE = 64
# How long a trailing "\x1b" waits for the rest of a sequence before it is Esc
ESCAPE_TIMEOUT = 0.05


class PromptLoopError(RuntimeError):
    """Raised when the terminal cannot be attached, read or drawn to."""

    pass


class Terminal(Protocol):
    """What the runner needs from a terminal."""

    def attach(self, full_screen: bool = False) -> None:
        """Take over the terminal, optionally on the alternate screen."""
        ...

    def detach(self) -> None:
        """Give the terminal back. Safe to call more than once."""
        ...

    def read_key(self, timeout: float | None) -> str | None:
        """Block for the next key name; None once `timeout` seconds pass."""
        ...

    def draw(self, view: str) -> None:
        """Replace the current frame with `view`."""
        ...


class RichTerminal:
    """Draws with rich.Live on stderr and reads keys from stdin.

    Rendering goes to stderr so a prompt never pollutes piped stdout. On
    POSIX the input is switched to cbreak mode with signals off, so Ctrl+C
    arrives as a "ctrl+c" key like any other.
    """

    def __init__(self, console: Console | None = None, stdin: IO | None = None):
        self.console = console or Console(stderr=True)
        self._stdin = stdin
        self._live: Live | None = None
        self._saved_mode: list | None = None
        self._pending: deque[str] = deque()
        # Bytes and escape sequences may be split across reads
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._partial = ""

    @property
    def stdin(self) -> IO:
        return self._stdin if self._stdin is not None else sys.stdin

    def attach(self, full_screen: bool = False) -> None:
        if not self.stdin.isatty():
            raise PromptLoopError("stdin is not an interactive terminal")
        try:
            if os.name == "posix":
                self._enter_key_mode(self.stdin.fileno())
            self._live = Live(
                Text(""),
                console=self.console,
                auto_refresh=False,
                screen=full_screen,
            )
            self._live.start()
        except _ATTACH_ERRORS as e:
            self._live = None
            self._restore_mode()
            raise PromptLoopError(f"could not attach terminal: {e}") from e

    def detach(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None
        self._restore_mode()
        self.console.show_cursor(True)

    def _enter_key_mode(self, fd: int) -> None:
        self._saved_mode = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        mode = termios.tcgetattr(fd)
        mode[tty.LFLAG] &= ~termios.ISIG
        termios.tcsetattr(fd, termios.TCSANOW, mode)

    def _restore_mode(self) -> None:
        if self._saved_mode is not None:
            termios.tcsetattr(self.stdin.fileno(), termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None

    def draw(self, view: str) -> None:
        if self._live is None:
            raise PromptLoopError("terminal is not attached")
        self._live.update(Text.from_ansi(view), refresh=True)

    def read_key(self, timeout: float | None) -> str | None:
        if os.name == "posix":
            return self._read_posix(timeout)
        try:
            return self._read_windows(timeout)
        except KeyboardInterrupt:
            # readchar raises on Ctrl+C
            return "ctrl+c"

    def _read_posix(self, timeout: float | None) -> str | None:
        fd = self.stdin.fileno()
        while not self._pending:
            wait = ESCAPE_TIMEOUT if self._partial else timeout
            ready, _, _ = select.select([fd], [], [], wait)
            if not ready:
                if not self._partial:
                    return None
                # Nothing followed, so the tail stands on its own (lone Esc)
                self._pending.append(self._partial)
                self._partial = ""
                break
            data = os.read(fd, READ_CHUNK_SIZE)
            if not data:
                raise PromptLoopError("stdin closed")
            text = self._partial + self._decoder.decode(data)
            keys, self._partial = take_sequences(text)
            self._pending.extend(keys)
        return decode_key(self._pending.popleft())

    def _read_windows(self, timeout: float | None) -> str | None:
        import msvcrt

        if timeout is not None:
            deadline = time.monotonic() + timeout
            while not msvcrt.kbhit():
                if time.monotonic() >= deadline:
                    return None
                time.sleep(WINDOWS_POLL_INTERVAL)
        return decode_key(readchar.readkey())


class ScriptedTerminal:
    """Replays a fixed sequence of keys and records every drawn frame.

    A None entry stands for an elapsed timeout, so the runner delivers its
    earliest scheduled event. An exception entry is raised from read_key.
    Running out of script raises PromptLoopError instead of blocking.
    """

    def __init__(self, keys: Iterable[str | None | BaseException] = ()):
        self._keys = deque(keys)
        self.frames: list[str] = []
        self.timeouts: list[float | None] = []
        self.attached = False
        self.full_screen = False

    def attach(self, full_screen: bool = False) -> None:
        self.attached = True
        self.full_screen = full_screen

    def detach(self) -> None:
        self.attached = False

    def draw(self, view: str) -> None:
        self.frames.append(view)

    def read_key(self, timeout: float | None) -> str | None:
        self.timeouts.append(timeout)
        if not self._keys:
            raise PromptLoopError("scripted input exhausted")
        key = self._keys.popleft()
        if isinstance(key, BaseException):
            raise key
        return key
