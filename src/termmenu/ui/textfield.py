"""Single-line text editing widget."""

import itertools
from dataclasses import dataclass
from typing import Any

from termmenu.events import Command, KeyEvent, Schedule

from .formatting import calculate_visible_range, reverse

DEFAULT_BLINK_INTERVAL = 0.53
DEFAULT_PROMPT = "> "

_field_ids = itertools.count(1)


@dataclass(frozen=True)
class BlinkTick:
    """Scheduled cursor blink for one field. Only the newest tag counts."""

    field_id: int
    tag: int


class TextField:
    """Editable line with cursor, placeholder, char limit and display width.

    Keys follow readline conventions: left/right, home/end (ctrl+a/ctrl+e),
    backspace, delete, ctrl+u/ctrl+k to kill to start/end and ctrl+w to
    delete the previous word. A char_limit or width of 0 means unlimited.
    """

    def __init__(
        self,
        placeholder: str = "",
        char_limit: int = 0,
        width: int = 0,
        blink_interval: float = DEFAULT_BLINK_INTERVAL,
        prompt: str = DEFAULT_PROMPT,
    ):
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.width = width
        self.blink_interval = blink_interval
        self.prompt = prompt
        self.value = ""
        self.position = 0
        self.offset = 0
        self.focused = False
        self.cursor_visible = True
        self._id = next(_field_ids)
        self._tag = 0

    def focus(self) -> None:
        self.focused = True
        self.cursor_visible = True

    def blur(self) -> None:
        self.focused = False
        self.cursor_visible = False

    def blink(self) -> Schedule:
        """Schedule the next blink. Earlier scheduled ticks become stale."""
        self._tag += 1
        return Schedule(self.blink_interval, BlinkTick(self._id, self._tag))

    def set_value(self, value: str) -> None:
        self.value = ""
        self.position = 0
        self.insert(value)

    def insert(self, text: str) -> None:
        """Insert at the cursor, dropping whatever exceeds char_limit."""
        if self.char_limit > 0:
            room = max(0, self.char_limit - len(self.value))
            text = text[:room]
        if not text:
            return
        self.value = self.value[: self.position] + text + self.value[self.position :]
        self.position += len(text)

    def update(self, event: Any) -> Command:
        if not self.focused:
            return None

        if isinstance(event, BlinkTick):
            if event.field_id != self._id or event.tag != self._tag:
                return None
            self.cursor_visible = not self.cursor_visible
            return self.blink()

        if not isinstance(event, KeyEvent):
            return None

        if not self._handle_key(event.key):
            return None

        # Any edit or movement shows the cursor and restarts the blink
        self.cursor_visible = True
        return self.blink()

    def _handle_key(self, key: str) -> bool:
        pos = self.position
        if key in ("left", "ctrl+b"):
            self.position = max(0, pos - 1)
        elif key in ("right", "ctrl+f"):
            self.position = min(len(self.value), pos + 1)
        elif key in ("home", "ctrl+a"):
            self.position = 0
        elif key in ("end", "ctrl+e"):
            self.position = len(self.value)
        elif key in ("backspace", "ctrl+h"):
            if pos > 0:
                self.value = self.value[: pos - 1] + self.value[pos:]
                self.position = pos - 1
        elif key in ("delete", "ctrl+d"):
            self.value = self.value[:pos] + self.value[pos + 1 :]
        elif key == "ctrl+u":
            self.value = self.value[pos:]
            self.position = 0
        elif key == "ctrl+k":
            self.value = self.value[:pos]
        elif key == "ctrl+w":
            self._delete_word_backward()
        elif len(key) == 1 and key.isprintable():
            self.insert(key)
        else:
            return False
        return True

    def _delete_word_backward(self) -> None:
        start = self.position
        while start > 0 and self.value[start - 1].isspace():
            start -= 1
        while start > 0 and not self.value[start - 1].isspace():
            start -= 1
        self.value = self.value[:start] + self.value[self.position :]
        self.position = start

    def render(self) -> str:
        """Prompt plus the visible part of the buffer, cursor in reverse video."""
        show_cursor = self.focused and self.cursor_visible

        if not self.value and self.placeholder:
            text = self.placeholder
            if self.width > 0:
                text = text[: self.width]
            head, tail = text[0], text[1:]
            return self.prompt + (reverse(head) if show_cursor else head) + tail

        # One extra cell so the cursor can sit after the last character
        cells = self.value + " "
        start, end = 0, len(cells)
        if self.width > 0:
            self.offset, start, end = calculate_visible_range(
                cursor=self.position,
                total_items=len(cells),
                max_visible=self.width,
                scroll_offset=self.offset,
            )

        parts = []
        for i in range(start, end):
            ch = cells[i]
            parts.append(reverse(ch) if show_cursor and i == self.position else ch)
        return self.prompt + "".join(parts)
