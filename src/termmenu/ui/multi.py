"""Multiple-choice prompt with per-item toggles."""

from typing import Any

from termmenu.events import QUIT, Command, key_name

from .formatting import MULTI_FOOTER, format_choice_lines, format_header
from .single import CANCEL_KEYS, DOWN_KEYS, UP_KEYS

CONFIRM_KEY = "enter"
TOGGLE_KEY = " "
TOGGLE_ALL_KEY = "esc"


class MultiSelectPrompt:
    """Pick zero or more of N choices.

    Space toggles the item under the cursor. Esc clears everything when
    anything is selected, otherwise selects everything. Enter finishes with
    the current selection.
    """

    def __init__(self, choices: list[str], title: str = "", message: str = ""):
        self.choices = list(choices)
        self.title = title
        self.message = message
        self.cursor = 0
        self.selected: set[int] = set()
        self.interrupted = False
        self.confirmed = False

    @property
    def done(self) -> bool:
        return self.interrupted or self.confirmed

    @property
    def selected_choices(self) -> list[str]:
        """Chosen strings in list order."""
        return [self.choices[i] for i in sorted(self.selected)]

    def init(self) -> Command:
        return None

    def update(self, event: Any) -> Command:
        key = key_name(event)
        if key is None or self.done:
            return None

        if key in CANCEL_KEYS:
            self.interrupted = True
            return QUIT
        if key in UP_KEYS:
            self.cursor = max(0, self.cursor - 1)
        elif key in DOWN_KEYS:
            self.cursor = max(0, min(len(self.choices) - 1, self.cursor + 1))
        elif key == CONFIRM_KEY:
            self.confirmed = True
            return QUIT
        elif key == TOGGLE_KEY and self.choices:
            if self.cursor in self.selected:
                self.selected.discard(self.cursor)
            else:
                self.selected.add(self.cursor)
        elif key == TOGGLE_ALL_KEY:
            self.toggle_all()
        return None

    def toggle_all(self) -> None:
        """Clear when anything is selected, else select every index."""
        if self.selected:
            self.selected.clear()
        else:
            self.selected = set(range(len(self.choices)))

    def render(self) -> str:
        s = format_header(self.title, self.message)
        s += format_choice_lines(self.choices, self.cursor, checked=self.selected)
        summary = ", ".join(self.selected_choices) or "none"
        s += f"\nSelected: {summary}\n"
        s += f"\n{MULTI_FOOTER}\n"
        return s
