"""Single-choice prompt."""

from typing import Any

from termmenu.events import QUIT, Command, key_name

from .formatting import SINGLE_FOOTER, format_choice_lines, format_header

CANCEL_KEYS = ("ctrl+c", "q")
UP_KEYS = ("up", "k")
DOWN_KEYS = ("down", "j")
CONFIRM_KEYS = ("enter", " ")


class SingleSelectPrompt:
    """Pick one of N choices with the cursor.

    Example:
        prompt = SingleSelectPrompt(["red", "green", "blue"], title="Colors")
        prompt, err = run(prompt)
        if not err and not prompt.interrupted:
            print(prompt.selected)
    """

    def __init__(self, choices: list[str], title: str = "", message: str = ""):
        self.choices = list(choices)
        self.title = title
        self.message = message
        self.cursor = 0
        self.selected = ""
        self.selected_index: int | None = None
        self.interrupted = False

    @property
    def done(self) -> bool:
        return self.interrupted or self.selected_index is not None

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
            # Stays at 0 for an empty list
            self.cursor = max(0, min(len(self.choices) - 1, self.cursor + 1))
        elif key in CONFIRM_KEYS and self.choices:
            self.selected_index = self.cursor
            self.selected = self.choices[self.cursor]
            return QUIT
        return None

    def render(self) -> str:
        s = format_header(self.title, self.message)
        s += format_choice_lines(self.choices, self.cursor)
        s += f"\n{SINGLE_FOOTER}\n"
        return s
