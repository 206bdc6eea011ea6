"""Free-text input prompt."""

from enum import Enum
from typing import Any

from termmenu.events import QUIT, Command, key_name

from .formatting import INPUT_FOOTER
from .textfield import DEFAULT_BLINK_INTERVAL, TextField

DEFAULT_CHAR_LIMIT = 156
DEFAULT_WIDTH = 20

ACCEPT_KEY = "enter"
CANCEL_KEYS = ("ctrl+c", "esc")


class Outcome(Enum):
    """How a text input prompt finished."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    CANCELLED = "cancelled"


class TextInputPrompt:
    """Prompt line above a TextField.

    Editing is entirely the field's job; this model only frames it and
    decides when the runner stops. Error events are kept in `error` and
    shown under the hint until the prompt ends.
    """

    def __init__(
        self,
        prompt: str,
        placeholder: str = "",
        char_limit: int = DEFAULT_CHAR_LIMIT,
        width: int = DEFAULT_WIDTH,
        blink_interval: float = DEFAULT_BLINK_INTERVAL,
    ):
        self.prompt = prompt
        self.field = TextField(
            placeholder=placeholder,
            char_limit=char_limit,
            width=width,
            blink_interval=blink_interval,
        )
        self.field.focus()
        self.error: Exception | None = None
        self.outcome = Outcome.PENDING

    @property
    def value(self) -> str:
        return self.field.value

    @property
    def interrupted(self) -> bool:
        return self.outcome is Outcome.CANCELLED

    def init(self) -> Command:
        return self.field.blink()

    def update(self, event: Any) -> Command:
        if self.outcome is not Outcome.PENDING:
            return None

        key = key_name(event)
        if key == ACCEPT_KEY:
            self.outcome = Outcome.ACCEPTED
            return QUIT
        if key in CANCEL_KEYS:
            self.outcome = Outcome.CANCELLED
            return QUIT
        if isinstance(event, Exception):
            self.error = event
            return None

        return self.field.update(event)

    def render(self) -> str:
        s = f"{self.prompt}\n\n{self.field.render()}\n\n{INPUT_FOOTER}\n"
        if self.error is not None:
            s += f"\nError: {self.error}\n"
        return s
