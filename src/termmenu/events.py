"""Events delivered to prompt models and the commands they return."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class KeyEvent:
    """A decoded keypress, e.g. "up", "enter", "ctrl+c" or "a"."""

    key: str

    def __str__(self) -> str:
        return self.key


class Quit:
    """Termination request. Use the QUIT singleton."""

    _instance: "Quit | None" = None

    def __new__(cls) -> "Quit":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "QUIT"


QUIT = Quit()


@dataclass(frozen=True)
class Schedule:
    """Deliver `event` back to the model after `delay` seconds."""

    delay: float
    event: Any


Command = Quit | Schedule | None


def key_name(event: Any) -> str | None:
    """Return the key name for key events, None for anything else."""
    if isinstance(event, KeyEvent):
        return event.key
    return None
