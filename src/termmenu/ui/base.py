"""Prompt model protocol shared by all prompts."""

from typing import Any, Protocol

from termmenu.events import Command


class PromptModel(Protocol):
    """Capability set the runner drives: init, update, render."""

    def init(self) -> Command:
        """Return the startup command, if any."""
        ...

    def update(self, event: Any) -> Command:
        """Apply one event. Return QUIT to stop the runner."""
        ...

    def render(self) -> str:
        """Return the current view as plain text."""
        ...
