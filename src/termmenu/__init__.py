"""Interactive terminal prompts: single select, multi select and text input."""

from termmenu.events import QUIT, KeyEvent, Schedule
from termmenu.runner import run
from termmenu.terminal import PromptLoopError, RichTerminal, ScriptedTerminal, Terminal
from termmenu.ui import (
    MultiSelectPrompt,
    Outcome,
    PromptModel,
    SingleSelectPrompt,
    TextField,
    TextInputPrompt,
)

__version__ = "0.1.0"

__all__ = [
    "QUIT",
    "KeyEvent",
    "MultiSelectPrompt",
    "Outcome",
    "PromptLoopError",
    "PromptModel",
    "RichTerminal",
    "Schedule",
    "ScriptedTerminal",
    "SingleSelectPrompt",
    "Terminal",
    "TextField",
    "TextInputPrompt",
    "run",
]
