"""Prompt models."""

from .base import PromptModel
from .multi import MultiSelectPrompt
from .single import SingleSelectPrompt
from .text_input import Outcome, TextInputPrompt
from .textfield import BlinkTick, TextField

__all__ = [
    "BlinkTick",
    "MultiSelectPrompt",
    "Outcome",
    "PromptModel",
    "SingleSelectPrompt",
    "TextField",
    "TextInputPrompt",
]
