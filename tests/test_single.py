"""Tests for the single-choice prompt."""

import random

import pytest

from termmenu.events import QUIT, KeyEvent
from termmenu.ui.single import SingleSelectPrompt


class TestSingleSelectInit:
    def test_initial_state(self):
        prompt = SingleSelectPrompt(["a", "b"], title="T", message="M")
        assert prompt.cursor == 0
        assert prompt.selected == ""
        assert prompt.selected_index is None
        assert prompt.interrupted is False
        assert prompt.init() is None

    def test_choices_are_copied(self):
        choices = ["a", "b"]
        prompt = SingleSelectPrompt(choices)
        choices.append("c")
        assert prompt.choices == ["a", "b"]


class TestSingleSelectNavigation:
    def test_scenario_down_down_enter_selects_blue(self, press):
        prompt = SingleSelectPrompt(["red", "green", "blue"])
        commands = press(prompt, "down", "down", "enter")

        assert prompt.selected == "blue"
        assert prompt.selected_index == 2
        assert commands == [None, None, QUIT]

    def test_up_clamps_at_top(self, press):
        prompt = SingleSelectPrompt(["a", "b", "c"])
        press(prompt, "up", "up")
        assert prompt.cursor == 0

    def test_down_clamps_at_bottom(self, press):
        prompt = SingleSelectPrompt(["a", "b", "c"])
        press(prompt, "down", "down", "down", "down")
        assert prompt.cursor == 2

    def test_vim_keys_navigate(self, press):
        prompt = SingleSelectPrompt(["a", "b", "c"])
        press(prompt, "j", "j", "k")
        assert prompt.cursor == 1

    def test_cursor_stays_in_bounds_for_random_walks(self):
        rng = random.Random(1234)
        for n in range(0, 6):
            prompt = SingleSelectPrompt([f"item{i}" for i in range(n)])
            for _ in range(50):
                prompt.update(KeyEvent(rng.choice(["up", "down"])))
                assert 0 <= prompt.cursor <= max(0, n - 1)

    def test_empty_choices_navigation_is_noop(self, press):
        prompt = SingleSelectPrompt([])
        commands = press(prompt, "down", "down", "up", "down")
        assert prompt.cursor == 0
        assert commands == [None, None, None, None]

    def test_empty_choices_confirm_is_noop(self, press):
        prompt = SingleSelectPrompt([])
        assert press(prompt, "enter", " ") == [None, None]
        assert prompt.selected == ""
        assert prompt.selected_index is None


class TestSingleSelectConfirm:
    @pytest.mark.parametrize("index", [0, 1, 2, 3])
    def test_confirm_selects_choice_under_cursor(self, index):
        choices = ["w", "x", "y", "z"]
        prompt = SingleSelectPrompt(choices)
        prompt.cursor = index

        assert prompt.update(KeyEvent("enter")) is QUIT
        assert prompt.selected == choices[index]

    def test_space_confirms(self, press):
        prompt = SingleSelectPrompt(["a", "b"])
        assert press(prompt, "down", " ") == [None, QUIT]
        assert prompt.selected == "b"

    def test_duplicate_choices_distinguished_by_index(self, press):
        prompt = SingleSelectPrompt(["same", "same"])
        press(prompt, "down", "enter")
        assert prompt.selected == "same"
        assert prompt.selected_index == 1

    def test_termination_requested_once(self, press):
        prompt = SingleSelectPrompt(["a", "b"])
        commands = press(prompt, "enter", "enter", "down", "q")
        assert commands.count(QUIT) == 1
        assert prompt.cursor == 0
        assert prompt.interrupted is False


class TestSingleSelectCancel:
    @pytest.mark.parametrize("key", ["ctrl+c", "q"])
    def test_cancel_sets_interrupted(self, press, key):
        prompt = SingleSelectPrompt(["a", "b"])
        commands = press(prompt, "down", key)
        assert prompt.interrupted is True
        assert prompt.selected == ""
        assert commands[-1] is QUIT

    def test_cancel_on_empty_list(self, press):
        prompt = SingleSelectPrompt([])
        assert press(prompt, "q") == [QUIT]
        assert prompt.interrupted is True

    def test_unknown_keys_and_events_ignored(self, press):
        prompt = SingleSelectPrompt(["a", "b"])
        assert press(prompt, "x", "tab", "esc") == [None, None, None]
        assert prompt.update(ValueError("not a key")) is None
        assert prompt.cursor == 0
        assert not prompt.done


class TestSingleSelectRender:
    def test_render_layout(self, press):
        prompt = SingleSelectPrompt(["red", "green", "blue"], title="Colors", message="Pick one")
        press(prompt, "down")

        assert prompt.render() == (
            "Colors\n"
            "Pick one\n"
            "\n"
            "  red\n"
            "> green\n"
            "  blue\n"
            "\n"
            "Press q or Ctrl+C to quit, Enter to select\n"
        )

    def test_render_empty_choices(self):
        prompt = SingleSelectPrompt([], title="T", message="M")
        assert prompt.render() == "T\nM\n\n\nPress q or Ctrl+C to quit, Enter to select\n"
