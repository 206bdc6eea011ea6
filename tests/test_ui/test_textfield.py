"""Tests for the text editing widget."""

from termmenu.events import KeyEvent, Schedule
from termmenu.ui.textfield import BlinkTick, TextField

CURSOR_ON = "\x1b[7m"
CURSOR_OFF = "\x1b[27m"


def _field(**kwargs) -> TextField:
    field = TextField(**kwargs)
    field.focus()
    return field


def _type(field: TextField, *keys: str) -> None:
    for key in keys:
        field.update(KeyEvent(key))


class TestEditing:
    def test_insert_at_cursor(self):
        field = _field()
        _type(field, "a", "c", "left", "b")
        assert field.value == "abc"
        assert field.position == 2

    def test_space_is_inserted(self):
        field = _field()
        _type(field, "a", " ", "b")
        assert field.value == "a b"

    def test_backspace_and_delete(self):
        field = _field()
        field.set_value("abcd")
        _type(field, "left", "left", "backspace")
        assert field.value == "acd"
        assert field.position == 1

        _type(field, "delete")
        assert field.value == "ad"
        assert field.position == 1

    def test_backspace_at_start_is_noop(self):
        field = _field()
        field.set_value("ab")
        _type(field, "home", "backspace")
        assert field.value == "ab"
        assert field.position == 0

    def test_home_end_and_readline_aliases(self):
        field = _field()
        field.set_value("hello")
        _type(field, "ctrl+a")
        assert field.position == 0
        _type(field, "ctrl+e")
        assert field.position == 5
        _type(field, "home", "right", "right")
        assert field.position == 2
        _type(field, "end", "right")
        assert field.position == 5

    def test_kill_to_start_and_end(self):
        field = _field()
        field.set_value("hello world")
        _type(field, "home", "right", "right", "ctrl+k")
        assert field.value == "he"

        field.set_value("hello world")
        _type(field, "left", "left", "ctrl+u")
        assert field.value == "ld"
        assert field.position == 0

    def test_delete_word_backward(self):
        field = _field()
        field.set_value("git commit  ")
        _type(field, "ctrl+w")
        assert field.value == "git "
        _type(field, "ctrl+w")
        assert field.value == ""

    def test_char_limit_drops_extra_characters(self):
        field = _field(char_limit=5)
        _type(field, *"abcdef")
        assert field.value == "abcde"

        _type(field, "home", "z")
        assert field.value == "abcde"

    def test_set_value_respects_char_limit(self):
        field = _field(char_limit=3)
        field.set_value("abcdef")
        assert field.value == "abc"
        assert field.position == 3

    def test_unfocused_field_ignores_keys(self):
        field = TextField()
        assert field.update(KeyEvent("a")) is None
        assert field.value == ""

    def test_unhandled_key_returns_none(self):
        field = _field()
        assert field.update(KeyEvent("up")) is None
        assert field.update(KeyEvent("tab")) is None


class TestBlink:
    def test_key_shows_cursor_and_rearms_blink(self):
        field = _field(blink_interval=0.5)
        field.cursor_visible = False

        command = field.update(KeyEvent("x"))

        assert field.cursor_visible is True
        assert isinstance(command, Schedule)
        assert command.delay == 0.5

    def test_current_tick_toggles_cursor(self):
        field = _field()
        tick = field.blink().event

        command = field.update(tick)

        assert field.cursor_visible is False
        assert isinstance(command, Schedule)
        assert command.event != tick

        field.update(command.event)
        assert field.cursor_visible is True

    def test_stale_tick_is_ignored(self):
        field = _field()
        stale = field.blink().event
        field.blink()

        assert field.update(stale) is None
        assert field.cursor_visible is True

    def test_tick_for_other_field_is_ignored(self):
        field = _field()
        other = _field()
        tick = other.blink().event

        assert field.update(tick) is None
        assert field.update(BlinkTick(field_id=-1, tag=1)) is None


class TestRender:
    def test_placeholder_with_cursor(self):
        field = _field(placeholder="Name")
        assert field.render() == f"> {CURSOR_ON}N{CURSOR_OFF}ame"

    def test_placeholder_without_cursor(self):
        field = _field(placeholder="Name")
        field.cursor_visible = False
        assert field.render() == "> Name"

    def test_placeholder_truncated_to_width(self):
        field = _field(placeholder="Your full name", width=4)
        field.cursor_visible = False
        assert field.render() == "> Your"

    def test_cursor_after_text(self):
        field = _field()
        field.set_value("hello")
        assert field.render() == f"> hello{CURSOR_ON} {CURSOR_OFF}"

    def test_cursor_inside_text(self):
        field = _field()
        field.set_value("abc")
        _type(field, "left")
        assert field.render() == f"> ab{CURSOR_ON}c{CURSOR_OFF} "

    def test_width_scrolls_to_keep_cursor_visible(self):
        field = _field(width=3)
        field.set_value("abcdef")
        assert field.render() == f"> ef{CURSOR_ON} {CURSOR_OFF}"

        _type(field, "home")
        assert field.render() == f"> {CURSOR_ON}a{CURSOR_OFF}bc"

    def test_custom_prompt(self):
        field = TextField(prompt="$ ")
        field.set_value("ls")
        assert field.render() == "$ ls "
