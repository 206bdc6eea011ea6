"""Translate raw readchar sequences into key names."""

import readchar

# Named keys. Checked before the ctrl+<letter> table since some overlap
# (\r is ctrl+m, \t is ctrl+i, \x08 is ctrl+h on some terminals).
NAMED_KEYS: dict[str, str] = {
    readchar.key.UP: "up",
    readchar.key.DOWN: "down",
    readchar.key.LEFT: "left",
    readchar.key.RIGHT: "right",
    readchar.key.HOME: "home",
    readchar.key.END: "end",
    readchar.key.BACKSPACE: "backspace",
    readchar.key.TAB: "tab",
    readchar.key.ESC: "esc",
    readchar.key.ENTER: "enter",
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x1b[3~": "delete",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x03": "ctrl+c",
}

CTRL_KEYS: dict[str, str] = {
    chr(code): f"ctrl+{chr(ord('a') + code - 1)}" for code in range(1, 27)
}


def take_sequences(data: str) -> tuple[list[str], str]:
    """Split off every complete key sequence in `data`.

    CSI ("\\x1b[") and SS3 ("\\x1bO") sequences run up to their final letter
    or "~". Returns (keys, tail) where tail is a trailing "\\x1b" or an
    unterminated sequence that may be completed by the next read.
    """
    keys: list[str] = []
    i = 0
    while i < len(data):
        ch = data[i]
        if ch == "\x1b":
            if i + 1 == len(data):
                return keys, data[i:]
            if data[i + 1] in "[O":
                j = i + 2
                while j < len(data) and not (data[j].isalpha() or data[j] == "~"):
                    j += 1
                if j == len(data):
                    return keys, data[i:]
                keys.append(data[i : j + 1])
                i = j + 1
                continue
        keys.append(ch)
        i += 1
    return keys, ""


def split_sequences(data: str) -> list[str]:
    """Split a complete chunk into key sequences.

    An incomplete tail is kept as one key, so a lone "\\x1b" is the Escape key.
    """
    keys, tail = take_sequences(data)
    if tail:
        keys.append(tail)
    return keys


def decode_key(raw: str) -> str:
    """Return the key name for a raw sequence read from the terminal.

    Printable characters (including space) are returned unchanged. Unknown
    escape sequences come back as their escaped repr so they never match a
    binding by accident.
    """
    if raw in NAMED_KEYS:
        return NAMED_KEYS[raw]
    if raw in CTRL_KEYS:
        return CTRL_KEYS[raw]
    if len(raw) == 1 and raw.isprintable():
        return raw
    return raw.encode("unicode_escape").decode("ascii")
