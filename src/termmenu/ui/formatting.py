"""Shared rendering helpers for prompt views."""

CURSOR_MARKER = ">"
CHECKED_MARKER = "x"

SINGLE_FOOTER = "Press q or Ctrl+C to quit, Enter to select"
MULTI_FOOTER = (
    "Press q or Ctrl+C to quit, Space to select, Esc to select all, "
    "Enter to finalize selection"
)
INPUT_FOOTER = "(esc to cancel, enter to accept)"

# ANSI reverse video for the text cursor cell
REVERSE_ON = "\x1b[7m"
REVERSE_OFF = "\x1b[27m"


def format_header(title: str, message: str) -> str:
    """Title line, message line and a blank separator."""
    return f"{title}\n{message}\n\n"


def cursor_prefix(active: bool) -> str:
    return CURSOR_MARKER if active else " "


def checkbox(checked: bool) -> str:
    return f"[{CHECKED_MARKER if checked else ' '}]"


def format_choice_lines(choices: list[str], cursor: int, checked: set[int] | None = None) -> str:
    """One line per choice with a cursor marker and, if given, a checkbox.

    Args:
        choices: Choice strings in display order
        cursor: Index of the highlighted choice
        checked: Selected indices, or None to omit checkboxes

    Returns:
        Newline-terminated block of choice lines
    """
    lines = []
    for i, choice in enumerate(choices):
        prefix = cursor_prefix(i == cursor)
        if checked is None:
            lines.append(f"{prefix} {choice}\n")
        else:
            lines.append(f"{prefix} {checkbox(i in checked)} {choice}\n")
    return "".join(lines)


def reverse(text: str) -> str:
    """Wrap text in ANSI reverse video."""
    return f"{REVERSE_ON}{text}{REVERSE_OFF}"


def calculate_visible_range(
    cursor: int,
    total_items: int,
    max_visible: int,
    scroll_offset: int,
) -> tuple[int, int, int]:
    """Calculate the visible window that keeps the cursor in view.

    Args:
        cursor: Current cursor position
        total_items: Total number of cells
        max_visible: Maximum cells that fit
        scroll_offset: Current scroll offset

    Returns:
        Tuple of (new_scroll_offset, visible_start, visible_end)
    """
    if total_items == 0:
        return 0, 0, 0

    cursor = max(0, min(cursor, total_items - 1))

    if cursor < scroll_offset:
        scroll_offset = cursor
    elif cursor >= scroll_offset + max_visible:
        scroll_offset = cursor - max_visible + 1

    scroll_offset = max(0, min(scroll_offset, total_items - 1))
    visible_end = min(scroll_offset + max_visible, total_items)

    return scroll_offset, scroll_offset, visible_end
