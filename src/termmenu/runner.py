"""Drive a prompt model through a terminal until it asks to quit."""

import heapq
import itertools
import logging
import time
from typing import Any, TypeVar

from termmenu.events import QUIT, KeyEvent, Schedule
from termmenu.terminal import PromptLoopError, RichTerminal, Terminal
from termmenu.ui.base import PromptModel

logger = logging.getLogger("termmenu.runner")

M = TypeVar("M", bound=PromptModel)


class TimerQueue:
    """Scheduled events ordered by deadline."""

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Any]] = []
        self._seq = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, schedule: Schedule) -> None:
        deadline = time.monotonic() + schedule.delay
        heapq.heappush(self._heap, (deadline, next(self._seq), schedule.event))

    def timeout(self) -> float | None:
        """Seconds until the earliest deadline, None when nothing is queued."""
        if not self._heap:
            return None
        return max(0.0, self._heap[0][0] - time.monotonic())

    def pop(self) -> Any:
        """Remove and return the earliest event, None when empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]


def run(
    model: M,
    full_screen: bool = False,
    terminal: Terminal | None = None,
) -> tuple[M, PromptLoopError | None]:
    """Run `model` until it returns QUIT.

    Blocks the calling thread. Renders once after init and once after each
    event. Any terminal failure ends the run and is returned with the model
    as it was at that point; the terminal is always detached.

    Args:
        model: Prompt model to drive (mutated in place)
        full_screen: Use the alternate screen buffer
        terminal: Terminal backend, defaults to RichTerminal on stderr

    Returns:
        Tuple of (model, error) - error is None on a normal finish
    """
    if terminal is None:
        terminal = RichTerminal()

    try:
        terminal.attach(full_screen)
    except (PromptLoopError, OSError) as e:
        error = _loop_error(e)
        logger.warning("Could not attach terminal: %s", error)
        return model, error

    error = None
    timers = TimerQueue()
    try:
        command = model.init()
        terminal.draw(model.render())
        while command is not QUIT:
            if isinstance(command, Schedule):
                timers.push(command)

            key = terminal.read_key(timers.timeout())
            event = KeyEvent(key) if key is not None else timers.pop()
            if event is None:
                command = None
                continue

            logger.debug("Dispatching %r to %s", event, type(model).__name__)
            command = model.update(event)
            terminal.draw(model.render())
    except (PromptLoopError, OSError) as e:
        error = _loop_error(e)
        logger.warning("Prompt loop failed: %s", error)
    finally:
        terminal.detach()

    return model, error


def _loop_error(exc: Exception) -> PromptLoopError:
    if isinstance(exc, PromptLoopError):
        return exc
    error = PromptLoopError(f"terminal I/O failed: {exc}")
    error.__cause__ = exc
    return error
