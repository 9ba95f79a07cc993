# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""View-local playback state for replaying animation steps."""

import logging
from typing import Literal

from codeviz.model import AnimationStep

logger = logging.getLogger(__name__)

ExecutionState = Literal["idle", "playing", "paused", "completed"]

DEFAULT_INTERVAL_SECONDS = 1.5


class Playback:
    """Step cursor over an immutable animation timeline.

    A playback instance belongs to one analysis result; analyzing changed
    input means creating a new instance rather than reusing this one.
    """

    def __init__(self, steps: list[AnimationStep]) -> None:
        self._steps = tuple(steps)
        self._index = 0
        self._state: ExecutionState = "idle"

    @property
    def steps(self) -> tuple[AnimationStep, ...]:
        return self._steps

    @property
    def state(self) -> ExecutionState:
        return self._state

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current(self) -> AnimationStep | None:
        """Return the step under the cursor, ``None`` for an empty timeline."""
        if not self._steps:
            return None
        return self._steps[self._index]

    @property
    def output(self) -> list[str]:
        """Return console output produced up to and including the current step."""
        if not self._steps:
            return []
        return [
            step.output
            for step in self._steps[: self._index + 1]
            if step.output is not None
        ]

    @property
    def progress(self) -> float:
        if not self._steps:
            return 0.0
        return (self._index + 1) / len(self._steps)

    @property
    def is_finished(self) -> bool:
        return self._state == "completed"

    def toggle(self) -> ExecutionState:
        """Switch between playing and paused; restart when completed.

        Returns:
            The resulting state.
        """
        if self._state == "completed":
            self.reset()
        elif self._state == "playing":
            self._state = "paused"
        elif self._steps:
            self._state = "playing"
        return self._state

    def tick(self) -> bool:
        """Advance one step on a timer beat.

        Ticking while already on the last step completes the playback.

        Returns:
            True when the cursor moved.
        """
        if self._state != "playing":
            return False
        if self._index + 1 >= len(self._steps):
            self._complete()
            return False
        self._index += 1
        return True

    def step(self) -> bool:
        """Advance one step manually, whatever the current state.

        Landing on the last step completes the playback.

        Returns:
            True when the cursor moved.
        """
        if self._state == "completed":
            return False
        if self._index + 1 >= len(self._steps):
            self._complete()
            return False
        self._index += 1
        if self._index + 1 == len(self._steps):
            self._complete()
        return True

    def reset(self) -> None:
        self._index = 0
        self._state = "idle"

    def _complete(self) -> None:
        self._state = "completed"
        logger.debug(f"Playback completed (steps={len(self._steps)})")
