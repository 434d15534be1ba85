"""Per-run animation state shared between the sequencer and the UI layer."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import StrEnum


class Phase(StrEnum):
    """Lifecycle of one replay run."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


@dataclass(eq=False)
class AnimationState:
    """
    State of one replay run.

    Only the sequencer changes ``phase``; UI code reads ``running`` to decide
    whether to ignore manual input. A replay creates a new instance rather
    than resetting this one.
    """

    phase: Phase = Phase.IDLE
    task: asyncio.Task[None] | None = None
    ticks: int = 0
    skipped: int = 0

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    def error(self) -> BaseException | None:
        """The exception that ended this run's task, or None."""
        if self.task is None or not self.task.done() or self.task.cancelled():
            return None
        return self.task.exception()

    def cancel(self) -> bool:
        """Cancel the pending tick task. Returns True if one was still live."""
        if self.task is None or self.task.done():
            return False
        self.task.cancel()
        return True
