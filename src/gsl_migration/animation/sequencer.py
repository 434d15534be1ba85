"""Timed replay of the observation map over the (year, month) domain.

State machine::

    IDLE --replay()--> RUNNING --year > end_year--> COMPLETED
                          |
                          +--interrupt()--> PAUSED

    COMPLETED / PAUSED --replay()--> RUNNING (fresh state, cursor reset)

Each run is one asyncio task. Starting a new run cancels the previous task
before scheduling the next one, so two tick chains never render at once.
Manual jumps go through ``on_manual_input``, which refuses to act while a
run is in progress.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Protocol

from gsl_migration.animation.state import AnimationState, Phase
from gsl_migration.timekeys import TimeKey, advance

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from gsl_migration.animation.frames import Frame

logger = logging.getLogger(__name__)

# Replay defaults: every other month, 2004 through 2023, 50 ms per tick.
DEFAULT_START = TimeKey(2004, 0)
DEFAULT_END_YEAR = 2023
DEFAULT_STEP_MONTHS = 2
DEFAULT_INTERVAL = 0.05


class Controls(Protocol):
    """The year/month inputs bound to a map view."""

    def disable(self) -> None: ...

    def enable(self) -> None: ...

    def show(self, key: TimeKey) -> None: ...


class FrameSource(Protocol):
    async def load(self, key: TimeKey) -> Frame | None: ...


class AnimationSequencer:
    """
    Drives the observation map through time.

    Args:
        frames: Resolves a time key to a frame (see ``FrameLoader``).
        render: Draw call for one frame, supplied by the rendering layer.
        controls: Optional inputs to disable during a run and keep in sync.
        start: First key of every run.
        end_year: A run completes once the cursor passes this year.
        step_months: Months advanced per tick.
        interval: Seconds between ticks.
    """

    def __init__(
        self,
        frames: FrameSource,
        render: Callable[[Frame], Awaitable[None]],
        controls: Controls | None = None,
        *,
        start: TimeKey = DEFAULT_START,
        end_year: int = DEFAULT_END_YEAR,
        step_months: int = DEFAULT_STEP_MONTHS,
        interval: float = DEFAULT_INTERVAL,
    ) -> None:
        if step_months < 1:
            msg = f"step_months must be >= 1, got {step_months}"
            raise ValueError(msg)
        if interval < 0:
            msg = f"interval must be >= 0, got {interval}"
            raise ValueError(msg)

        self.frames = frames
        self.render = render
        self.controls = controls
        self.start = start
        self.end_year = end_year
        self.step_months = step_months
        self.interval = interval
        self.state = AnimationState()
        self.cursor = start

    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def total_ticks(self) -> int:
        """Number of ticks in a full run with the current configuration."""
        count, key = 0, self.start
        while key.year <= self.end_year:
            count += 1
            key = advance(key, self.step_months)
        return count

    # ------------------------------------------------------------------
    # Run control
    # ------------------------------------------------------------------

    def replay(self) -> AnimationState:
        """
        Start a run from ``start``, cancelling any run still in flight.

        Must be called from inside a running event loop.

        Returns:
            The new run's state (the previous state object is left as-is).
        """
        loop = asyncio.get_running_loop()
        previous = self.state
        if previous.cancel() and previous.running:
            previous.phase = Phase.PAUSED

        state = AnimationState(phase=Phase.RUNNING)
        self.state = state
        self.cursor = self.start
        if self.controls is not None:
            self.controls.disable()

        state.task = loop.create_task(self._run(state))
        logger.info(
            "Replay started at %s (end %d, step %d, interval %.3fs)",
            self.start,
            self.end_year,
            self.step_months,
            self.interval,
        )
        return state

    def interrupt(self) -> bool:
        """
        Stop the current run because the controls received direct input.

        The pending tick is cancelled immediately and controls are re-enabled.
        The cursor is left where the run stopped.

        Returns:
            True if a run was stopped.
        """
        state = self.state
        if not state.running:
            return False
        state.phase = Phase.PAUSED
        state.cancel()
        if self.controls is not None:
            self.controls.enable()
        logger.info("Replay paused by user input at %s after %d ticks", self.cursor, state.ticks)
        return True

    async def wait(self) -> None:
        """Wait for the current run to finish or be cancelled."""
        task = self.state.task
        if task is not None:
            await asyncio.wait({task})

    # ------------------------------------------------------------------
    # Frames
    # ------------------------------------------------------------------

    async def show(self, key: TimeKey) -> bool:
        """
        Load and render the frame for ``key`` regardless of run state.

        Returns:
            False if the frame could not be loaded and was skipped.
        """
        self.cursor = key
        frame = await self.frames.load(key)
        if frame is None:
            return False
        await self.render(frame)
        return True

    async def on_manual_input(self, year: int, month: int) -> bool:
        """
        Jump to ``(year, month)`` from a slider or chart click.

        Ignored while a run is in progress so manual renders never race the
        animation's own.

        Returns:
            True if the jump was applied.
        """
        if self.running:
            logger.debug("Ignoring manual input %d-%02d during replay", year, month + 1)
            return False

        key = TimeKey(year, month)
        if self.controls is not None:
            self.controls.show(key)
        await self.show(key)
        return True

    async def _run(self, state: AnimationState) -> None:
        key = self.start
        try:
            while True:
                await asyncio.sleep(self.interval)
                if not await self.show(key):
                    state.skipped += 1
                if self.controls is not None:
                    self.controls.show(key)
                state.ticks += 1

                key = advance(key, self.step_months)
                if key.year > self.end_year:
                    break
        except Exception:
            logger.exception("Replay aborted at %s", key)
            state.phase = Phase.PAUSED
            if self.controls is not None:
                self.controls.enable()
            raise

        state.phase = Phase.COMPLETED
        if self.controls is not None:
            self.controls.enable()
        logger.info("Replay complete: %d ticks, %d skipped", state.ticks, state.skipped)
