"""Replay of the observation map over (year, month).

Public API:
  - state: Phase, AnimationState
  - frames: Frame, FrameLoader (joins the MX/UT/AZ partitions of one month)
  - sequencer: AnimationSequencer, Controls

Usage::

    frames = FrameLoader(monthly_partition_paths(PELICAN), store.read_json)
    sequencer = AnimationSequencer(frames, render_frame, controls)
    sequencer.replay()          # inside a running event loop
    await sequencer.wait()

Pass the sequencer instance to every chart or control that needs to jump the
map or check ``sequencer.running``.
"""

from gsl_migration.animation.frames import Frame, FrameLoader
from gsl_migration.animation.sequencer import AnimationSequencer, Controls
from gsl_migration.animation.state import AnimationState, Phase

__all__ = [
    "AnimationSequencer",
    "AnimationState",
    "Controls",
    "Frame",
    "FrameLoader",
    "Phase",
]
