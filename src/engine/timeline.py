"""
Timeline Interpolator

Maps a query position onto the step script and materializes the text,
cursor and background tick at that point.

All text materialization goes through one walker (_materialize_text) that
works in milliseconds. Two thin adapters sit on top of it:

    interpolate_at_time(steps, elapsed_ms, speed)      export / wall clock
    interpolate(steps, frame_index, speed, fps)        fixed-rate frames

Because both adapters share the walker, preview and export show identical
text at equal timestamps.

Units:
    speed   milliseconds per character
    Pause   duration in milliseconds
"""

import math
from typing import List
from models.frame import FrameState
from models.steps import (
    AnimationStep,
    AppendStep,
    DeleteStep,
    PauseStep,
    PrependStep,
    TypeStep,
)

DELETE_SPEED_FACTOR = 0.5      # deleting runs twice as fast as typing
CURSOR_BLINK_MS = 300          # cursor toggles every 300ms
BACKGROUND_MS_PER_TICK = 16    # ~60 background ticks per second
PREVIEW_FPS = 15


def step_duration(step: AnimationStep, speed: float) -> float:
    """Duration of a single step in milliseconds"""
    if isinstance(step, (TypeStep, AppendStep, PrependStep)):
        return len(step.text) * speed
    if isinstance(step, DeleteStep):
        return step.count * speed * DELETE_SPEED_FACTOR
    if isinstance(step, PauseStep):
        return step.duration
    raise TypeError(f"Unsupported step type: {type(step).__name__}")


def total_duration(steps: List[AnimationStep], speed: float) -> float:
    """Total length of the script in milliseconds"""
    return sum(step_duration(step, speed) for step in steps)


def frame_count(steps: List[AnimationStep], speed: float, fps: float) -> int:
    """Number of frames needed to cover the script at `fps`"""
    return math.ceil(total_duration(steps, speed) / 1000 * fps)


def _apply_full(step: AnimationStep, text: str) -> str:
    """Text after `step` has completely played out"""
    if isinstance(step, (TypeStep, AppendStep)):
        return text + step.text
    if isinstance(step, DeleteStep):
        return text[:max(0, len(text) - step.count)]
    if isinstance(step, PrependStep):
        return step.text + text
    return text


def _apply_partial(step: AnimationStep, text: str, progress: float, speed: float) -> str:
    """Text `progress` ms into `step`"""
    if isinstance(step, (TypeStep, AppendStep)):
        revealed = min(math.floor(progress / speed) + 1, len(step.text))
        return text + step.text[:revealed]

    if isinstance(step, DeleteStep):
        removed = min(math.floor(progress / (speed * DELETE_SPEED_FACTOR)) + 1, step.count)
        return text[:max(0, len(text) - removed)]

    if isinstance(step, PrependStep):
        revealed = min(math.floor(progress / speed) + 1, len(step.text))
        return step.text[len(step.text) - revealed:] + text

    return text


def _materialize_text(steps: List[AnimationStep], position_ms: float, speed: float) -> str:
    """
    Walk the script and return the text at `position_ms`.

    Positions before 0 clamp to 0; positions at or past the end return the
    fully settled text.
    """
    position = max(0.0, position_ms)
    elapsed = 0.0
    text = ""

    for step in steps:
        duration = step_duration(step, speed)
        if position < elapsed + duration:
            return _apply_partial(step, text, position - elapsed, speed)
        text = _apply_full(step, text)
        elapsed += duration

    return text


def _clamp_position(steps: List[AnimationStep], position_ms: float, speed: float) -> float:
    return min(max(0.0, position_ms), total_duration(steps, speed))


def _period_index(position: float, total: float, period: float) -> int:
    """
    Index of the `period`-long interval containing `position`.

    At or past the end the index stays on the last interval that starts
    before `total`, so the settled tail matches the instant just before it.
    """
    if total > 0 and position >= total:
        return max(0, math.ceil(total / period) - 1)
    return math.floor(position / period)


def interpolate_at_time(steps: List[AnimationStep], elapsed_ms: float, speed: float) -> FrameState:
    """
    Time-indexed query.

    Args:
        steps: Step script
        elapsed_ms: Wall-clock position in milliseconds (clamped to the script)
        speed: Milliseconds per character

    Returns:
        FrameState with cursor blinking every CURSOR_BLINK_MS and the
        background tick derived from BACKGROUND_MS_PER_TICK
    """
    total = total_duration(steps, speed)
    position = min(max(0.0, elapsed_ms), total)
    return FrameState(
        text=_materialize_text(steps, position, speed),
        cursor_visible=_period_index(position, total, CURSOR_BLINK_MS) % 2 == 0,
        background_tick=_period_index(position, total, BACKGROUND_MS_PER_TICK),
    )


def cursor_blink_frames(fps: float) -> int:
    """Cursor blink period expressed in frames at `fps`"""
    return max(1, round(CURSOR_BLINK_MS * fps / 1000))


def interpolate(steps: List[AnimationStep], frame_index: int, speed: float, fps: float = PREVIEW_FPS) -> FrameState:
    """
    Frame-indexed query.

    Converts the frame index to milliseconds for the text, keeps the cursor
    and background tick in frame units.
    """
    last_frame = max(0, frame_count(steps, speed, fps) - 1)
    frame = min(max(0, frame_index), last_frame)
    text = _materialize_text(steps, _clamp_position(steps, frame_index / fps * 1000, speed), speed)

    return FrameState(
        text=text,
        cursor_visible=(frame // cursor_blink_frames(fps)) % 2 == 0,
        background_tick=frame,
    )
