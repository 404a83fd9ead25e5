"""
Tests for the timeline interpolator (time- and frame-indexed queries).
"""

import pytest

from engine.timeline import (
    BACKGROUND_MS_PER_TICK,
    CURSOR_BLINK_MS,
    cursor_blink_frames,
    frame_count,
    interpolate,
    interpolate_at_time,
    step_duration,
    total_duration,
)
from models.steps import AppendStep, DeleteStep, PauseStep, PrependStep, TypeStep

SPEED = 10.0


class TestDurations:

    def test_step_durations(self):
        assert step_duration(TypeStep("abc"), SPEED) == 30
        assert step_duration(AppendStep("ab"), SPEED) == 20
        assert step_duration(PrependStep("ab"), SPEED) == 20
        assert step_duration(DeleteStep(4), SPEED) == 20  # half speed
        assert step_duration(PauseStep(250), SPEED) == 250

    def test_total_duration_increases_with_speed(self):
        steps = [TypeStep("hello"), DeleteStep(2), PauseStep(100)]
        assert total_duration(steps, 20) > total_duration(steps, 10)

    def test_total_duration_increases_with_text_length(self):
        short = [TypeStep("hi"), PauseStep(100)]
        longer = [TypeStep("hi!"), PauseStep(100)]
        assert total_duration(longer, SPEED) > total_duration(short, SPEED)

    def test_frame_count(self):
        steps = [TypeStep("Hi"), PauseStep(200)]   # 220ms
        assert frame_count(steps, SPEED, 10) == 3


class TestInterpolateAtTime:

    def test_first_character_at_zero(self):
        state = interpolate_at_time([TypeStep("Hello"), PauseStep(100)], 0, SPEED)
        assert state.text == "H"

    def test_type_reveal(self):
        steps = [TypeStep("Hello"), PauseStep(100)]
        assert interpolate_at_time(steps, 9, SPEED).text == "H"
        assert interpolate_at_time(steps, 10, SPEED).text == "He"
        assert interpolate_at_time(steps, 45, SPEED).text == "Hello"
        assert interpolate_at_time(steps, 60, SPEED).text == "Hello"

    def test_delete_runs_at_half_speed(self):
        steps = [TypeStep("Hello"), DeleteStep(3), PauseStep(100)]
        # delete starts at 50ms, one char per 5ms
        assert interpolate_at_time(steps, 50, SPEED).text == "Hell"
        assert interpolate_at_time(steps, 55, SPEED).text == "Hel"
        assert interpolate_at_time(steps, 64, SPEED).text == "He"
        assert interpolate_at_time(steps, 65, SPEED).text == "He"

    def test_prepend_reveals_suffix_leftward(self):
        steps = [TypeStep("world"), PrependStep("hi "), PauseStep(100)]
        # prepend starts at 50ms
        assert interpolate_at_time(steps, 50, SPEED).text == " world"
        assert interpolate_at_time(steps, 60, SPEED).text == "i world"
        assert interpolate_at_time(steps, 80, SPEED).text == "hi world"

    def test_append(self):
        steps = [TypeStep("a"), AppendStep("bc"), PauseStep(10)]
        assert interpolate_at_time(steps, 10, SPEED).text == "ab"

    def test_text_grows_during_type_and_shrinks_during_delete(self):
        steps = [TypeStep("abcdef"), DeleteStep(6), PauseStep(10)]
        typing = [len(interpolate_at_time(steps, t, SPEED).text) for t in range(0, 60)]
        deleting = [len(interpolate_at_time(steps, t, SPEED).text) for t in range(60, 90)]

        assert typing == sorted(typing)
        assert deleting == sorted(deleting, reverse=True)

    def test_negative_time_clamps_to_start(self):
        steps = [TypeStep("Hi"), PauseStep(100)]
        assert interpolate_at_time(steps, -500, SPEED) == interpolate_at_time(steps, 0, SPEED)

    def test_tail_is_idempotent(self):
        steps = [TypeStep("Hi"), DeleteStep(1), PauseStep(205)]   # total 230ms
        total = total_duration(steps, SPEED)

        before = interpolate_at_time(steps, total - 0.001, SPEED)
        after = interpolate_at_time(steps, total + 0.001, SPEED)
        far = interpolate_at_time(steps, total * 10, SPEED)

        assert before == after == far
        assert after.text == "H"

    @pytest.mark.parametrize("pause", [280, 300])
    def test_tail_is_idempotent_on_interval_boundaries(self, pause):
        # 300ms lands on a cursor blink boundary, 320ms on a background tick boundary
        steps = [TypeStep("Hi"), PauseStep(pause)]
        total = total_duration(steps, SPEED)
        assert total % CURSOR_BLINK_MS == 0 or total % BACKGROUND_MS_PER_TICK == 0

        before = interpolate_at_time(steps, total - 0.001, SPEED)
        at_end = interpolate_at_time(steps, total, SPEED)
        after = interpolate_at_time(steps, total + 0.001, SPEED)

        assert before == at_end == after

    def test_tail_cursor_and_tick_on_blink_boundary(self):
        steps = [TypeStep("Hi"), PauseStep(280)]   # total 300ms
        state = interpolate_at_time(steps, 1000, SPEED)
        assert state.cursor_visible is True
        assert state.background_tick == 300 // BACKGROUND_MS_PER_TICK

    def test_cursor_toggles_every_period(self):
        steps = [TypeStep("Hi"), PauseStep(5000)]
        for t in (0, 150, 299, 301, 1234):
            visible = interpolate_at_time(steps, t, SPEED).cursor_visible
            assert visible != interpolate_at_time(steps, t + CURSOR_BLINK_MS, SPEED).cursor_visible

    def test_background_tick(self):
        steps = [PauseStep(1000)]
        assert interpolate_at_time(steps, 0, SPEED).background_tick == 0
        assert interpolate_at_time(steps, 100, SPEED).background_tick == 100 // BACKGROUND_MS_PER_TICK


class TestInterpolateFrames:

    def test_frame_zero_has_at_most_one_char(self):
        assert len(interpolate([TypeStep("Hello"), PauseStep(10)], 0, SPEED).text) <= 1
        assert interpolate([TypeStep(""), PauseStep(10)], 0, SPEED).text == ""

    def test_agrees_with_time_query(self):
        steps = [TypeStep("Hello world"), DeleteStep(5), TypeStep("there"), PauseStep(300)]
        fps = 15
        for frame in range(frame_count(steps, SPEED, fps)):
            assert interpolate(steps, frame, SPEED, fps).text == interpolate_at_time(steps, frame / fps * 1000, SPEED).text

    def test_background_tick_is_frame_index(self):
        steps = [PauseStep(1000)]
        assert interpolate(steps, 7, SPEED, 15).background_tick == 7

    def test_out_of_range_frames_clamp(self):
        steps = [TypeStep("Hi"), PauseStep(1000)]
        last = frame_count(steps, SPEED, 15) - 1

        assert interpolate(steps, -3, SPEED, 15) == interpolate(steps, 0, SPEED, 15)
        assert interpolate(steps, last + 50, SPEED, 15).background_tick == last
        assert interpolate(steps, last + 50, SPEED, 15).text == "Hi"

    def test_cursor_toggles_every_blink_period(self):
        steps = [PauseStep(10000)]
        fps = 15
        period = cursor_blink_frames(fps)
        for frame in range(0, 40):
            assert interpolate(steps, frame, SPEED, fps).cursor_visible != \
                interpolate(steps, frame + period, SPEED, fps).cursor_visible

    @pytest.mark.parametrize("fps,expected", [(15, 4), (10, 3), (4, 1), (1, 1)])
    def test_blink_frames(self, fps, expected):
        assert cursor_blink_frames(fps) == expected
