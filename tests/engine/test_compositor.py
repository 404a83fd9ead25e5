"""
Tests for Canvas and the frame compositor.
"""

import pytest

from animations.background import create_background_state
from engine.canvas import Canvas
from engine.compositor import RenderOptions, render_frame, resolve_font
from models.enums import BackgroundType, FontFamily
from models.errors import CanvasNotAttachedError
from models.frame import FrameState


@pytest.fixture
def options(small_config):
    return RenderOptions.from_config(small_config)


class TestCanvas:

    def test_attached_by_default(self):
        canvas = Canvas(10, 5)
        assert canvas.is_attached
        assert canvas.image.size == (10, 5)

    def test_detached_context_raises(self):
        canvas = Canvas(10, 5, attached=False)
        with pytest.raises(CanvasNotAttachedError):
            canvas.get_context()

        canvas.attach()
        canvas.get_context()

        canvas.detach()
        with pytest.raises(CanvasNotAttachedError):
            canvas.get_context()

    def test_context_clears_previous_frame(self):
        canvas = Canvas(4, 4)
        canvas.get_context().rectangle([0, 0, 3, 3], fill=(255, 0, 0))
        assert canvas.image.getpixel((1, 1)) == (255, 0, 0)

        canvas.get_context()
        assert canvas.image.getpixel((1, 1)) == (0, 0, 0)

    def test_rejects_empty_dimensions(self):
        with pytest.raises(ValueError):
            Canvas(0, 10)

    def test_snapshot_is_independent(self):
        canvas = Canvas(4, 4)
        snap = canvas.snapshot()
        canvas.get_context().rectangle([0, 0, 3, 3], fill=(255, 255, 255))
        assert snap.getpixel((0, 0)) == (0, 0, 0)


class TestRenderFrame:

    def test_returns_image_of_canvas_size(self, options):
        canvas = Canvas(options.width, options.height)
        bg = create_background_state(BackgroundType.PLAIN, options.width, options.height)

        image = render_frame(canvas, FrameState("Hi", True, 0), bg, options)

        assert image.size == (options.width, options.height)
        assert image.mode == "RGB"

    def test_fallback_background(self, options):
        canvas = Canvas(options.width, options.height)
        image = render_frame(canvas, FrameState("", False, 0), None, options)

        # #0a0a0a under a 30% black overlay
        r, g, b = image.getpixel((options.width - 1, 0))
        assert r == g == b
        assert r < 10

    def test_text_and_cursor_change_pixels(self, options):
        canvas = Canvas(options.width, options.height)
        empty = render_frame(canvas, FrameState("", False, 0), None, options)
        with_cursor = render_frame(canvas, FrameState("", True, 0), None, options)
        with_text = render_frame(canvas, FrameState("Hi", False, 0), None, options)

        assert empty.tobytes() != with_cursor.tobytes()
        assert empty.tobytes() != with_text.tobytes()

    def test_same_input_renders_same_pixels(self, options):
        """No drawing state leaks from one frame into the next"""
        canvas = Canvas(options.width, options.height)
        first = render_frame(canvas, FrameState("Hi", True, 0), None, options)
        render_frame(canvas, FrameState("Other text", False, 0), None, options)
        again = render_frame(canvas, FrameState("Hi", True, 0), None, options)

        assert first.tobytes() == again.tobytes()

    def test_detached_canvas_leaves_background_untouched(self, options):
        canvas = Canvas(options.width, options.height, attached=False)
        bg = create_background_state(BackgroundType.PARTICLE, options.width, options.height, seed=1)
        positions = [(p.x, p.y) for p in bg.effect.particles]

        with pytest.raises(CanvasNotAttachedError):
            render_frame(canvas, FrameState("Hi", True, 0), bg, options)

        assert bg.tick == 0
        assert [(p.x, p.y) for p in bg.effect.particles] == positions


class TestResolveFont:

    @pytest.mark.parametrize("family", list(FontFamily))
    def test_every_family_resolves(self, family):
        font = resolve_font(family, 20, bold=True, italic=True)
        assert font is not None

    def test_cached(self):
        assert resolve_font(FontFamily.MONO, 24) is resolve_font(FontFamily.MONO, 24)
