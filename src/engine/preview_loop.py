"""
Preview Loop

Live, looping preview of the intro animation. Runs as an asyncio task timed
against time.perf_counter(); a frame is produced only once at least 1/fps
seconds of wall time have accumulated, and the frame index wraps back to 0
at the end of the script.

Each session owns its own canvas and background state.
"""

import asyncio
import math
import time
from typing import Callable, List, Optional
from PIL import Image
from animations.background import BackgroundState, create_background_state, step_background
from engine.canvas import Canvas
from engine.compositor import RenderOptions, render_frame
from engine.step_generator import generate_steps
from engine.timeline import PREVIEW_FPS, interpolate_at_time, total_duration
from models.config import AnimationConfig
from models.errors import CanvasNotAttachedError
from models.frame import FrameState
from models.steps import AnimationStep
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.PREVIEW)

FrameCallback = Callable[[Image.Image, FrameState, int], None]

PAUSED_POLL_S = 0.01


class PreviewLoop:
    """
    Looping preview renderer.

    Example:
        loop = PreviewLoop(config, on_frame=show)
        await loop.start()
        ...
        loop.reconfigure(new_config)
        ...
        await loop.stop()
    """

    def __init__(
        self,
        config: AnimationConfig,
        on_frame: FrameCallback,
        fps: int = PREVIEW_FPS,
        seed: Optional[int] = None,
    ):
        self.fps = max(1, fps)
        self.on_frame = on_frame
        self.seed = seed

        self.config = config
        self.steps: List[AnimationStep] = generate_steps(config)
        self.total_frames = self._count_frames()
        self.frame_index = 0

        bg = config.background
        self.canvas = Canvas(bg.width, bg.height)
        self.background: BackgroundState = create_background_state(bg.type, bg.width, bg.height, seed)
        self.options = RenderOptions.from_config(config)

        # Runtime state
        self.running = False
        self.paused = False
        self.render_task: Optional[asyncio.Task] = None
        self.frames_rendered = 0
        self._accumulated = 0.0

    def _count_frames(self) -> int:
        return max(1, math.ceil(total_duration(self.steps, self.config.speed) / 1000 * self.fps))

    # === Control API ===

    def pause(self) -> None: self.paused = True

    def resume(self) -> None: self.paused = False

    def seek(self, frame: int) -> None:
        self.frame_index = min(max(0, frame), self.total_frames - 1)

    def restart(self) -> None:
        """Back to frame 0 with a fresh background"""
        bg = self.config.background
        self.frame_index = 0
        self._accumulated = 0.0
        self.background = create_background_state(bg.type, bg.width, bg.height, self.seed)

    def reconfigure(self, config: AnimationConfig) -> None:
        """
        Swap in a new configuration.

        The stale loop is cancelled before anything is rebuilt so it can never
        render a frame of the old script. Background state survives unless
        the effect type or canvas dimensions change.
        """
        was_running = self.running
        self.cancel()

        bg = config.background
        if (bg.width, bg.height) != (self.canvas.width, self.canvas.height):
            self.canvas.detach()
            self.canvas = Canvas(bg.width, bg.height)
        if not self.background.matches(bg.type, bg.width, bg.height):
            self.background = create_background_state(bg.type, bg.width, bg.height, self.seed)

        self.config = config
        self.steps = generate_steps(config)
        self.total_frames = self._count_frames()
        self.options = RenderOptions.from_config(config)
        self.frame_index = 0
        self._accumulated = 0.0

        log.debug("Preview reconfigured", total_frames=self.total_frames, background=bg.type.value)

        if was_running:
            self._spawn()

    # === Lifecycle ===

    def _spawn(self) -> None:
        self.running = True
        self.render_task = asyncio.create_task(self._render_loop())

    async def start(self) -> None:
        """Start the preview loop."""
        if self.running:
            log.warn("Preview already running")
            return
        self._spawn()
        log.info(f"Preview loop started @ {self.fps} FPS", total_frames=self.total_frames)

    def cancel(self) -> None:
        """Cancel the loop task and release the handle without waiting."""
        self.running = False
        if self.render_task:
            self.render_task.cancel()
            self.render_task = None

    async def stop(self) -> None:
        """Stop the preview loop and wait for the task to finish."""
        if not self.running and self.render_task is None:
            return
        self.running = False
        task, self.render_task = self.render_task, None
        if task:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

        log.info("Preview stopped", frames_rendered=self.frames_rendered)

    # === Rendering ===

    def tick(self) -> bool:
        """
        Render the current frame and advance.

        Returns:
            False if the canvas is detached; nothing is advanced in that case
        """
        if not self.canvas.is_attached:
            log.warn("Canvas detached, frame skipped", frame=self.frame_index)
            return False

        self.background = step_background(self.background, self.config.background.width, self.config.background.height)
        state = interpolate_at_time(self.steps, self.frame_index / self.fps * 1000, self.config.speed)
        try:
            image = render_frame(self.canvas, state, self.background, self.options)
        except CanvasNotAttachedError as e:
            log.warn(f"Render skipped: {e}", frame=self.frame_index)
            return False

        self.on_frame(image, state, self.frame_index)
        self.frames_rendered += 1
        self.frame_index = (self.frame_index + 1) % self.total_frames
        return True

    async def _render_loop(self) -> None:
        """Elapsed-time gated render loop."""
        interval = 1.0 / self.fps
        last = time.perf_counter()

        while self.running:
            now = time.perf_counter()
            delta, last = now - last, now

            if self.paused:
                await asyncio.sleep(PAUSED_POLL_S)
                continue

            self._accumulated += delta
            if self._accumulated >= interval:
                # Drop whole missed intervals instead of bursting to catch up
                self._accumulated %= interval
                try:
                    self.tick()
                except Exception as e:
                    log.error(f"Preview render error: {e}", frame=self.frame_index)

            await asyncio.sleep(max(0.0, interval - self._accumulated))
