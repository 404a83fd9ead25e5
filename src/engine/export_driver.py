"""
Export Driver

Deterministic GIF export: renders every frame of the script sequentially on
one canvas, feeds the encoder, then optionally runs the compressor.

Progress (0-100, monotonic):
    rendering    0-35   one report per frame
    encoding     35-60  encoder quantize progress
    compressing  60-95  before and after gifsicle runs
    complete     100    with original/compressed sizes
"""

import asyncio
import math
from typing import Awaitable, Callable, Optional
from animations.background import create_background_state, step_background
from engine.canvas import Canvas
from engine.compositor import RenderOptions, render_frame
from engine.compressor import compress_gif
from engine.encoder import GifEncoder
from engine.step_generator import generate_steps
from engine.timeline import interpolate_at_time, total_duration
from models.config import AnimationConfig, CompressionSettings
from models.enums import ExportPhase
from models.frame import CompressionResult, ExportProgress, GifResult
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.EXPORT)

ProgressCallback = Callable[[ExportProgress], None]
Compressor = Callable[[bytes, CompressionSettings], Awaitable[CompressionResult]]

RENDER_SHARE = 35
ENCODE_SHARE = 25
COMPRESS_START = RENDER_SHARE + ENCODE_SHARE
COMPRESS_END = 95


def export_frame_count(duration_ms: float, fps: int) -> int:
    """Frames needed to cover `duration_ms`; never fewer than one"""
    return max(1, math.ceil(duration_ms / 1000 * fps))


def background_steps_at(time_ms: float, fps: int) -> int:
    """Background steps applied by the time the export frame covering `time_ms` is drawn"""
    return math.floor(max(0.0, time_ms) / 1000 * fps) + 1


def frame_delay_ms(fps: int, playback_speed: float) -> int:
    """Per-frame GIF delay; playback speed scales the delay, not the frame count"""
    return round(1000 / fps / playback_speed)


def output_filename(config: AnimationConfig) -> str:
    return f"{config.prefix}{config.name.lower()}-intro.gif"


def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.2f} MB"


async def generate_gif(
    config: AnimationConfig,
    on_progress: Optional[ProgressCallback] = None,
    encoder: Optional[GifEncoder] = None,
    compressor: Optional[Compressor] = None,
    seed: Optional[int] = None,
) -> GifResult:
    """
    Render, encode and compress the intro animation.

    Args:
        config: Render configuration (fps, playback speed and compression
            settings come from config.gif)
        on_progress: Receives ExportProgress updates
        encoder: Encoder to feed (defaults to a fresh GifEncoder)
        compressor: Async compressor (defaults to gifsicle)
        seed: Seed for the background effect

    Raises:
        EncoderError: encoding failed; collected frames are discarded
    """
    def report(phase: ExportPhase, progress: int, **kw) -> None:
        if on_progress:
            on_progress(ExportProgress(phase=phase, progress=progress, **kw))

    bg_cfg = config.background
    gif = config.gif
    width, height = bg_cfg.width, bg_cfg.height

    steps = generate_steps(config)
    duration = total_duration(steps, config.speed)
    total_frames = export_frame_count(duration, gif.fps)
    delay = frame_delay_ms(gif.fps, gif.playback_speed)

    encoder = encoder or GifEncoder(width, height)
    compressor = compressor or compress_gif

    log.info(
        "Rendering frames",
        total_frames=total_frames,
        duration_ms=round(duration),
        delay_ms=delay,
        background=bg_cfg.type.value,
    )

    canvas = Canvas(width, height)
    background = create_background_state(bg_cfg.type, width, height, seed)
    options = RenderOptions.from_config(config)

    try:
        for frame in range(total_frames):
            background = step_background(background, width, height)
            state = interpolate_at_time(steps, frame / gif.fps * 1000, config.speed)
            encoder.add_frame(render_frame(canvas, state, background, options), delay)

            report(
                ExportPhase.RENDERING,
                round(frame / total_frames * RENDER_SHARE),
                current_frame=frame + 1,
                total_frames=total_frames,
            )
            await asyncio.sleep(0)

        blob = await encoder.render(
            lambda p: report(ExportPhase.ENCODING, RENDER_SHARE + round(p * ENCODE_SHARE))
        )
    except Exception:
        encoder.discard()
        raise
    finally:
        canvas.detach()

    original_size = len(blob)

    if gif.compression.enabled:
        report(ExportPhase.COMPRESSING, COMPRESS_START, original_size=original_size)
        try:
            result = await compressor(blob, gif.compression)
        except Exception as e:
            log.warn("Compression failed, using uncompressed GIF", error=str(e), kind=type(e).__name__)
            result = CompressionResult(blob=blob, original_size=original_size, compressed_size=original_size)
        report(
            ExportPhase.COMPRESSING,
            COMPRESS_END,
            original_size=result.original_size,
            compressed_size=result.compressed_size,
        )
    else:
        result = CompressionResult(blob=blob, original_size=original_size, compressed_size=original_size)

    report(
        ExportPhase.COMPLETE,
        100,
        original_size=result.original_size,
        compressed_size=result.compressed_size,
    )
    log.info(
        "GIF export complete",
        frames=total_frames,
        original=format_file_size(result.original_size),
        compressed=format_file_size(result.compressed_size),
    )

    return GifResult(
        blob=result.blob,
        original_size=result.original_size,
        compressed_size=result.compressed_size,
        total_frames=total_frames,
        frame_delay_ms=delay,
    )
