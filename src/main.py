#!/usr/bin/env python3
"""
Typing Intro GIF - command line entry point

Commands:
    export    render, encode and compress the intro GIF
    frame     render a single PNG snapshot at a timestamp
    preview   run the live preview loop for a while, saving the last frame
    steps     print the generated step script and its duration
"""

import sys

# Set UTF-8 encoding for output (the logger prints unicode tree/status symbols)
if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore

import argparse
import asyncio
from pathlib import Path
from typing import List, Optional
from animations.background import create_background_state, step_background
from engine.canvas import Canvas
from engine.compositor import RenderOptions, render_frame
from engine.export_driver import background_steps_at, format_file_size, generate_gif, output_filename
from engine.preview_loop import PreviewLoop
from engine.step_generator import generate_steps
from engine.timeline import interpolate_at_time, total_duration
from managers.config_manager import ConfigManager
from models.config import AnimationConfig
from models.enums import ExportPhase, LogLevel
from models.errors import ConfigError, IntroGifError
from models.frame import ExportProgress
from models.steps import describe_step
from utils.logger import get_logger, configure_logger, LogCategory

log = get_logger().for_category(LogCategory.SYSTEM)


def load_config(path: Optional[str]) -> AnimationConfig:
    manager = ConfigManager(Path(path).resolve()) if path else ConfigManager()
    manager.load()
    return manager.animation_config


# ---------------------------------------------------------------------------
# COMMANDS
# ---------------------------------------------------------------------------

async def cmd_export(args) -> int:
    config = load_config(args.config)
    last_phase = None

    def on_progress(progress: ExportProgress) -> None:
        nonlocal last_phase
        if progress.phase != last_phase:
            last_phase = progress.phase
            log.info(f"Export {progress.phase.value}", progress=f"{progress.progress}%")

    try:
        result = await generate_gif(config, on_progress=on_progress, seed=args.seed)
    except IntroGifError as e:
        log.error(f"Export failed: {e}", kind=type(e).__name__)
        return 1

    output = Path(args.output or output_filename(config))
    output.write_bytes(result.blob)

    saved = result.original_size - result.compressed_size
    log.info(
        f"Saved {output}",
        frames=result.total_frames,
        delay_ms=result.frame_delay_ms,
        size=format_file_size(result.compressed_size),
        saved=format_file_size(saved) if saved > 0 else "-",
    )
    return 0


def cmd_frame(args) -> int:
    config = load_config(args.config)
    bg = config.background

    steps = generate_steps(config)
    state = interpolate_at_time(steps, args.time_ms, config.speed)

    background = create_background_state(bg.type, bg.width, bg.height, args.seed)
    for _ in range(background_steps_at(args.time_ms, config.gif.fps)):
        background = step_background(background, bg.width, bg.height)

    image = render_frame(Canvas(bg.width, bg.height), state, background, RenderOptions.from_config(config))
    output = Path(args.output)
    image.save(output, format="PNG")
    log.info(f"Saved {output}", text=repr(state.text), cursor=state.cursor_visible)
    return 0


async def cmd_preview(args) -> int:
    config = load_config(args.config)
    latest = {}

    def on_frame(image, state, index) -> None:
        latest["image"] = image

    loop = PreviewLoop(config, on_frame, seed=args.seed)
    await loop.start()
    try:
        await asyncio.sleep(args.seconds)
    finally:
        await loop.stop()

    if "image" not in latest:
        log.warn("No preview frame rendered")
        return 1

    output = Path(args.output)
    latest["image"].save(output, format="PNG")
    log.info(f"Saved {output}", frames_rendered=loop.frames_rendered)
    return 0


def cmd_steps(args) -> int:
    config = load_config(args.config)
    steps = generate_steps(config)

    for index, step in enumerate(steps):
        print(f"{index:3d}  {describe_step(step)}")

    duration = total_duration(steps, config.speed)
    print(f"\n{len(steps)} steps, {duration / 1000:.2f}s")
    return 0


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="intro-gif", description="Typing intro GIF generator")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    sub = parser.add_subparsers(dest="command", required=True)

    export = sub.add_parser("export", help="Render and write the GIF")
    export.add_argument("--config", help="Path to config.yaml")
    export.add_argument("--output", help="Output file (default: <prefix><name>-intro.gif)")
    export.add_argument("--seed", type=int, help="Background random seed")

    frame = sub.add_parser("frame", help="Render a single PNG snapshot")
    frame.add_argument("--time-ms", type=float, required=True, help="Timestamp in milliseconds")
    frame.add_argument("--config", help="Path to config.yaml")
    frame.add_argument("--output", default="frame.png", help="Output PNG")
    frame.add_argument("--seed", type=int, help="Background random seed")

    preview = sub.add_parser("preview", help="Run the preview loop and save the last frame")
    preview.add_argument("--seconds", type=float, default=3.0, help="How long to run")
    preview.add_argument("--config", help="Path to config.yaml")
    preview.add_argument("--output", default="preview.png", help="Output PNG")
    preview.add_argument("--seed", type=int, help="Background random seed")

    steps = sub.add_parser("steps", help="Print the step script")
    steps.add_argument("--config", help="Path to config.yaml")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logger(LogLevel.DEBUG if args.debug else LogLevel.INFO, use_colors=not args.no_color)

    try:
        if args.command == "export":
            return asyncio.run(cmd_export(args))
        if args.command == "preview":
            return asyncio.run(cmd_preview(args))
        if args.command == "frame":
            return cmd_frame(args)
        return cmd_steps(args)
    except ConfigError as e:
        log.error(f"Invalid configuration: {e}")
        return 2
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
        return 130


if __name__ == "__main__":
    sys.exit(main())
