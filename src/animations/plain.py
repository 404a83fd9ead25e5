"""
Plain Background

Static diagonal gradient with a soft radial glow in the top-right corner.
No per-tick state.
"""

import random
import numpy as np
from PIL import Image
from animations.base import BackgroundEffect
from utils.colors import hex_to_rgb

EDGE_SHADE = 10     # #0a0a0a
CENTER_SHADE = 17   # #111111
GLOW_ALPHA = 0.3


def init_plain(width: int, height: int, rng: random.Random) -> None:
    return None


def step_plain(state: None, width: int, height: int) -> None:
    return state


def render_plain(image: Image.Image, state: None, width: int, height: int, color: str) -> None:
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float32)

    # Diagonal position 0..1 along the top-left → bottom-right axis
    t = (xs * width + ys * height) / float(width * width + height * height)
    shade = EDGE_SHADE + (CENTER_SHADE - EDGE_SHADE) * (1 - np.abs(2 * t - 1))
    pixels = np.repeat(shade[..., None], 3, axis=2)

    cx, cy, radius = width * 0.8, height * 0.2, width * 0.5
    distance = np.hypot(xs - cx, ys - cy) / radius
    glow = (np.clip(1 - distance, 0, 1) * GLOW_ALPHA)[..., None]
    pixels = pixels * (1 - glow) + np.array(hex_to_rgb(color), dtype=np.float32) * glow

    image.paste(Image.fromarray(pixels.clip(0, 255).astype(np.uint8)), (0, 0))


PLAIN_EFFECT = BackgroundEffect(
    name="plain",
    init=init_plain,
    step=step_plain,
    render=render_plain,
)
