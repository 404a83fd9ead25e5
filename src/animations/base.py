"""
Base Background Effect

Every background effect is a triple of plain functions:

    init(width, height, rng)                    -> effect state
    step(state, width, height)                  -> effect state (mutated in place)
    render(image, state, width, height, color)  -> draws onto image

IMPORTANT:
- Effect state is owned by exactly one render session (preview loop or
  export driver). Nothing in animations/ keeps module-level mutable state.
- step() advances exactly one simulation tick. Callers choose the cadence;
  effects count their own ticks and never assume a frame rate.
"""

import random
from dataclasses import dataclass
from typing import Any, Callable, Optional
from PIL import Image

InitFn = Callable[[int, int, random.Random], Any]
StepFn = Callable[[Any, int, int], Any]
RenderFn = Callable[[Image.Image, Any, int, int, str], None]

BASE_FILL = (10, 10, 10)  # #0a0a0a


@dataclass(frozen=True)
class BackgroundEffect:
    """Uniform capability set shared by all background effects"""
    name: str
    init: InitFn
    step: StepFn
    render: RenderFn


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Private random source for one effect state"""
    return random.Random(seed)


def clear(image: Image.Image, fill=BASE_FILL) -> None:
    """Fill the whole image with an opaque color"""
    image.paste(fill, (0, 0, image.width, image.height))
