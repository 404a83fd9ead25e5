"""
Matrix Background

Falling "code rain" columns.

Each column falls at its own speed with its own trail length. Once the
whole trail has left the bottom edge the column is recycled above the top
with fresh speed, length and opacity. The head glyph is drawn white, the
next one in full color, and the rest of the trail fades out by position.
"""

import random
from dataclasses import dataclass
from functools import lru_cache
from typing import List
from PIL import Image, ImageDraw, ImageFont
from animations.base import BackgroundEffect, clear
from utils.colors import hex_to_rgb

CHAR_SIZE = 12
GLYPHS = "0123456789ABCDEFZ:=+*<>¦|"
SHIMMER_CHANCE = 0.05
MATRIX_FILL = (5, 5, 5)  # #050505


@dataclass
class MatrixColumn:
    x: float
    y: float
    speed: float
    chars: List[str]
    length: int
    opacity: float


@dataclass
class MatrixRain:
    columns: List[MatrixColumn]
    rng: random.Random
    tick: int = 0


@lru_cache(maxsize=4)
def _glyph_font(size: int) -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype("DejaVuSansMono-Bold.ttf", size)
    except OSError:
        return ImageFont.load_default(size=size)


def _random_speed(rng: random.Random) -> float:
    return rng.random() * 3 + 2


def _random_length(rng: random.Random) -> int:
    return rng.randint(8, 22)


def _random_opacity(rng: random.Random) -> float:
    return rng.random() * 0.5 + 0.5


def init_matrix(width: int, height: int, rng: random.Random) -> MatrixRain:
    column_count = max(1, width // CHAR_SIZE)
    glyph_count = height // CHAR_SIZE + 10

    columns = [
        MatrixColumn(
            x=i * CHAR_SIZE + CHAR_SIZE / 2,
            y=rng.random() * height * 2 - height,
            speed=_random_speed(rng),
            chars=[rng.choice(GLYPHS) for _ in range(glyph_count)],
            length=_random_length(rng),
            opacity=_random_opacity(rng),
        )
        for i in range(column_count)
    ]
    return MatrixRain(columns=columns, rng=rng)


def step_matrix(state: MatrixRain, width: int, height: int) -> MatrixRain:
    rng = state.rng
    for col in state.columns:
        col.y += col.speed

        # Recycle once the tail is below the bottom edge
        if col.y - col.length * CHAR_SIZE > height:
            col.speed = _random_speed(rng)
            col.length = _random_length(rng)
            col.opacity = _random_opacity(rng)
            col.y = -col.length * CHAR_SIZE

        if rng.random() < SHIMMER_CHANCE:
            col.chars[rng.randrange(len(col.chars))] = rng.choice(GLYPHS)

    state.tick += 1
    return state


def render_matrix(image: Image.Image, state: MatrixRain, width: int, height: int, color: str) -> None:
    clear(image, MATRIX_FILL)
    draw = ImageDraw.Draw(image, "RGBA")
    font = _glyph_font(CHAR_SIZE)
    r, g, b = hex_to_rgb(color)

    for col in state.columns:
        for i in range(col.length):
            char_y = col.y - i * CHAR_SIZE
            if char_y < -CHAR_SIZE or char_y > height + CHAR_SIZE:
                continue

            char = col.chars[i % len(col.chars)]

            if i == 0:
                fill = (255, 255, 255, 255)
            elif i == 1:
                fill = (r, g, b, 255)
            else:
                fade = 1 - i / col.length
                fill = (r, g, b, int(fade * col.opacity * 255))

            draw.text((col.x, char_y), char, font=font, fill=fill, anchor="mm")


MATRIX_EFFECT = BackgroundEffect(
    name="matrix",
    init=init_matrix,
    step=step_matrix,
    render=render_matrix,
)
