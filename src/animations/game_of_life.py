"""
Game of Life Background

Toroidal Conway automaton (B3/S23) drawn as glowing cells.

The grid only advances every GENERATION_TICKS ticks so the pattern evolves
slower than the frame rate. Each generation has a small chance of seeding a
glider so the board never dies out completely.
"""

import math
import random
from dataclasses import dataclass
import numpy as np
from PIL import Image, ImageDraw, ImageFilter
from animations.base import BackgroundEffect, clear
from utils.colors import hex_to_rgb

CELL_SIZE = 8
INITIAL_DENSITY = 0.15
GENERATION_TICKS = 5
GLIDER_CHANCE = 0.05

# (row, col) offsets of a glider heading down-right
GLIDER = ((0, 0), (1, 1), (2, -1), (2, 0), (2, 1))


@dataclass
class LifeGrid:
    cells: np.ndarray  # bool, shape (rows, cols)
    rng: np.random.Generator
    tick: int = 0
    generation: int = 0

    @property
    def shape(self):
        return self.cells.shape


def grid_size(width: int, height: int):
    """(rows, cols) for a canvas"""
    return math.ceil(height / CELL_SIZE), math.ceil(width / CELL_SIZE)


def init_life(width: int, height: int, rng: random.Random) -> LifeGrid:
    np_rng = np.random.default_rng(rng.getrandbits(63))
    rows, cols = grid_size(width, height)
    cells = np_rng.random((rows, cols)) < INITIAL_DENSITY
    return LifeGrid(cells=cells, rng=np_rng)


def count_neighbors(cells: np.ndarray) -> np.ndarray:
    """Live neighbor count per cell, wrapping at the edges"""
    grid = cells.astype(np.uint8)
    total = np.zeros_like(grid)
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dy == 0 and dx == 0:
                continue
            total += np.roll(np.roll(grid, dy, axis=0), dx, axis=1)
    return total


def next_generation(cells: np.ndarray) -> np.ndarray:
    neighbors = count_neighbors(cells)
    survive = cells & ((neighbors == 2) | (neighbors == 3))
    born = ~cells & (neighbors == 3)
    return survive | born


def seed_glider(cells: np.ndarray, row: int, col: int) -> None:
    rows, cols = cells.shape
    for dy, dx in GLIDER:
        cells[(row + dy) % rows, (col + dx) % cols] = True


def step_life(state: LifeGrid, width: int, height: int) -> LifeGrid:
    state.tick += 1
    if state.tick % GENERATION_TICKS != 0:
        return state

    cells = next_generation(state.cells)
    if state.rng.random() < GLIDER_CHANCE:
        rows, cols = cells.shape
        seed_glider(cells, int(state.rng.integers(rows)), int(state.rng.integers(cols)))

    state.cells = cells
    state.generation += 1
    return state


def render_life(image: Image.Image, state: LifeGrid, width: int, height: int, color: str) -> None:
    clear(image)
    rgb = hex_to_rgb(color)

    # Cells on their own layer so the glow can be blurred underneath
    layer = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    cell_draw = ImageDraw.Draw(layer)
    for row, col in zip(*np.nonzero(state.cells)):
        px, py = int(col) * CELL_SIZE, int(row) * CELL_SIZE
        cell_draw.rectangle([px + 1, py + 1, px + CELL_SIZE - 2, py + CELL_SIZE - 2], fill=rgb + (255,))

    glow = layer.filter(ImageFilter.GaussianBlur(2))
    image.paste(glow, (0, 0), glow)
    image.paste(layer, (0, 0), layer)

    grid_draw = ImageDraw.Draw(image, "RGBA")
    line = (255, 255, 255, 5)
    for x in range(0, width + 1, CELL_SIZE):
        grid_draw.line([(x, 0), (x, height)], fill=line)
    for y in range(0, height + 1, CELL_SIZE):
        grid_draw.line([(0, y), (width, y)], fill=line)


LIFE_EFFECT = BackgroundEffect(
    name="gameoflife",
    init=init_life,
    step=step_life,
    render=render_life,
)
