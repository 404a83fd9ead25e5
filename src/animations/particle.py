"""
Particle Background

Slow-drifting dots that wrap around the canvas edges. Pairs closer than
CONNECT_DISTANCE are joined with a faint line (O(n²), fine for 50 points).
"""

import math
import random
from dataclasses import dataclass, field
from typing import List
from PIL import Image, ImageDraw
from animations.base import BackgroundEffect, clear
from utils.colors import with_alpha

PARTICLE_COUNT = 50
CONNECT_DISTANCE = 80
MAX_VELOCITY = 0.25


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    size: float
    opacity: float


@dataclass
class ParticleField:
    particles: List[Particle]
    rng: random.Random
    tick: int = 0
    connections: int = field(default=0, compare=False)


def _wrap(value: float, limit: int) -> float:
    """Wrap into [0, limit); float modulo can land exactly on limit"""
    value %= limit
    return 0.0 if value >= limit else value


def init_particles(width: int, height: int, rng: random.Random) -> ParticleField:
    particles = [
        Particle(
            x=rng.random() * width,
            y=rng.random() * height,
            vx=(rng.random() - 0.5) * 2 * MAX_VELOCITY,
            vy=(rng.random() - 0.5) * 2 * MAX_VELOCITY,
            size=rng.random() * 2 + 1,
            opacity=rng.random() * 0.5 + 0.2,
        )
        for _ in range(PARTICLE_COUNT)
    ]
    return ParticleField(particles=particles, rng=rng)


def step_particles(state: ParticleField, width: int, height: int) -> ParticleField:
    for p in state.particles:
        p.x = _wrap(p.x + p.vx, width)
        p.y = _wrap(p.y + p.vy, height)
    state.tick += 1
    return state


def render_particles(image: Image.Image, state: ParticleField, width: int, height: int, color: str) -> None:
    clear(image)
    draw = ImageDraw.Draw(image, "RGBA")
    particles = state.particles

    # Connections first so the dots sit on top
    line_color = with_alpha(color, 0x20 / 255)
    connections = 0
    for i in range(len(particles)):
        a = particles[i]
        for j in range(i + 1, len(particles)):
            b = particles[j]
            if math.hypot(a.x - b.x, a.y - b.y) < CONNECT_DISTANCE:
                draw.line([(a.x, a.y), (b.x, b.y)], fill=line_color, width=1)
                connections += 1
    state.connections = connections

    for p in particles:
        glow = p.size * 2
        draw.ellipse([p.x - glow, p.y - glow, p.x + glow, p.y + glow], fill=with_alpha(color, p.opacity * 50 / 255))
        draw.ellipse([p.x - p.size, p.y - p.size, p.x + p.size, p.y + p.size], fill=with_alpha(color, p.opacity))


PARTICLE_EFFECT = BackgroundEffect(
    name="particle",
    init=init_particles,
    step=step_particles,
    render=render_particles,
)
