"""
Background Engine

Closed registry of background effects plus the owned BackgroundState that
the preview loop and the export driver thread through step/render calls.

    state = create_background_state(BackgroundType.MATRIX, 600, 200)
    state = step_background(state, 600, 200)
    render_background(image, state, 600, 200, "#9b5de5")
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from PIL import Image
from animations.base import BackgroundEffect, make_rng
from animations.game_of_life import LIFE_EFFECT
from animations.matrix import MATRIX_EFFECT
from animations.particle import PARTICLE_EFFECT
from animations.plain import PLAIN_EFFECT
from models.enums import BackgroundType
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.BACKGROUND)


def _build_effect_registry() -> Dict[BackgroundType, BackgroundEffect]:
    """Registry covering every BackgroundType"""
    registry = {
        BackgroundType.PARTICLE: PARTICLE_EFFECT,
        BackgroundType.MATRIX: MATRIX_EFFECT,
        BackgroundType.GAMEOFLIFE: LIFE_EFFECT,
        BackgroundType.PLAIN: PLAIN_EFFECT,
    }

    missing = [t.name for t in BackgroundType if t not in registry]
    if missing:
        raise RuntimeError(f"Background effects not registered: {missing}")

    return registry


EFFECTS: Dict[BackgroundType, BackgroundEffect] = _build_effect_registry()


@dataclass
class BackgroundState:
    """
    Per-session background state.

    `effect` holds the effect-specific arrays (ParticleField, MatrixRain,
    LifeGrid, or None for plain). `tick` counts step_background() calls.
    """
    type: BackgroundType
    width: int
    height: int
    effect: Any
    tick: int = 0

    def matches(self, type: BackgroundType, width: int, height: int) -> bool:
        """True if this state can be reused for the given type and canvas"""
        return self.type == type and self.width == width and self.height == height


def create_background_state(
    type: BackgroundType,
    width: int,
    height: int,
    seed: Optional[int] = None,
) -> BackgroundState:
    """
    Initialize a fresh background state.

    Args:
        type: Background effect
        width, height: Canvas dimensions (must be positive)
        seed: Optional seed for the effect's private random source
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")

    effect = EFFECTS[type]
    state = BackgroundState(
        type=type,
        width=width,
        height=height,
        effect=effect.init(width, height, make_rng(seed)),
    )
    log.debug("Background state created", effect=effect.name, size=f"{width}x{height}")
    return state


def step_background(state: BackgroundState, width: int, height: int) -> BackgroundState:
    """Advance the background by exactly one tick"""
    state.effect = EFFECTS[state.type].step(state.effect, width, height)
    state.tick += 1
    return state


def render_background(image: Image.Image, state: BackgroundState, width: int, height: int, color: str) -> None:
    """Draw the current background state onto `image`"""
    EFFECTS[state.type].render(image, state.effect, width, height, color)
