"""
Animation Step Generator

Turns an AnimationConfig into the ordered typing script:

    intro → name → (delete name) role → (delete previous) social ... → final hold

Only the most recently typed suffix is ever deleted, so the intro text stays
on screen for the whole loop.
"""

from typing import List, Optional
from models.config import AnimationConfig, Social, SOCIAL_DISPLAY
from models.steps import AnimationStep, DeleteStep, PauseStep, TypeStep
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.TIMELINE)

FINAL_PAUSE_MULTIPLIER = 2


def format_social(social: Social) -> str:
    """Display string for a social handle, e.g. 'x.com/abc' or 'abc.sol'"""
    display = SOCIAL_DISPLAY[social.type]
    return f"{display.prefix}{social.handle}{display.suffix}"


def _is_shown(social: Social) -> bool:
    return social.enabled and bool(social.handle)


def generate_steps(config: AnimationConfig) -> List[AnimationStep]:
    """
    Build the step script for a configuration.

    Pure function: identical configs produce equal step lists.

    Args:
        config: Animation configuration

    Returns:
        Ordered list of steps, never empty
    """
    base = config.pause
    steps: List[AnimationStep] = [TypeStep(config.intro_text)]
    suffix: Optional[str] = None

    def replace_suffix(text: str) -> None:
        nonlocal suffix
        if suffix:
            steps.append(DeleteStep(len(suffix)))
        steps.append(TypeStep(text))
        steps.append(PauseStep(base))
        suffix = text

    if config.name:
        steps.append(TypeStep(f" {config.name}"))
        steps.append(PauseStep(base))
        suffix = f" {config.name}"

    if config.role:
        replace_suffix(f" {config.role}")

    for social in config.socials:
        if not _is_shown(social):
            continue
        replace_suffix(f" {format_social(social)}")

    steps.append(PauseStep(base * FINAL_PAUSE_MULTIPLIER))

    log.debug("Generated animation steps", count=len(steps))
    return steps
