"""
Configuration models

Immutable per-render-session configuration. The form (or a YAML file)
replaces the whole AnimationConfig on every edit; nothing here is patched
in place.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
from models.enums import BackgroundType, FontFamily, SocialType

PLAYBACK_SPEEDS: Tuple[float, ...] = (0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0)

FONT_SIZE_RANGE = (16, 32)
FPS_RANGE = (4, 20)
LOSSY_RANGE = (0, 200)
OPTIMIZATION_LEVEL_RANGE = (1, 3)
COLORS_RANGE = (2, 256)


@dataclass(frozen=True)
class SocialDisplay:
    """How a social handle is rendered: prefix + handle + suffix"""
    label: str
    prefix: str = ""
    suffix: str = ""


SOCIAL_DISPLAY: Dict[SocialType, SocialDisplay] = {
    SocialType.X: SocialDisplay("X (Twitter)", prefix="x.com/"),
    SocialType.SNS: SocialDisplay("Solana Name Service", suffix=".sol"),
    SocialType.ENS: SocialDisplay("Ethereum Name Service", suffix=".eth"),
    SocialType.YOUTUBE: SocialDisplay("YouTube", prefix="youtube.com/@"),
    SocialType.GITHUB: SocialDisplay("GitHub", prefix="github.com/"),
}


@dataclass(frozen=True)
class Social:
    type: SocialType
    handle: str = ""
    enabled: bool = True


@dataclass(frozen=True)
class FontConfig:
    family: FontFamily = FontFamily.MONO
    size: int = 24
    color: str = "#ffffff"
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True)
class BackgroundConfig:
    """Background effect plus canvas dimensions"""
    type: BackgroundType = BackgroundType.PARTICLE
    color: str = "#9b5de5"
    width: int = 600
    height: int = 200

    def __post_init__(self):
        # Everything downstream assumes a non-empty canvas
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {self.width}x{self.height}")


@dataclass(frozen=True)
class CompressionSettings:
    enabled: bool = True
    lossy: int = 50
    optimization_level: int = 2
    colors: Optional[int] = None


@dataclass(frozen=True)
class GifSettings:
    """Export-only settings; the preview ignores them"""
    fps: int = 12
    playback_speed: float = 1.0
    compression: CompressionSettings = field(default_factory=CompressionSettings)


@dataclass(frozen=True)
class AnimationConfig:
    """
    Complete render configuration

    Units:
        speed: milliseconds per typed character
        pause: base pause in milliseconds (final hold is 2x)
    """
    intro_text: str = "Hey there! I am"
    name: str = ""
    role: str = ""
    socials: Tuple[Social, ...] = ()
    speed: float = 50.0
    pause: float = 2000.0
    prefix: str = ""
    font: FontConfig = field(default_factory=FontConfig)
    background: BackgroundConfig = field(default_factory=BackgroundConfig)
    gif: GifSettings = field(default_factory=GifSettings)


def default_config() -> AnimationConfig:
    """Configuration the form starts with"""
    return AnimationConfig(
        intro_text="Hey there! I am",
        name="Niraj",
        role="Software Engineer",
        socials=(
            Social(SocialType.X, "0xkniraj", True),
            Social(SocialType.SNS, "0xkniraj", True),
            Social(SocialType.ENS, "0xkniraj", True),
        ),
        speed=50.0,
        pause=2000.0,
        prefix="0xk",
        font=FontConfig(),
        background=BackgroundConfig(),
        gif=GifSettings(),
    )
