"""
Configuration schemas - Pydantic models for the configuration boundary

The form (or config.yaml) hands over plain dicts. These schemas validate
ranges and enum values and convert to the frozen domain dataclasses in
models.config.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.config import (
    AnimationConfig,
    BackgroundConfig,
    CompressionSettings,
    FontConfig,
    GifSettings,
    PLAYBACK_SPEEDS,
    Social,
)
from models.enums import BackgroundType, FontFamily, SocialType
from utils.colors import is_hex_color


def _check_hex(value: str) -> str:
    if not is_hex_color(value):
        raise ValueError(f"'{value}' is not a hex color")
    return value if value.startswith("#") else f"#{value}"


class SocialSchema(BaseModel):
    type: SocialType = Field(description="Social kind (x, sns, ens, youtube, github)")
    handle: str = Field("", description="Handle without prefix/suffix")
    enabled: bool = True


class FontSchema(BaseModel):
    family: FontFamily = FontFamily.MONO
    size: int = Field(24, ge=16, le=32)
    color: str = "#ffffff"
    bold: bool = False
    italic: bool = False

    @field_validator("color")
    @classmethod
    def _color(cls, v: str) -> str:
        return _check_hex(v)


class BackgroundSchema(BaseModel):
    type: BackgroundType = BackgroundType.PARTICLE
    color: str = "#9b5de5"
    width: int = Field(600, gt=0, le=4096)
    height: int = Field(200, gt=0, le=4096)

    @field_validator("color")
    @classmethod
    def _color(cls, v: str) -> str:
        return _check_hex(v)


class CompressionSchema(BaseModel):
    enabled: bool = True
    lossy: int = Field(50, ge=0, le=200)
    optimization_level: int = Field(2, ge=1, le=3)
    colors: Optional[int] = Field(None, ge=2, le=256)


class GifSchema(BaseModel):
    fps: int = Field(12, ge=4, le=20)
    playback_speed: float = Field(1.0, description="One of 0.5, 1, 1.5 ... 4")
    compression: CompressionSchema = Field(default_factory=CompressionSchema)

    @field_validator("playback_speed")
    @classmethod
    def _speed(cls, v: float) -> float:
        if v not in PLAYBACK_SPEEDS:
            raise ValueError(f"playback_speed must be one of {list(PLAYBACK_SPEEDS)}")
        return v


class ConfigSchema(BaseModel):
    """Complete animation configuration as received from the form"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "intro_text": "Hey there! I am",
                "name": "Niraj",
                "role": "Software Engineer",
                "socials": [{"type": "x", "handle": "0xkniraj", "enabled": True}],
                "speed": 50,
                "background": {"type": "matrix", "color": "#00f5d4"},
                "gif": {"fps": 12, "playback_speed": 1.5},
            }
        }
    )

    intro_text: str = "Hey there! I am"
    name: str = ""
    role: str = ""
    socials: List[SocialSchema] = Field(default_factory=list)
    speed: float = Field(50.0, gt=0, le=1000, description="Milliseconds per character")
    pause: float = Field(2000.0, ge=0, le=60000, description="Base pause in milliseconds")
    prefix: str = ""
    font: FontSchema = Field(default_factory=FontSchema)
    background: BackgroundSchema = Field(default_factory=BackgroundSchema)
    gif: GifSchema = Field(default_factory=GifSchema)

    def to_domain(self) -> AnimationConfig:
        return AnimationConfig(
            intro_text=self.intro_text,
            name=self.name,
            role=self.role,
            socials=tuple(Social(s.type, s.handle, s.enabled) for s in self.socials),
            speed=self.speed,
            pause=self.pause,
            prefix=self.prefix,
            font=FontConfig(
                family=self.font.family,
                size=self.font.size,
                color=self.font.color,
                bold=self.font.bold,
                italic=self.font.italic,
            ),
            background=BackgroundConfig(
                type=self.background.type,
                color=self.background.color,
                width=self.background.width,
                height=self.background.height,
            ),
            gif=GifSettings(
                fps=self.gif.fps,
                playback_speed=self.gif.playback_speed,
                compression=CompressionSettings(
                    enabled=self.gif.compression.enabled,
                    lossy=self.gif.compression.lossy,
                    optimization_level=self.gif.compression.optimization_level,
                    colors=self.gif.compression.colors,
                ),
            ),
        )

    @classmethod
    def from_domain(cls, config: AnimationConfig) -> "ConfigSchema":
        return cls(
            intro_text=config.intro_text,
            name=config.name,
            role=config.role,
            socials=[SocialSchema(type=s.type, handle=s.handle, enabled=s.enabled) for s in config.socials],
            speed=config.speed,
            pause=config.pause,
            prefix=config.prefix,
            font=FontSchema(
                family=config.font.family,
                size=config.font.size,
                color=config.font.color,
                bold=config.font.bold,
                italic=config.font.italic,
            ),
            background=BackgroundSchema(
                type=config.background.type,
                color=config.background.color,
                width=config.background.width,
                height=config.background.height,
            ),
            gif=GifSchema(
                fps=config.gif.fps,
                playback_speed=config.gif.playback_speed,
                compression=CompressionSchema(
                    enabled=config.gif.compression.enabled,
                    lossy=config.gif.compression.lossy,
                    optimization_level=config.gif.compression.optimization_level,
                    colors=config.gif.compression.colors,
                ),
            ),
        )
