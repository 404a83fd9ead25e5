import pytest
from dataclasses import replace

from models.config import (
    AnimationConfig,
    BackgroundConfig,
    CompressionSettings,
    FontConfig,
    GifSettings,
    Social,
)
from models.enums import BackgroundType, SocialType


@pytest.fixture
def small_config():
    """
    Tiny canvas and short timings so export/preview tests stay fast.

    Script: Type("Hi") (20ms) + Pause(200ms) = 220ms
    """
    return AnimationConfig(
        intro_text="Hi",
        speed=10.0,
        pause=100.0,
        prefix="0xk",
        font=FontConfig(size=16),
        background=BackgroundConfig(type=BackgroundType.PLAIN, width=64, height=32),
        gif=GifSettings(fps=10, compression=CompressionSettings(enabled=False)),
    )


@pytest.fixture
def make_config(small_config):
    """Factory: small_config with field overrides"""
    def _make(**overrides):
        return replace(small_config, **overrides)
    return _make


@pytest.fixture
def full_config():
    return AnimationConfig(
        intro_text="Hey there! I am",
        name="Niraj",
        role="Dev",
        socials=(
            Social(SocialType.X, "abc"),
            Social(SocialType.SNS, ""),
            Social(SocialType.ENS, "abc", enabled=False),
            Social(SocialType.GITHUB, "abc"),
        ),
        speed=50.0,
        pause=1000.0,
    )
