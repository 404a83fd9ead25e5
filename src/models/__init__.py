"""
Models package - Data models for the intro GIF generator
"""

from .enums import BackgroundType, SocialType, FontFamily, StepType, ExportPhase, LogLevel, LogCategory
from .config import AnimationConfig, Social, FontConfig, BackgroundConfig, GifSettings, CompressionSettings, default_config
from .steps import AnimationStep, TypeStep, DeleteStep, AppendStep, PrependStep, PauseStep
from .frame import FrameState, ExportProgress, CompressionResult, GifResult

__all__ = [
    'BackgroundType',
    'SocialType',
    'FontFamily',
    'StepType',
    'ExportPhase',
    'LogLevel',
    'LogCategory',
    'AnimationConfig',
    'Social',
    'FontConfig',
    'BackgroundConfig',
    'GifSettings',
    'CompressionSettings',
    'default_config',
    'AnimationStep',
    'TypeStep',
    'DeleteStep',
    'AppendStep',
    'PrependStep',
    'PauseStep',
    'FrameState',
    'ExportProgress',
    'CompressionResult',
    'GifResult',
]
