"""
Frame and export result models
"""

from dataclasses import dataclass
from typing import Optional
from models.enums import ExportPhase


@dataclass(frozen=True)
class FrameState:
    """
    Materialized timeline state at one query point.

    Produced fresh for every query; never mutated.
    """
    text: str
    cursor_visible: bool
    background_tick: int


@dataclass(frozen=True)
class ExportProgress:
    phase: ExportPhase
    progress: int  # 0-100
    current_frame: Optional[int] = None
    total_frames: Optional[int] = None
    original_size: Optional[int] = None
    compressed_size: Optional[int] = None


@dataclass(frozen=True)
class CompressionResult:
    blob: bytes
    original_size: int
    compressed_size: int


@dataclass(frozen=True)
class GifResult:
    blob: bytes
    original_size: int
    compressed_size: int
    total_frames: int
    frame_delay_ms: int
