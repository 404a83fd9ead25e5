"""
Enums for the typing-intro animation pipeline
"""

from enum import Enum, auto


class BackgroundType(Enum):
    """Generative background effects (closed set)"""
    PARTICLE = "particle"
    MATRIX = "matrix"
    GAMEOFLIFE = "gameoflife"
    PLAIN = "plain"


class SocialType(Enum):
    """Social handle kinds shown after the intro"""
    X = "x"
    SNS = "sns"
    ENS = "ens"
    YOUTUBE = "youtube"
    GITHUB = "github"


class FontFamily(Enum):
    """Font families offered by the form"""
    MONO = "mono"
    SANS = "sans"
    SERIF = "serif"


class StepType(Enum):
    """Animation step tags"""
    TYPE = "type"
    DELETE = "delete"
    APPEND = "append"
    PREPEND = "prepend"
    PAUSE = "pause"


class ExportPhase(Enum):
    """
    Export phases, in the order they are reported.

    Progress ranges:
        RENDERING    0-35%
        ENCODING    35-60%
        COMPRESSING 60-95%
        COMPLETE    100%
    """
    RENDERING = "rendering"
    ENCODING = "encoding"
    COMPRESSING = "compressing"
    COMPLETE = "complete"


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()       # Configuration loading, validation
    TIMELINE = auto()     # Step generation, interpolation
    BACKGROUND = auto()   # Background simulators
    RENDER = auto()       # Frame compositing
    ENCODER = auto()      # GIF container encoding
    COMPRESSION = auto()  # gifsicle post-processing
    EXPORT = auto()       # Export driver
    PREVIEW = auto()      # Live preview loop
    SYSTEM = auto()       # Startup, shutdown, errors

    GENERAL = auto()      # Default general category
