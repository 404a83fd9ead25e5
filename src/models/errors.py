"""
Error types raised across the render pipeline
"""


class IntroGifError(Exception):
    """Base class for all pipeline errors"""


class ConfigError(IntroGifError):
    """Configuration could not be loaded or failed validation"""


class CanvasNotAttachedError(IntroGifError):
    """Drawing context requested before the canvas was attached"""


class EncoderError(IntroGifError):
    """GIF container encoding failed; the export session is terminated"""


class CompressionError(IntroGifError):
    """gifsicle post-processing failed; callers fall back to the raw GIF"""
