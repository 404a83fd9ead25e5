"""
Utility functions for the intro GIF generator
"""

from .colors import (
    hex_to_rgb,
    rgb_to_hex,
    is_hex_color,
    with_alpha,
)

__all__ = [
    'hex_to_rgb',
    'rgb_to_hex',
    'is_hex_color',
    'with_alpha',
]
