"""
Background effects for the intro animation

Current implementation:
- background: closed effect registry + owned BackgroundState
- base: BackgroundEffect capability set
- particle, matrix, game_of_life, plain: effect implementations
"""

__all__ = [
    "background",
    "base",
    "particle",
    "matrix",
    "game_of_life",
    "plain",
]
