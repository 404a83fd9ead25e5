"""
Frame Compositor

Combines the background raster and the text layer into one image per frame:

    1. background effect (or flat #0a0a0a fallback)
    2. 30% black overlay for readability
    3. text glow (blurred, background color) + text (font color)
    4. cursor bar when visible
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional, Tuple
from PIL import Image, ImageDraw, ImageFilter, ImageFont
from animations.background import BackgroundState, render_background
from engine.canvas import Canvas
from models.config import AnimationConfig, FontConfig
from models.enums import FontFamily
from models.frame import FrameState
from utils.colors import hex_to_rgb
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.RENDER)

PADDING = 40
CURSOR_WIDTH = 2
CURSOR_GAP = 4
OVERLAY = (0, 0, 0, 77)   # rgba(0, 0, 0, 0.3)
FALLBACK_FILL = (10, 10, 10)
GLOW_RADIUS = 4
GLOW_ALPHA = 180

# (regular, bold, italic, bold-italic)
FONT_FILES: Dict[FontFamily, Tuple[str, str, str, str]] = {
    FontFamily.MONO: ("DejaVuSansMono.ttf", "DejaVuSansMono-Bold.ttf", "DejaVuSansMono-Oblique.ttf", "DejaVuSansMono-BoldOblique.ttf"),
    FontFamily.SANS: ("DejaVuSans.ttf", "DejaVuSans-Bold.ttf", "DejaVuSans-Oblique.ttf", "DejaVuSans-BoldOblique.ttf"),
    FontFamily.SERIF: ("DejaVuSerif.ttf", "DejaVuSerif-Bold.ttf", "DejaVuSerif-Italic.ttf", "DejaVuSerif-BoldItalic.ttf"),
}


@dataclass(frozen=True)
class RenderOptions:
    width: int
    height: int
    font: FontConfig
    background_color: str

    @classmethod
    def from_config(cls, config: AnimationConfig) -> "RenderOptions":
        return cls(
            width=config.background.width,
            height=config.background.height,
            font=config.font,
            background_color=config.background.color,
        )


@lru_cache(maxsize=32)
def resolve_font(family: FontFamily, size: int, bold: bool = False, italic: bool = False) -> ImageFont.ImageFont:
    """
    TrueType font for a family/style, falling back to Pillow's built-in
    scalable font when the DejaVu files are not installed.
    """
    index = (2 if italic else 0) + (1 if bold else 0)
    try:
        return ImageFont.truetype(FONT_FILES[family][index], size)
    except OSError:
        log.warn("Font not found, using built-in font", file=FONT_FILES[family][index], size=size)
        return ImageFont.load_default(size=size)


def _draw_text_glow(image: Image.Image, position, text: str, font, color: str) -> None:
    layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
    ImageDraw.Draw(layer).text(position, text, font=font, fill=hex_to_rgb(color) + (GLOW_ALPHA,), anchor="lm")
    glow = layer.filter(ImageFilter.GaussianBlur(GLOW_RADIUS))
    image.paste(glow, (0, 0), glow)


def render_frame(
    canvas: Canvas,
    frame_state: FrameState,
    background_state: Optional[BackgroundState],
    options: RenderOptions,
) -> Image.Image:
    """
    Composite one frame onto `canvas` and return a copy of the result.

    Raises:
        CanvasNotAttachedError: canvas is detached; nothing is drawn and
            the background state is left untouched
    """
    width, height = options.width, options.height
    canvas.get_context()
    image = canvas.image

    if background_state is not None:
        render_background(image, background_state, width, height, options.background_color)
    else:
        image.paste(FALLBACK_FILL, (0, 0, width, height))

    draw = ImageDraw.Draw(image, "RGBA")
    draw.rectangle([0, 0, width, height], fill=OVERLAY)

    font_cfg = options.font
    font = resolve_font(font_cfg.family, font_cfg.size, font_cfg.bold, font_cfg.italic)
    text = frame_state.text
    text_y = height / 2

    if text:
        _draw_text_glow(image, (PADDING, text_y), text, font, options.background_color)
        draw = ImageDraw.Draw(image, "RGBA")
        draw.text((PADDING, text_y), text, font=font, fill=hex_to_rgb(font_cfg.color), anchor="lm")

    if frame_state.cursor_visible:
        cursor_x = PADDING + draw.textlength(text, font=font) + CURSOR_GAP
        half = font_cfg.size / 2
        draw.rectangle(
            [cursor_x, text_y - half, cursor_x + CURSOR_WIDTH - 1, text_y + half],
            fill=hex_to_rgb(options.background_color),
        )

    return canvas.snapshot()
