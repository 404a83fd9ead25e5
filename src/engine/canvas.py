"""
Canvas: owned RGB raster used by one render session.

The drawing API is Pillow. get_context() is the single entry point for
drawing a frame: it fails when the canvas is detached and otherwise hands
back a fresh ImageDraw over a cleared raster, so no fill, alpha or
blur state can leak from one frame into the next.
"""

from typing import Optional
from PIL import Image, ImageDraw
from models.errors import CanvasNotAttachedError

CLEAR_COLOR = (0, 0, 0)


class Canvas:
    """
    Raster target for the compositor.

    Example:
        canvas = Canvas(600, 200)
        draw = canvas.get_context()
        ...
        frame = canvas.snapshot()
    """

    def __init__(self, width: int, height: int, attached: bool = True):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._image: Optional[Image.Image] = None
        if attached:
            self.attach()

    # === Lifecycle ===

    def attach(self) -> None:
        if self._image is None:
            self._image = Image.new("RGB", (self.width, self.height), CLEAR_COLOR)

    def detach(self) -> None:
        self._image = None

    @property
    def is_attached(self) -> bool:
        return self._image is not None

    # === Drawing ===

    @property
    def image(self) -> Image.Image:
        if self._image is None:
            raise CanvasNotAttachedError("Canvas is not attached")
        return self._image

    def get_context(self) -> ImageDraw.ImageDraw:
        """Clear the raster and return a fresh RGBA-blending draw context"""
        image = self.image
        image.paste(CLEAR_COLOR, (0, 0, self.width, self.height))
        return ImageDraw.Draw(image, "RGBA")

    def snapshot(self) -> Image.Image:
        """Independent copy of the current raster"""
        return self.image.copy()
