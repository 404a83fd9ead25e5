"""
GIF Encoder

Collects composited RGB frames and encodes them into an animated GIF blob
with Pillow. Quantization runs frame by frame on the event loop (yielding
between frames so progress can be reported); the final save runs in a
worker thread.
"""

import asyncio
import io
from typing import Callable, List, Optional, Tuple
from PIL import Image
from models.errors import EncoderError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.ENCODER)

ProgressCallback = Callable[[float], None]


class GifEncoder:
    """
    Pillow-backed animated GIF encoder.

    Frames keep their own delay; the GIF loops forever. Any failure during
    render() discards the collected frames and raises EncoderError.
    """

    def __init__(self, width: int, height: int, colors: int = 256):
        if not 2 <= colors <= 256:
            raise ValueError(f"colors must be in 2..256, got {colors}")
        self.width = width
        self.height = height
        self.colors = colors
        self._frames: List[Tuple[Image.Image, int]] = []

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    def add_frame(self, image: Image.Image, delay_ms: int) -> None:
        if image.size != (self.width, self.height):
            raise EncoderError(
                f"Frame size {image.size[0]}x{image.size[1]} does not match "
                f"encoder size {self.width}x{self.height}"
            )
        self._frames.append((image.convert("RGB"), max(1, int(delay_ms))))

    def discard(self) -> None:
        self._frames.clear()

    async def render(self, on_progress: Optional[ProgressCallback] = None) -> bytes:
        """
        Encode all collected frames.

        Args:
            on_progress: Called with a fraction in [0, 1] after each frame is quantized

        Returns:
            GIF bytes
        """
        if not self._frames:
            raise EncoderError("No frames to encode")

        total = len(self._frames)
        try:
            palette_frames = []
            for index, (image, _) in enumerate(self._frames):
                palette_frames.append(image.quantize(colors=self.colors, method=Image.Quantize.MEDIANCUT))
                if on_progress:
                    on_progress((index + 1) / total)
                await asyncio.sleep(0)

            durations = [delay for _, delay in self._frames]
            blob = await asyncio.to_thread(self._save, palette_frames, durations)
        except EncoderError:
            self.discard()
            raise
        except Exception as e:
            self.discard()
            raise EncoderError(f"GIF encoding failed: {e}") from e

        log.debug("GIF encoded", frames=total, size=len(blob))
        return blob

    @staticmethod
    def _save(frames: List[Image.Image], durations: List[int]) -> bytes:
        buffer = io.BytesIO()
        frames[0].save(
            buffer,
            format="GIF",
            save_all=True,
            append_images=frames[1:],
            duration=durations,
            loop=0,
            disposal=2,
            optimize=False,
        )
        return buffer.getvalue()
