"""
GIF Compressor

Post-encode size reduction through the gifsicle binary. The blob is piped
through stdin/stdout so no temporary files are needed.
"""

import asyncio
import shutil
from typing import List
from models.config import CompressionSettings
from models.errors import CompressionError
from models.frame import CompressionResult
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.COMPRESSION)

GIFSICLE = "gifsicle"


def build_command(settings: CompressionSettings, binary: str = GIFSICLE) -> List[str]:
    """
    gifsicle argv for the given settings.

    * -O{level}     cross-frame optimization (1-3)
    * --lossy=N     only when N > 0
    * --colors N    only when a palette limit is set
    """
    cmd = [binary, f"-O{settings.optimization_level}", "--no-warnings"]
    if settings.lossy > 0:
        cmd.append(f"--lossy={settings.lossy}")
    if settings.colors is not None and 2 <= settings.colors <= 256:
        cmd += ["--colors", str(settings.colors)]
    cmd.append("-")
    return cmd


async def compress_gif(blob: bytes, settings: CompressionSettings, binary: str = GIFSICLE) -> CompressionResult:
    """
    Run the GIF through gifsicle.

    Raises:
        CompressionError: binary missing, non-zero exit or empty output
    """
    if shutil.which(binary) is None:
        raise CompressionError(f"{binary} is not installed or not on PATH")

    cmd = build_command(settings, binary)
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await proc.communicate(blob)
    except OSError as e:
        raise CompressionError(f"Failed to run {binary}: {e}") from e

    if proc.returncode != 0:
        message = stderr.decode(errors="replace").strip()
        raise CompressionError(f"{binary} exited with code {proc.returncode}: {message}")
    if not stdout:
        raise CompressionError(f"{binary} produced no output")

    result = CompressionResult(blob=stdout, original_size=len(blob), compressed_size=len(stdout))
    log.debug(
        "GIF compressed",
        original=result.original_size,
        compressed=result.compressed_size,
        lossy=settings.lossy,
    )
    return result
