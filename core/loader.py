"""Load image files and enforce provider size/dimension limits."""

import logging
import os

from .config import MAX_FILE_BYTES, MIN_HEIGHT, MIN_WIDTH
from .errors import LoadError, LoadErrorKind
from .image_utils import image_dimensions
from .types import LoadedFile

logger = logging.getLogger(__name__)


def load_file(
    filename: str,
    max_bytes: int = MAX_FILE_BYTES,
    min_width: int = MIN_WIDTH,
    min_height: int = MIN_HEIGHT,
) -> LoadedFile:
    """Read an image and check it against the recommended limits.

    Steps, each with its own failure kind: stat, size ceiling, read,
    decode, minimum dimensions.

    Args:
        filename: Path to the image.
        max_bytes: Largest accepted file size.
        min_width: Smallest accepted width in pixels.
        min_height: Smallest accepted height in pixels.

    Returns:
        LoadedFile with the raw bytes and decoded dimensions.

    Raises:
        LoadError: If any step fails.
    """
    try:
        size = os.stat(filename).st_size
    except OSError as e:
        raise LoadError(LoadErrorKind.STAT_FAILED, filename, f"stat failed: {e}") from e

    if size > max_bytes:
        raise LoadError(
            LoadErrorKind.TOO_LARGE,
            filename,
            f"file size ({size / (1 << 20):.2f} MB) is larger than recommended size of "
            f"{max_bytes / (1 << 20):g} MB",
        )

    try:
        with open(filename, "rb") as f:
            data = f.read()
    except OSError as e:
        raise LoadError(LoadErrorKind.READ_FAILED, filename, f"read failed: {e}") from e

    try:
        width, height = image_dimensions(data)
    except ValueError as e:
        raise LoadError(LoadErrorKind.DECODE_FAILED, filename, str(e)) from e

    # Each dimension is checked against its own threshold.
    if width < min_width or height < min_height:
        raise LoadError(
            LoadErrorKind.TOO_SMALL,
            filename,
            f"image size ({width}x{height}) is smaller than recommended minimum of "
            f"{min_width}x{min_height}",
        )

    logger.info(f"{filename} is {len(data)} bytes and {width}x{height} pixels")
    return LoadedFile(filename=filename, data=data, width=width, height=height)
