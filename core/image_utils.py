"""Image utilities for the labeling pipeline."""

import io

from PIL import Image


def image_dimensions(data: bytes) -> tuple[int, int]:
    """Decode image bytes and return (width, height).

    The whole image is decoded, so truncated or corrupt files fail here
    rather than at the provider. Pillow's decompression bomb check stays
    enabled.

    Raises:
        ValueError: If the format is unrecognized or the data is corrupt.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            return img.size
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise ValueError(f"failed to decode image: {e}") from e
