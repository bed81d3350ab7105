import logging
from pathlib import Path
from typing import BinaryIO

import numpy as np

from imagetoascii.charsets import BUCKET_SIZE, RAMP
from imagetoascii.errors import EmptyImageError
from imagetoascii.model import brightness
from imagetoascii.sampling import extract_pixels

log = logging.getLogger(__name__)


def char_for_brightness(value: int) -> str:
    """Ramp symbol for a brightness in [0, 255]."""
    if not 0 <= value <= 255:
        raise ValueError(f"Brightness out of range: {value}")
    return RAMP[min(value // BUCKET_SIZE, len(RAMP) - 1)]


# One entry per possible brightness
_LOOKUP = np.array([char_for_brightness(v) for v in range(256)])


def generate_text(grid: np.ndarray) -> str:
    if len(grid) == 0:
        raise EmptyImageError("empty image")

    chars = _LOOKUP[brightness(grid)]
    log.debug("rendered %d rows of %d characters", chars.shape[0], chars.shape[1])
    return "".join("".join(row) + "\n" for row in chars)


def image_to_ascii(source: str | Path | BinaryIO, width: int = 0) -> str:
    if isinstance(source, (str, Path)):
        with Path(source).open("rb") as f:
            return generate_text(extract_pixels(f, width))
    return generate_text(extract_pixels(source, width))
