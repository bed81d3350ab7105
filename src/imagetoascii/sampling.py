import logging
from typing import BinaryIO

import numpy as np
from PIL import Image

from imagetoascii.errors import DecodeError, ResizeError
from imagetoascii.model import CHANNEL_DIVISOR, normalise16

log = logging.getLogger(__name__)

# Decoders are picked by sniffing the stream's signature, never the file extension
SUPPORTED_FORMATS = ("PNG", "JPEG", "BMP")

MAX16 = 0xFFFF

# Pillow stores image dimensions as C ints
MAX_DIMENSION = 2**31 - 1

# Width-only resizes round the derived height with this bias
_HEIGHT_BIAS = 0.7


def decode(stream: BinaryIO) -> Image.Image:
    """Decode the first frame of an image, failing with DecodeError on anything unreadable."""
    try:
        image = Image.open(stream, formats=SUPPORTED_FORMATS)
        image.load()
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"cannot decode image: {exc}") from exc
    log.debug("decoded %s image %dx%d (mode %s)", image.format, image.width, image.height, image.mode)
    return image


def _normalise_mode(image: Image.Image) -> Image.Image:
    # 16-bit greyscale keeps its precision in mode "I"; everything else becomes 8-bit RGBA
    if image.mode.startswith("I;16"):
        return image.convert("I")
    if image.mode == "I":
        return image
    return image.convert("RGBA")


def scaled_height(width: int, height: int, target_width: int) -> int:
    """Height that keeps the aspect ratio when an image is resized to target_width."""
    scale = width / target_width
    return int(_HEIGHT_BIAS + height / scale)


def resize_to_width(image: Image.Image, width: int) -> Image.Image:
    """Bilinear resize to exactly `width` columns. Non-positive or native widths are a no-op."""
    if width <= 0 or width == image.width:
        return image
    if width > MAX_DIMENSION:
        raise ResizeError(f"width {width} exceeds the maximum of {MAX_DIMENSION}")
    height = scaled_height(image.width, image.height, width)
    if not 1 <= height <= MAX_DIMENSION:
        raise ResizeError(f"cannot resize {image.width}x{image.height} image to width {width}")
    log.debug("resizing %dx%d -> %dx%d", image.width, image.height, width, height)
    try:
        return image.resize((width, height), Image.BILINEAR)
    except (ValueError, OSError, OverflowError, MemoryError) as exc:
        raise ResizeError(f"cannot resize image to width {width}: {exc}") from exc


def _rgba16(image: Image.Image) -> np.ndarray:
    """Alpha-premultiplied 16-bit RGBA samples, shape (rows, cols, 4)."""
    if image.mode == "I":
        grey = np.clip(np.asarray(image, dtype=np.int64), 0, MAX16)
        alpha = np.full_like(grey, MAX16)
        return np.stack([grey, grey, grey, alpha], axis=-1)

    rgba = np.asarray(image, dtype=np.int64).reshape(image.height, image.width, 4) * CHANNEL_DIVISOR
    alpha = rgba[:, :, 3:]
    rgba[:, :, :3] = rgba[:, :, :3] * alpha // MAX16
    return rgba


def sample_pixels(image: Image.Image) -> np.ndarray:
    """Normalise every pixel to 8-bit RGBA. Returns a uint8 array of shape (rows, cols, 4)."""
    image = _normalise_mode(image)
    if image.width == 0 or image.height == 0:
        return np.zeros((0, image.width, 4), dtype=np.uint8)
    return normalise16(_rgba16(image))


def extract_pixels(stream: BinaryIO, width: int = 0) -> np.ndarray:
    image = _normalise_mode(decode(stream))
    image = resize_to_width(image, width)
    return sample_pixels(image)
