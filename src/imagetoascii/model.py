import numpy as np

# Maps a 16-bit channel [0, 65535] onto 8 bits [0, 255]
CHANNEL_DIVISOR = 257


def normalise16(channels: np.ndarray) -> np.ndarray:
    """Floor 16-bit channel values down to 8 bits."""
    return (channels // CHANNEL_DIVISOR).astype(np.uint8)


def brightness(pixels: np.ndarray) -> np.ndarray:
    """Unweighted integer average of R, G and B; alpha is ignored.

    Accepts a single (r, g, b, a) pixel or a grid of shape (rows, cols, 4).
    """
    rgb = np.asarray(pixels)[..., :3].astype(np.uint16)
    return rgb.sum(axis=-1) // 3
