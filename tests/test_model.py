import numpy as np

from imagetoascii.model import brightness, normalise16


def test_normalise16_floors():
    channels = np.array([65535, 0, 257, 256, 513, 514])
    assert normalise16(channels).tolist() == [255, 0, 1, 0, 1, 2]


def test_normalise16_returns_bytes():
    assert normalise16(np.array([65535])).dtype == np.uint8


def test_brightness_ignores_alpha():
    assert brightness((30, 60, 90, 0)) == 60
    assert brightness((30, 60, 90, 255)) == 60


def test_brightness_uses_integer_division():
    assert brightness((1, 1, 0, 255)) == 0
    assert brightness((255, 255, 254, 255)) == 254


def test_brightness_does_not_overflow():
    assert brightness(np.array([255, 255, 255, 255], dtype=np.uint8)) == 255


def test_brightness_of_grid():
    grid = np.zeros((2, 3, 4), dtype=np.uint8)
    grid[1, 2] = (10, 20, 30, 40)
    result = brightness(grid)
    assert result.shape == (2, 3)
    assert result[1, 2] == 20
    assert result[0, 0] == 0
