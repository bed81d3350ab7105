import io

import pytest
from PIL import Image


def png_bytes(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def write_image(tmp_path):
    """Save an image into tmp_path and return its path."""

    def _write(image: Image.Image, name: str = "input.png", format: str = "PNG"):
        path = tmp_path / name
        image.save(path, format=format)
        return path

    return _write
