class ImageToAsciiError(Exception):
    """Base class for failures that end a conversion."""


class UsageError(ImageToAsciiError):
    """Missing or malformed command-line arguments."""


class DecodeError(ImageToAsciiError):
    """The input is not a decodable image in a supported format."""


class ResizeError(ImageToAsciiError):
    """The image cannot be resized to the requested width."""


class EmptyImageError(ImageToAsciiError):
    """The image has no pixel rows to render."""
