import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

from imagetoascii.converter import image_to_ascii
from imagetoascii.errors import ImageToAsciiError, UsageError

OUTPUT_PATH = Path("ascii.txt")

log = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(f"{message}. usage: imagetoascii image.png [width]")


@dataclass
class Invocation:
    path: Path
    width: int = 0
    verbose: bool = False
    ignored: list[str] = field(default_factory=list)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="imagetoascii", description="Render an image as ASCII art into ascii.txt")
    parser.add_argument("image", type=Path, help="Path to input image")
    parser.add_argument(
        "width", nargs="?", type=int, default=0, help="Resize to this many columns first (default: native width)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log each pipeline step")
    return parser


def parse_args(argv: list[str]) -> Invocation:
    # Anything after the width is ignored
    args, ignored = build_parser().parse_known_args(argv)
    return Invocation(path=args.image, width=args.width, verbose=args.verbose, ignored=ignored)


def run(invocation: Invocation, output: Path = OUTPUT_PATH) -> None:
    text = image_to_ascii(invocation.path, invocation.width)
    log.debug("writing %d bytes to %s", len(text.encode("utf-8")), output)
    output.write_text(text, encoding="utf-8", newline="")


def main(argv: list[str] | None = None):
    try:
        invocation = parse_args(sys.argv[1:] if argv is None else argv)
        logging.basicConfig(level=logging.DEBUG if invocation.verbose else logging.WARNING, stream=sys.stderr)
        if invocation.ignored:
            log.debug("ignoring extra arguments: %s", " ".join(invocation.ignored))
        run(invocation)
    except (ImageToAsciiError, OSError) as exc:
        print(f"imagetoascii: {exc}", file=sys.stderr)
        sys.exit(1)
