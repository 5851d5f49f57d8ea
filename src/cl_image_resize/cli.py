"""Command line entry point: cl-image-resize."""

import argparse
import sys
from collections.abc import Sequence

from loguru import logger
from pydantic import ValidationError

from .common.schemas import BatchResizeParams
from .task import BatchResizeTask

VERBOSE_FORMAT = "{time:HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cl-image-resize",
        description="Resize JPEG and PNG images into an output directory.",
    )
    _ = parser.add_argument(
        "--outputDir",
        dest="output_dir",
        default="output",
        help="Directory for the resized images. Created if missing.",
    )
    _ = parser.add_argument(
        "--width",
        type=int,
        default=0,
        help="Target width. -1 (or 0) computes it from the height.",
    )
    _ = parser.add_argument(
        "--height",
        type=int,
        default=0,
        help="Target height. -1 (or 0) computes it from the width.",
    )
    _ = parser.add_argument(
        "--inputFiles",
        dest="input_files",
        default="",
        help="Images to convert, comma separated. Relative paths are resolved "
        + "against --baseDir.",
    )
    _ = parser.add_argument(
        "--baseDir",
        dest="base_dir",
        default="",
        help="Base directory for relative input files. Defaults to the working directory.",
    )
    _ = parser.add_argument(
        "--suffix",
        default="",
        help="String added to each output name, e.g. --suffix _resized: A01.jpg -> A01_resized.jpg",
    )
    _ = parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-stage details and timings.",
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    logger.remove()
    if verbose:
        _ = logger.add(sys.stderr, level="DEBUG", format=VERBOSE_FORMAT)
    else:
        _ = logger.add(sys.stderr, level="INFO", format="{message}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        params = BatchResizeParams(
            output_dir=args.output_dir,
            width=args.width,
            height=args.height,
            input_files=args.input_files,
            base_dir=args.base_dir,
            suffix=args.suffix,
        )
    except ValidationError as exc:
        for error in exc.errors():
            logger.error(str(error["msg"]).removeprefix("Value error, "))
        return 1

    _ = BatchResizeTask().run(params)
    return 0
