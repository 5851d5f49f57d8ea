"""Resize pipeline for a single image file."""

from pathlib import Path

from loguru import logger
from PIL import Image

from ..common.errors import (
    EncodeFailureError,
    InvalidDimensionsError,
    OutputFileCreateError,
    UnreadableSourceError,
)
from ..common.schemas import ResizeResult, TargetDimensions
from ..utils.image_formats import ImageFormat
from ..utils.profiling import timed
from .image_decode import decode_image
from .image_dimensions import compute_target_dimensions
from .output_naming import ensure_output_dir, output_file_name, remove_stale_output

# Catmull-Rom cubic (a = -0.5)
RESAMPLING = Image.Resampling.BICUBIC


def scale_image(img: Image.Image, size: TargetDimensions) -> Image.Image:
    """Scale `img` to exactly `size`, keeping the alpha channel."""
    return img.convert("RGBA").resize(size.as_tuple(), RESAMPLING)


def prepare_for_encoding(img: Image.Image, image_format: ImageFormat) -> Image.Image:
    """Pick the pixel mode the encoder writes.

    JPEG has no alpha channel. PNG keeps RGBA only when some pixel is
    not fully opaque.
    """
    if image_format is ImageFormat.JPEG:
        return img.convert("RGB")
    if img.mode == "RGBA" and img.getchannel("A").getextrema() == (255, 255):
        return img.convert("RGB")
    return img


@timed
def resize_image(
    *,
    input_path: str | Path,
    output_dir: str | Path,
    width: int = 0,
    height: int = 0,
    suffix: str = "",
) -> ResizeResult:
    """
    Resize one JPEG/PNG file and write it into `output_dir`.

    The output keeps the source format and file name, with `suffix`
    inserted before the extension. A file already at the output path is
    replaced. Nothing done before a failure is rolled back.

    Args:
        input_path: Path to the source image
        output_dir: Output directory, created (single level) if missing
        width: Target width, 0 = computed from height
        height: Target height, 0 = computed from width
        suffix: Optional file name suffix

    Returns:
        ResizeResult describing the written file

    Raises:
        UnreadableSourceError: If the source cannot be opened or read
        UnrecognizedFormatError: If the source is not a JPEG/PNG file
        UnsupportedFormatError: If the source is another image format
        DecodeFailureError: If the source pixel data is corrupt
        InvalidDimensionsError: If the target size has a zero side
        OutputDirCreateError: If the output directory cannot be created
        OutputFileRemoveError: If a stale output file cannot be removed
        OutputFileCreateError: If the output file cannot be created
        EncodeFailureError: If encoding the scaled image fails
    """
    input_path = Path(input_path)

    try:
        src = open(input_path, "rb")
    except OSError as exc:
        raise UnreadableSourceError(f"Failed to open {input_path}: {exc}") from exc
    with src:
        decoded = decode_image(src)

    source_width, source_height = decoded.width, decoded.height
    with decoded.image:
        target = compute_target_dimensions(
            source_width=source_width,
            source_height=source_height,
            width=width,
            height=height,
        )
        if target.is_empty:
            raise InvalidDimensionsError(
                f"Cannot resize {source_width}x{source_height} image to "
                + f"{target.width}x{target.height} (requested {width}x{height})"
            )
        logger.debug(
            f"Scaling {source_width}x{source_height} -> {target.width}x{target.height}"
        )
        scaled = scale_image(decoded.image, target)

    output_dir = ensure_output_dir(output_dir)
    output_path = output_dir / output_file_name(input_path.name, suffix)
    remove_stale_output(output_path)

    try:
        dst = open(output_path, "wb")
    except OSError as exc:
        raise OutputFileCreateError(f"Failed to create {output_path}: {exc}") from exc
    with dst:
        try:
            prepare_for_encoding(scaled, decoded.format).save(
                dst,
                format=decoded.format.pil_format,
                **decoded.format.save_options,
            )
        except (OSError, ValueError) as exc:
            raise EncodeFailureError(
                f"Failed to encode {decoded.format} image {output_path}: {exc}"
            ) from exc

    logger.info(f"Resized {input_path} -> {output_path} ({target.width}x{target.height})")

    return ResizeResult(
        input_path=str(input_path),
        output_path=str(output_path),
        format=decoded.format,
        source_width=source_width,
        source_height=source_height,
        width=target.width,
        height=target.height,
    )
