"""Resize algorithms: decoding, sizing, naming and the single-file pipeline."""

from .image_decode import DecodedImage, PrefixReplayReader, decode_image
from .image_dimensions import compute_target_dimensions
from .image_resize import resize_image
from .output_naming import output_file_name

__all__ = [
    "DecodedImage",
    "PrefixReplayReader",
    "decode_image",
    "compute_target_dimensions",
    "output_file_name",
    "resize_image",
]
