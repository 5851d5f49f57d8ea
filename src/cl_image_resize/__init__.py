"""cl_image_resize - Batch JPEG/PNG resizing."""

from .algo.image_resize import resize_image
from .common.errors import ResizeError
from .common.schemas import BatchResizeOutput, BatchResizeParams, ResizeResult, TargetDimensions
from .task import BatchResizeTask, resolve_input_path
from .utils.image_formats import ImageFormat

__version__ = "0.1.0"

__all__ = [
    "resize_image",
    "ResizeError",
    "ResizeResult",
    "TargetDimensions",
    "BatchResizeParams",
    "BatchResizeOutput",
    "BatchResizeTask",
    "ImageFormat",
    "resolve_input_path",
    "__version__",
]
