from enum import StrEnum

import magic

from ..common.errors import UnrecognizedFormatError, UnsupportedFormatError

# Enough for libmagic to tell JPEG/PNG apart from anything else.
SNIFF_BYTES = 2048


class ImageFormat(StrEnum):
    JPEG = "jpeg"
    PNG = "png"

    @classmethod
    def from_mime(cls, mime_type: str) -> "ImageFormat | None":
        if mime_type in ("image/jpeg", "image/pjpeg"):
            return ImageFormat.JPEG
        elif mime_type == "image/png":
            return ImageFormat.PNG
        else:
            return None

    @property
    def pil_format(self) -> str:
        """Pillow format name for this tag."""
        return self.value.upper()

    @property
    def save_options(self) -> dict[str, object]:
        """Encoder options: JPEG at maximum quality, PNG is always lossless."""
        if self is ImageFormat.JPEG:
            return {"quality": 100}
        return {}


def determine_mime(prefix: bytes) -> str:
    mime = magic.Magic(mime=True)

    file_type = mime.from_buffer(prefix)
    if not file_type:
        file_type = "application/octet-stream"
    return file_type


def sniff_format(prefix: bytes) -> ImageFormat:
    """
    Identify the image container format from the first bytes of a file.

    Args:
        prefix: Leading bytes of the file (up to SNIFF_BYTES)

    Returns:
        The detected ImageFormat

    Raises:
        UnrecognizedFormatError: If the prefix is empty or not an image header
        UnsupportedFormatError: If the prefix is an image other than JPEG/PNG
    """
    if not prefix:
        raise UnrecognizedFormatError("Unrecognized image format: empty input")

    mime_type = determine_mime(prefix)
    image_format = ImageFormat.from_mime(mime_type)
    if image_format is None:
        if mime_type.startswith("image/"):
            raise UnsupportedFormatError(
                f"Unsupported image format {mime_type}: only jpeg and png are accepted"
            )
        raise UnrecognizedFormatError(f"Unrecognized image format ({mime_type})")
    return image_format
