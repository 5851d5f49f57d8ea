"""Two-phase image decoding: sniff a buffered prefix, then decode the whole stream."""

import io
from typing import BinaryIO, NamedTuple

from loguru import logger
from PIL import Image
from typing_extensions import override

from ..common.errors import DecodeFailureError, UnreadableSourceError, UnrecognizedFormatError
from ..utils.image_formats import SNIFF_BYTES, ImageFormat, sniff_format


class DecodedImage(NamedTuple):
    format: ImageFormat
    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


class PrefixReplayReader(io.RawIOBase):
    """
    Read-only stream yielding an already-read prefix, then the rest of `stream`.

    The reader is not seekable; it does not own `stream` and never closes it.
    """

    def __init__(self, prefix: bytes, stream: BinaryIO):
        super().__init__()
        self._prefix: bytes = prefix
        self._offset: int = 0
        self._stream: BinaryIO = stream

    @override
    def readable(self) -> bool:
        return True

    @override
    def readinto(self, buffer) -> int:
        if self._offset < len(self._prefix):
            chunk = self._prefix[self._offset : self._offset + len(buffer)]
            self._offset += len(chunk)
        else:
            try:
                chunk = self._stream.read(len(buffer))
            except OSError as exc:
                raise UnreadableSourceError(f"Failed to read image: {exc}") from exc
        buffer[: len(chunk)] = chunk
        return len(chunk)


def decode_image(stream: BinaryIO) -> DecodedImage:
    """
    Detect the format of `stream` and decode its pixel data.

    The header bytes used for detection are replayed in front of the
    remaining stream, so the decoder sees the file from its first byte.

    Args:
        stream: Binary stream positioned at the start of the file

    Returns:
        DecodedImage with the detected format and a fully loaded image

    Raises:
        UnreadableSourceError: If reading the stream fails
        UnrecognizedFormatError: If the header is not a JPEG/PNG header
        UnsupportedFormatError: If the header is another image format
        DecodeFailureError: If the header is valid but the pixel data is not,
            or the image exceeds the decompression bomb limit
    """
    try:
        prefix = stream.read(SNIFF_BYTES)
    except OSError as exc:
        raise UnreadableSourceError(f"Failed to read image header: {exc}") from exc

    image_format = sniff_format(prefix)
    logger.debug(f"Detected {image_format} header")

    reader = PrefixReplayReader(prefix, stream)
    try:
        img = Image.open(reader, formats=[image_format.pil_format])
    except Image.DecompressionBombError as exc:
        raise DecodeFailureError(f"Failed to decode {image_format} image: {exc}") from exc
    except OSError as exc:
        raise UnrecognizedFormatError(
            f"Unrecognized image format: {image_format} header could not be parsed"
        ) from exc

    try:
        img.load()
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
        img.close()
        raise DecodeFailureError(f"Failed to decode {image_format} image: {exc}") from exc

    return DecodedImage(format=image_format, image=img)
