"""Tagged exceptions raised by the resize pipeline."""

from typing import ClassVar

from typing_extensions import override


class ResizeError(Exception):
    """
    Base class for every per-file failure of the resize pipeline.

    `kind` is a stable tag that callers can report or match on without
    inspecting the message.
    """

    kind: ClassVar[str] = "ResizeError"

    def __init__(self, message: str = "An unknown resize error occurred."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return self.message


class UnreadableSourceError(ResizeError):
    kind: ClassVar[str] = "UnreadableSource"


class UnrecognizedFormatError(ResizeError):
    kind: ClassVar[str] = "UnrecognizedFormat"


class UnsupportedFormatError(ResizeError):
    kind: ClassVar[str] = "UnsupportedFormat"


class DecodeFailureError(ResizeError):
    kind: ClassVar[str] = "DecodeFailure"


class InvalidDimensionsError(ResizeError):
    kind: ClassVar[str] = "InvalidDimensions"


class OutputDirCreateError(ResizeError):
    kind: ClassVar[str] = "OutputDirCreateFailure"


class OutputFileRemoveError(ResizeError):
    kind: ClassVar[str] = "OutputFileRemoveFailure"


class OutputFileCreateError(ResizeError):
    kind: ClassVar[str] = "OutputFileCreateFailure"


class EncodeFailureError(ResizeError):
    kind: ClassVar[str] = "EncodeFailure"
