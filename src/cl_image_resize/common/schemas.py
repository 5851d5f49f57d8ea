"""Pydantic schemas for resize parameters and results."""

from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..utils.image_formats import ImageFormat

# ─────────────────────────────────────────────────────────────
# Single image
# ─────────────────────────────────────────────────────────────


class TargetDimensions(BaseModel):
    """Final width/height of a scaled image.

    A side of 0 means the size could not be resolved (nothing requested,
    or the aspect computation truncated to zero).
    """

    width: int = Field(ge=0, description="Target width in pixels")
    height: int = Field(ge=0, description="Target height in pixels")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)


class ResizeResult(BaseModel):
    """Outcome of one successful resize_image() call."""

    input_path: str
    output_path: str
    format: ImageFormat
    source_width: int
    source_height: int
    width: int
    height: int


# ─────────────────────────────────────────────────────────────
# Batch
# ─────────────────────────────────────────────────────────────


class BatchResizeParams(BaseModel):
    """Parameters for a batch resize run.

    Attributes:
        output_dir: Directory receiving the resized files (created if missing)
        width: Target width, 0 (or any value below 1) = auto from height
        height: Target height, 0 (or any value below 1) = auto from width
        input_files: Input entries, a list or a comma-separated string
        base_dir: Directory used to resolve relative entries ("" = cwd)
        suffix: String inserted before the extension of each output name
    """

    output_dir: str = Field(default="output", description="Output directory")
    width: int = Field(default=0, description="Target width (0 = auto)")
    height: int = Field(default=0, description="Target height (0 = auto)")
    input_files: list[str] = Field(description="Input image files")
    base_dir: str = Field(default="", description="Base directory for relative inputs")
    suffix: str = Field(default="", description="Output file name suffix")

    @field_validator("input_files", mode="before")
    @classmethod
    def split_input_files(cls, v: object) -> object:
        """Accept the comma-separated form used on the command line."""
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list):
            return [str(entry).strip() for entry in v if str(entry).strip()]
        return v

    @field_validator("input_files")
    @classmethod
    def validate_input_files_not_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("At least one input file is required")
        return v

    @field_validator("width", "height")
    @classmethod
    def normalize_auto(cls, v: int) -> int:
        """Values below 1 (the documented -1 included) mean auto."""
        return v if v > 0 else 0

    @model_validator(mode="after")
    def validate_dimensions(self) -> "BatchResizeParams":
        """Ensure at least one target dimension is given."""
        if self.width < 1 and self.height < 1:
            raise ValueError("Either width or height must be an integer of 1 or more")
        return self


class FileOutcome(BaseModel):
    """Per-file record of a batch run."""

    source: str = Field(description="Input entry as given by the caller")
    resolved_path: str
    status: Literal["ok", "error"]
    output_path: str | None = None
    error_kind: str | None = None
    error: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")


class BatchResizeOutput(BaseModel):
    files: list[FileOutcome] = Field(default_factory=list)

    @property
    def processed(self) -> int:
        return sum(1 for f in self.files if f.status == "ok")

    @property
    def failed(self) -> int:
        return sum(1 for f in self.files if f.status == "error")
