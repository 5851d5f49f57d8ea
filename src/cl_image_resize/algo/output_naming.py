"""Output path placement: file naming, directory creation, stale file removal."""

from pathlib import Path

from loguru import logger

from ..common.errors import OutputDirCreateError, OutputFileRemoveError


def output_file_name(file_name: str, suffix: str = "") -> str:
    """Insert `suffix` before the last extension of `file_name`.

    The legacy rule, which joined every dot-separated segment and appended
    `<suffix>.<last segment>`, is deliberately not reproduced.

    >>> output_file_name("A01.jpg", "_resized")
    'A01_resized.jpg'
    >>> output_file_name("scan.2024.png", "_small")
    'scan.2024_small.png'
    >>> output_file_name("README", "_x")
    'README_x'
    """
    if not suffix:
        return file_name

    stem, dot, extension = file_name.rpartition(".")
    if not dot:
        return file_name + suffix
    return f"{stem}{suffix}.{extension}"


def ensure_output_dir(output_dir: str | Path) -> Path:
    """Create `output_dir` if it is missing.

    Only the last path component is created; a missing parent is an error.
    """
    output_dir = Path(output_dir)
    if output_dir.exists():
        return output_dir

    try:
        output_dir.mkdir(exist_ok=True)
    except OSError as exc:
        raise OutputDirCreateError(
            f"Failed to create output directory {output_dir}: {exc}"
        ) from exc

    logger.debug(f"Created output directory {output_dir}")
    return output_dir


def remove_stale_output(output_path: str | Path) -> None:
    """Delete a file left at `output_path` by an earlier run."""
    output_path = Path(output_path)
    if not output_path.exists():
        return

    try:
        output_path.unlink()
    except OSError as exc:
        raise OutputFileRemoveError(
            f"Failed to remove existing output file {output_path}: {exc}"
        ) from exc

    logger.debug(f"Removed existing output file {output_path}")
