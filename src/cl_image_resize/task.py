"""Batch resize driver."""

import os
from typing import Callable

from loguru import logger

from .algo.image_resize import resize_image
from .common.errors import ResizeError
from .common.schemas import BatchResizeOutput, BatchResizeParams, FileOutcome


def resolve_input_path(entry: str, base_dir: str = "") -> str:
    """Join `entry` onto `base_dir` unless it is already absolute."""
    if base_dir and not os.path.isabs(entry):
        return os.path.join(base_dir, entry)
    return entry


class BatchResizeTask:
    """Resizes every input file of a batch, one at a time.

    A failing file is logged and recorded; the remaining files are still
    processed.
    """

    def run(
        self,
        params: BatchResizeParams,
        progress_callback: Callable[[int], None] | None = None,
    ) -> BatchResizeOutput:
        output = BatchResizeOutput()
        total_files = len(params.input_files)

        for index, entry in enumerate(params.input_files):
            input_path = resolve_input_path(entry, params.base_dir)

            try:
                result = resize_image(
                    input_path=input_path,
                    output_dir=params.output_dir,
                    width=params.width,
                    height=params.height,
                    suffix=params.suffix,
                )
            except ResizeError as exc:
                logger.error(f"[ERROR] {entry}: {exc}")
                output.files.append(
                    FileOutcome(
                        source=entry,
                        resolved_path=input_path,
                        status="error",
                        error_kind=exc.kind,
                        error=str(exc),
                    )
                )
            else:
                output.files.append(
                    FileOutcome(
                        source=entry,
                        resolved_path=input_path,
                        status="ok",
                        output_path=result.output_path,
                    )
                )

            if progress_callback:
                progress = int((index + 1) / total_files * 100)
                progress_callback(progress)

        logger.debug(f"Batch done: {output.processed} resized, {output.failed} failed")
        return output
