"""Test configuration and fixtures for cl_image_resize.

This module provides:
- Synthetic images generated with Pillow (JPEG, PNG with alpha, GIF, BMP)
- Non-image inputs (text, empty file)
- Output directory and loguru capture fixtures
"""

import struct
import sys
import zlib
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageDraw

# ============================================================================
# Helpers
# ============================================================================


def draw_pattern(img: Image.Image) -> Image.Image:
    """Grid lines and a circle, so scaling has something to interpolate."""
    draw = ImageDraw.Draw(img)
    width, height = img.size

    for i in range(0, width, 50):
        draw.line([(i, 0), (i, height)], fill=(255, 255, 255), width=2)
    for i in range(0, height, 50):
        draw.line([(0, i), (width, i)], fill=(255, 255, 255), width=2)

    draw.ellipse(
        [width * 3 // 8, height // 3, width * 5 // 8, height * 2 // 3],
        fill=(200, 100, 100),
    )
    return img


class MockProgressCallback:
    """Mock progress callback for testing."""

    def __init__(self) -> None:
        self.calls: list[int] = []

    def __call__(self, progress: int) -> None:
        self.calls.append(progress)


# ============================================================================
# Image Fixtures
# ============================================================================


@pytest.fixture
def synthetic_image(tmp_path: Path) -> Path:
    """800x600 JPEG."""
    output_path = tmp_path / "synthetic.jpg"

    img = draw_pattern(Image.new("RGB", (800, 600), color=(73, 109, 137)))
    img.save(output_path, "JPEG", quality=85)

    return output_path


@pytest.fixture
def synthetic_png(tmp_path: Path) -> Path:
    """640x480 RGBA PNG with a transparent border."""
    output_path = tmp_path / "synthetic.png"

    img = Image.new("RGBA", (640, 480), color=(0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rectangle([40, 40, 600, 440], fill=(73, 109, 137, 255))
    draw.ellipse([220, 140, 420, 340], fill=(200, 100, 100, 128))
    img.save(output_path, "PNG")

    return output_path


@pytest.fixture
def opaque_png(tmp_path: Path) -> Path:
    """300x200 RGB PNG."""
    output_path = tmp_path / "opaque.png"

    img = draw_pattern(Image.new("RGB", (300, 200), color=(20, 160, 90)))
    img.save(output_path, "PNG")

    return output_path


@pytest.fixture
def gif_image(tmp_path: Path) -> Path:
    output_path = tmp_path / "animation.gif"
    Image.new("RGB", (64, 64), color=(255, 0, 0)).save(output_path, "GIF")
    return output_path


@pytest.fixture
def bmp_image(tmp_path: Path) -> Path:
    output_path = tmp_path / "bitmap.bmp"
    Image.new("RGB", (64, 64), color=(0, 0, 255)).save(output_path, "BMP")
    return output_path


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    output_path = tmp_path / "notes.jpg"
    _ = output_path.write_text("These are not the pixels you are looking for.\n" * 10)
    return output_path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    output_path = tmp_path / "empty.png"
    output_path.touch()
    return output_path


# ============================================================================
# Output / Logging Fixtures
# ============================================================================


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Output directory path that does not exist yet."""
    return tmp_path / "output"


@pytest.fixture
def mock_progress_callback() -> MockProgressCallback:
    return MockProgressCallback()


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def restore_logger() -> Iterator[None]:
    """Reset loguru sinks after code that reconfigures them."""
    yield
    logger.remove()
    _ = logger.add(sys.stderr)


def png_chunk(chunk_type: bytes, data: bytes) -> bytes:
    return (
        struct.pack(">I", len(data))
        + chunk_type
        + data
        + struct.pack(">I", zlib.crc32(chunk_type + data) & 0xFFFFFFFF)
    )


@pytest.fixture
def oversized_png(tmp_path: Path) -> Path:
    """Small PNG whose header claims 20000x20000 pixels."""
    output_path = tmp_path / "oversized.png"

    ihdr = struct.pack(">IIBBBBB", 20000, 20000, 8, 2, 0, 0, 0)
    _ = output_path.write_bytes(
        b"\x89PNG\r\n\x1a\n"
        + png_chunk(b"IHDR", ihdr)
        + png_chunk(b"IDAT", zlib.compress(b"\x00" * 64))
        + png_chunk(b"IEND", b"")
    )
    return output_path
