"""Rasterize a finished SVG document.

cairosvg renders PNG at the canvas size; other raster formats are
transcoded from that PNG with Pillow.
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path

from svg_codeshot.exceptions import RasterizeError
from svg_codeshot.model import CanvasDimensions

logger = logging.getLogger(__name__)

# Output suffix -> Pillow format name
RASTER_FORMATS = {
    ".png": "PNG",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".webp": "WEBP",
}


def is_raster_path(path: Path) -> bool:
    return path.suffix.lower() in RASTER_FORMATS


def rasterize(svg: bytes, dimensions: CanvasDimensions, fmt: str = "PNG") -> bytes:
    """Render ``svg`` to image bytes of exactly ``dimensions``.

    Raises:
        RasterizeError: If cairosvg or Pillow cannot produce the image.
    """
    try:
        import cairosvg
    except (ImportError, OSError) as e:
        # OSError: the cairo shared library itself is missing
        raise RasterizeError("cairosvg is not available", details={"error": str(e)}) from e

    try:
        png = cairosvg.svg2png(
            bytestring=svg,
            output_width=dimensions.width,
            output_height=dimensions.height,
        )
    except Exception as e:
        raise RasterizeError("SVG rendering failed", details={"error": str(e)}) from e

    if fmt == "PNG":
        return png

    from PIL import Image

    try:
        with Image.open(BytesIO(png)) as image:
            if fmt == "JPEG":
                image = image.convert("RGB")
            buffer = BytesIO()
            image.save(buffer, format=fmt)
    except (OSError, ValueError) as e:
        raise RasterizeError(f"{fmt} encoding failed", details={"error": str(e)}) from e
    return buffer.getvalue()


def write_raster(svg: bytes, dimensions: CanvasDimensions, path: Path) -> None:
    fmt = RASTER_FORMATS.get(path.suffix.lower())
    if fmt is None:
        raise RasterizeError(f"unsupported raster format '{path.suffix}'")
    data = rasterize(svg, dimensions, fmt)
    path.write_bytes(data)
    logger.info("Wrote %s (%d bytes, %s)", path, len(data), dimensions)
