"""Raster output for sprite sheets via an external SVG-to-PNG converter (rsvg-convert)."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONVERTER = "rsvg-convert"


class ExternalToolError(RuntimeError):
    """Raised when the raster converter is missing or exits non-zero."""


def png_paths(file_path: Path) -> tuple[Path, Path]:
    """(<stem>.png, <stem>@2x.png) next to the SVG."""
    return file_path.with_suffix(".png"), file_path.with_name(f"{file_path.stem}@2x.png")


def _convert(converter: str, file_path: Path, scale: int, out_path: Path) -> None:
    cmd = [converter, "-x", str(scale), "-y", str(scale), str(file_path)]
    logger.debug("Running %s > %s", " ".join(cmd), out_path)
    with out_path.open("wb") as out:
        try:
            subprocess.run(cmd, stdout=out, stderr=subprocess.PIPE, check=True)
        except FileNotFoundError as e:
            raise ExternalToolError(f"Raster converter not found: {converter}") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
            raise ExternalToolError(
                f"{converter} exited with status {e.returncode} for {file_path}: {stderr}"
            ) from e


def create_screenshot(
    file_path: Path,
    retina: bool = True,
    converter: str = DEFAULT_CONVERTER,
) -> list[Path]:
    """
    Render file_path to PNG at 2x scale, and at 4x (@2x.png) when retina is set.

    Blocks until the converter exits; there is no timeout. Files written before
    a failure are left on disk.
    """
    png, png_retina = png_paths(file_path)
    _convert(converter, file_path, 2, png)
    written = [png]
    if retina:
        _convert(converter, file_path, 4, png_retina)
        written.append(png_retina)
    return written
