"""Solid-colour PNG swatches for a resolved colour."""

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from toggle_florp.core.types import Color

logger = logging.getLogger(__name__)


def render_swatch(colour: Color, size: int = 64) -> Image.Image:
    """Return a size x size RGB image filled with colour."""
    if size < 1:
        raise ValueError(f'swatch size must be positive, got {size}')
    arr = np.empty((size, size, 3), dtype=np.uint8)
    arr[:, :] = colour.as_tuple()
    return Image.fromarray(arr)


def save_swatch(colour: Color, path: str | Path, size: int = 64) -> Path:
    """Write a PNG swatch to path and return it. Raises OSError on failure."""
    out = Path(path)
    render_swatch(colour, size).save(out, format='PNG')
    logger.info('wrote %dx%d swatch to %s', size, size, out)
    return out
