"""
Capture output layout.

Organizes element captures as:
<document dir>/
└── images/
    └── <document base name>/
        ├── poster-dark.png
        └── visual-prng.png
"""
import math
from pathlib import Path
from typing import Tuple, Union

from PIL import Image

from .targets import CaptureTarget


def get_output_dir(target: CaptureTarget, output_dir: str = "images") -> Path:
    """Directory holding every capture of one document."""
    return target.path.parent / output_dir / target.base_name


def ensure_output_dir(target: CaptureTarget, output_dir: str = "images") -> Path:
    """Create the capture directory of a document if needed and return it."""
    out = get_output_dir(target, output_dir)
    out.mkdir(parents=True, exist_ok=True)
    return out


def get_output_path(output_dir: Path, element_id: str) -> Path:
    """PNG path of one element capture."""
    return Path(output_dir) / f"{element_id}.png"


def expected_size(width: float, height: float, scale: float) -> Tuple[int, int]:
    """Pixel size of a capture for a CSS box at the given device scale.

    Halves round up, so a 100.25px box at 2x reports 201 pixels.
    """
    return math.floor(width * scale + 0.5), math.floor(height * scale + 0.5)


def read_image_size(path: Union[str, Path]) -> Tuple[int, int]:
    """Read back the pixel size of a written capture."""
    with Image.open(path) as img:
        return img.size
