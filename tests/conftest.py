from pathlib import Path
from typing import List, Tuple

import numpy as np
import pytest
from PIL import Image

# Each terminal palette colour nudged by a few units per channel, in table order.
OFF_TERMINAL_COLOURS: List[Tuple[int, int, int]] = [
    (3, 2, 1),
    (168, 4, 2),
    (2, 170, 5),
    (126, 130, 3),
    (1, 3, 168),
    (171, 2, 166),
    (3, 168, 172),
    (168, 171, 169),
    (87, 84, 86),
    (252, 3, 2),
    (4, 253, 1),
    (251, 252, 4),
    (2, 3, 250),
    (253, 1, 252),
    (3, 252, 253),
    (252, 253, 251),
]


def solid(colour, size=(10, 10), mode="RGB") -> Image.Image:
    return Image.new(mode, size, colour)


@pytest.fixture
def red_png(tmp_path: Path) -> Path:
    path = tmp_path / "red.png"
    solid((255, 0, 0)).save(path)
    return path


@pytest.fixture
def noise_png(tmp_path: Path) -> Path:
    rng = np.random.default_rng(7)
    arr = rng.integers(0, 256, size=(48, 48, 3), dtype=np.uint8)
    path = tmp_path / "noise.png"
    Image.fromarray(arr).save(path)
    return path


@pytest.fixture
def noise_jpg(tmp_path: Path) -> Path:
    rng = np.random.default_rng(11)
    arr = rng.integers(0, 256, size=(32, 32, 3), dtype=np.uint8)
    path = tmp_path / "noise.jpg"
    Image.fromarray(arr).save(path, quality=90)
    return path


@pytest.fixture
def green_tiff(tmp_path: Path) -> Path:
    path = tmp_path / "green.tiff"
    solid((0, 255, 0)).save(path)
    return path


@pytest.fixture
def yellow_gif(tmp_path: Path) -> Path:
    path = tmp_path / "yellow.gif"
    solid((255, 255, 0)).save(path)
    return path


def _save_animation(path: Path, colours, size=(16, 16)) -> Path:
    frames = [solid(c, size) for c in colours]
    frames[0].save(
        path,
        save_all=True,
        append_images=frames[1:],
        duration=200,
        loop=0,
    )
    return path


@pytest.fixture
def animated_squares_gif(tmp_path: Path) -> Path:
    colours = [(255, 0, 0), (0, 0, 255)] * 4
    return _save_animation(tmp_path / "animated_squares.gif", colours)


@pytest.fixture
def animated_upper_gif(tmp_path: Path) -> Path:
    colours = [(255, 0, 0), (0, 0, 255)] * 4
    return _save_animation(tmp_path / "animated_upper_squares.GIF", colours)


@pytest.fixture
def terminal_colours_png(tmp_path: Path) -> Path:
    """4x4 grid of 8x8 blocks, one block per nudged terminal colour."""
    arr = np.zeros((32, 32, 3), dtype=np.uint8)
    for i, colour in enumerate(OFF_TERMINAL_COLOURS):
        y, x = divmod(i, 4)
        arr[y * 8 : (y + 1) * 8, x * 8 : (x + 1) * 8] = colour
    path = tmp_path / "terminal_colours.png"
    Image.fromarray(arr).save(path)
    return path


@pytest.fixture
def malformed_png(tmp_path: Path) -> Path:
    path = tmp_path / "malformed.txt.png"
    path.write_text("This is a text file, not a PNG.\n")
    return path


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    path = tmp_path / "README.md"
    path.write_text("# not an image\n")
    return path


@pytest.fixture
def pcx_file(tmp_path: Path) -> Path:
    path = tmp_path / "purple.pcx"
    solid((128, 0, 128)).save(path)
    return path


@pytest.fixture
def tiny_png(tmp_path: Path) -> Path:
    path = tmp_path / "tiny.png"
    arr = np.array([[(255, 0, 0), (0, 0, 255)], [(0, 0, 255), (255, 0, 0)]], dtype=np.uint8)
    Image.fromarray(arr).save(path)
    return path


@pytest.fixture
def grey16_png(tmp_path: Path) -> Path:
    """16-bit greyscale PNG at mid-grey (opens as mode I;16)."""
    path = tmp_path / "grey16.png"
    Image.fromarray(np.full((8, 8), 32768, dtype=np.uint16)).save(path)
    return path


@pytest.fixture
def rotated_png(tmp_path: Path) -> Path:
    """Two pixels, red then blue, tagged with EXIF orientation 3 (rotate 180)."""
    path = tmp_path / "rotated.png"
    arr = np.array([[(255, 0, 0), (0, 0, 255)]], dtype=np.uint8)
    exif = Image.Exif()
    exif[0x0112] = 3
    Image.fromarray(arr).save(path, exif=exif)
    return path
