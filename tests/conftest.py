import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import long2pdf
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


def _gradient(width: int, height: int) -> Image.Image:
    """RGB image whose row index is encoded in the pixel values."""
    img = Image.new("RGB", (width, height))
    img.putdata([
        (y % 256, (y // 256) % 256, x % 256)
        for y in range(height)
        for x in range(width)
    ])
    return img


# Common test fixtures
@pytest.fixture
def gradient_factory():
    """Factory to create row-encoded test images."""
    return _gradient


@pytest.fixture
def long_image() -> Image.Image:
    """100px wide, 400px tall: strips of 141 rows, 3 pages."""
    return _gradient(100, 400)


@pytest.fixture
def long_image_path(tmp_path: Path, long_image: Image.Image) -> Path:
    """Write the long image to disk as PNG."""
    img_path = tmp_path / "long.png"
    long_image.save(img_path)
    return img_path
