from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)


@pytest.fixture
def square_png(tmp_path: Path) -> Path:
    path = tmp_path / "logo.png"
    Image.new("RGBA", (300, 300), RED).save(path)
    return path


@pytest.fixture
def wide_png(tmp_path: Path) -> Path:
    """400x200, red with a green vertical band in columns 150..249."""
    path = tmp_path / "wide.png"
    img = Image.new("RGBA", (400, 200), RED)
    img.paste(Image.new("RGBA", (100, 200), GREEN), (150, 0))
    img.save(path)
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "out" / "icons"
