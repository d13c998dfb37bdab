from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from appicon.errors import InputNotFoundError, InputPermissionError, ProcessingError
from appicon.services import image_service as image_service_module
from appicon.services.image_service import ImageService

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)


@pytest.fixture
def service() -> ImageService:
    return ImageService()


def test_load_image_metadata(service, wide_png):
    data = service.load_image(wide_png)
    assert data.path == wide_png
    assert data.pil_image.mode == "RGBA"
    assert (data.width, data.height) == (400, 200)


def test_load_jpeg_converts_to_rgba(service, tmp_path):
    path = tmp_path / "photo.jpg"
    Image.new("RGB", (50, 40), (200, 100, 50)).save(path, "JPEG")
    data = service.load_image(path)
    assert data.pil_image.mode == "RGBA"
    assert data.pil_image.size == (50, 40)


def test_load_missing_file(service, tmp_path):
    with pytest.raises(InputNotFoundError):
        service.load_image(tmp_path / "missing.png")


def test_load_directory(service, tmp_path):
    with pytest.raises(FileNotFoundError):
        service.load_image(tmp_path)


def test_load_not_an_image(service, tmp_path):
    path = tmp_path / "fake.png"
    path.write_text("definitely not a png")
    with pytest.raises(ProcessingError):
        service.load_image(path)


def test_fit_cover_crops_center(service, wide_png):
    image = service.load_image(wide_png).pil_image
    out = service.fit_cover(image, 100)

    assert out.size == (100, 100)
    # the green band sits in the middle of the crop, red remains at the sides
    assert out.getpixel((50, 50)) == GREEN
    assert out.getpixel((5, 50)) == RED
    assert out.getpixel((95, 50)) == RED


def test_fit_cover_tall_image(service):
    tall = Image.new("RGBA", (120, 360), RED)
    assert service.fit_cover(tall, 64).size == (64, 64)


def test_output_path_strips_extension(service, tmp_path):
    assert service.output_path("/a/b/my.logo.png", tmp_path, 128) == tmp_path / "my.logo-128.png"
    assert service.output_path(Path("icon"), tmp_path, 512) == tmp_path / "icon-512.png"


def test_load_unreadable_file(service, square_png, monkeypatch):
    monkeypatch.setattr(image_service_module.os, "access", lambda path, mode: False)
    with pytest.raises(InputPermissionError) as excinfo:
        service.load_image(square_png)
    assert isinstance(excinfo.value, PermissionError)


def test_encode_and_write_png(service, tmp_path):
    data = service.encode_png(Image.new("RGBA", (16, 16), RED))
    assert data.startswith(b"\x89PNG\r\n\x1a\n")

    path = service.write_png(data, tmp_path / "x.png")
    with Image.open(path) as img:
        assert img.format == "PNG"
        assert img.size == (16, 16)
        assert img.getpixel((8, 8)) == RED
