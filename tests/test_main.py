from __future__ import annotations

import pytest
from PIL import Image

from appicon.main import main


def test_main_single_size_transparent(square_png, output_dir, capsys):
    code = main([str(square_png), str(output_dir), "--size", "128", "--transparent"])

    assert code == 0
    out = capsys.readouterr().out
    assert "logo-128.png" in out
    with Image.open(output_dir / "logo-128.png") as img:
        assert img.size == (128, 128)
        assert img.getpixel((0, 0))[3] == 0


def test_main_background(square_png, output_dir):
    assert main([str(square_png), str(output_dir), "-s", "256", "-b", "black"]) == 0
    with Image.open(output_dir / "logo-256.png") as img:
        assert img.getpixel((0, 0)) == (0, 0, 0, 255)


def test_main_invalid_size(square_png, output_dir, capsys):
    assert main([str(square_png), str(output_dir), "--size", "0"]) == 2
    assert "ERROR" in capsys.readouterr().err
    assert not output_dir.exists()


def test_main_missing_input(tmp_path, output_dir):
    assert main([str(tmp_path / "missing.png"), str(output_dir)]) == 1
    assert not output_dir.exists()


def test_main_background_and_transparent_are_exclusive(square_png, output_dir):
    with pytest.raises(SystemExit) as excinfo:
        main([str(square_png), str(output_dir), "-b", "red", "-t"])
    assert excinfo.value.code == 2
