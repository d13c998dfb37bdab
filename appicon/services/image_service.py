"""Загрузка, масштабирование и сохранение изображений.

Принципы:
- SRP: класс отвечает только за ввод-вывод и геометрию изображения.
- Маскирование и композиция вынесены в `MaskService`.
"""
from __future__ import annotations

import os
from io import BytesIO
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from appicon.errors import InputNotFoundError, InputPermissionError, ProcessingError
from appicon.models.icon_model import PNG_COMPRESS_LEVEL, ImageData


class ImageService:
    def check_readable(self, file_path: str | Path) -> Path:
        """Проверяет, что исходный файл существует и доступен для чтения.

        Raises:
            InputNotFoundError: если путь не существует или не указывает на файл.
            InputPermissionError: если у процесса нет прав на чтение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise InputNotFoundError(f"Файл не найден: {path}")
        if not os.access(path, os.R_OK):
            raise InputPermissionError(f"Нет доступа на чтение: {path}")
        return path

    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA) и исходными размерами.

        Raises:
            InputNotFoundError: если путь не существует или не указывает на файл.
            InputPermissionError: если файл нельзя прочитать.
            ProcessingError: если файл не распознан как изображение или повреждён.
        """
        path = self.check_readable(file_path)

        try:
            with Image.open(path) as src:
                pil_image = src.convert("RGBA")
        except UnidentifiedImageError as exc:
            raise ProcessingError(f"Файл не является изображением: {path}") from exc
        except PermissionError as exc:
            raise InputPermissionError(f"Нет доступа на чтение: {path}") from exc
        except OSError as exc:
            # truncated or otherwise broken data
            raise ProcessingError(f"Не удалось декодировать изображение {path}: {exc}") from exc

        width, height = pil_image.size
        return ImageData(path=path, pil_image=pil_image, width=width, height=height)

    def fit_cover(self, image: Image.Image, size: int) -> Image.Image:
        """
        Масштабирует изображение в квадрат size x size по принципу «cover»:
        меньшая сторона заполняет квадрат, излишек по большей стороне
        обрезается по центру. Пропорции не искажаются, полей не остаётся.
        """
        return ImageOps.fit(
            image,
            (size, size),
            method=Image.Resampling.LANCZOS,
            centering=(0.5, 0.5),
        )

    def output_path(self, input_path: str | Path, output_dir: str | Path, size: int) -> Path:
        """`{output_dir}/{имя входного файла без расширения}-{size}.png`."""
        return Path(output_dir) / f"{Path(input_path).stem}-{size}.png"

    def encode_png(self, image: Image.Image) -> bytes:
        """Кодирует PNG в памяти с максимальной степенью сжатия. Ошибки кодера — `OSError`."""
        buffer = BytesIO()
        image.save(buffer, format="PNG", compress_level=PNG_COMPRESS_LEVEL)
        return buffer.getvalue()

    def write_png(self, data: bytes, path: Path) -> Path:
        """Записывает готовые байты PNG. Ошибки ФС пробрасываются как `OSError`."""
        path.write_bytes(data)
        return path
