"""Контроллер генерации иконок: оркестрация сервисов в один конвейер.

SOLID:
- SRP: класс управляет порядком шагов и классификацией ошибок, без логики обработки изображений.
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
Clean Code:
- Каждый шаг конвейера — отдельный вызов сервиса.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image

from appicon.errors import IconError, OutputError, ProcessingError
from appicon.models.icon_model import IconRequest, IconResult
from appicon.services.image_service import ImageService
from appicon.services.mask_service import MaskService
from appicon.services.request_service import RequestService

FAILURE_PREFIX = "Не удалось создать иконку: "


@dataclass
class IconController:
    """Конвейер: проверка -> подготовка каталога -> для каждого размера
    масштабирование, маска, подложка, запись PNG.

    Размеры обрабатываются строго последовательно. Первая ошибка прерывает
    генерацию; уже записанные файлы не удаляются.
    """
    _request_service: RequestService = RequestService()
    _image_service: ImageService = ImageService()
    _mask_service: MaskService = MaskService()

    def generate(self, request: IconRequest) -> IconResult:
        """Генерирует иконки по запросу.

        Raises:
            InvalidArgumentError: некорректный запрос (до любых операций с ФС, без обёртки).
            InputNotFoundError, InputPermissionError, OutputError, ProcessingError:
                с префиксом `FAILURE_PREFIX` и исходной причиной в `__cause__`.
        """
        sizes, background = self._request_service.validate(request)
        output_dir = Path(request.output_dir)

        files: List[Path] = []
        try:
            self._image_service.check_readable(request.input_path)
            self._prepare_output_dir(output_dir)
            for size in sizes:
                files.append(self._generate_size(request.input_path, output_dir, size, background))
        except Exception as exc:
            error = self._wrap_error(exc)
            print(f"❌ {error}", file=sys.stderr)
            raise error from exc

        return IconResult(success=True, output_dir=output_dir, files=tuple(files))

    # ---- Steps ----
    def _prepare_output_dir(self, output_dir: Path) -> None:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputError(f"Не удалось создать каталог {output_dir}: {exc}") from exc

    def _generate_size(
        self,
        input_path: str | Path,
        output_dir: Path,
        size: int,
        background: Optional[Tuple[int, int, int, int]],
    ) -> Path:
        image_data = self._image_service.load_image(input_path)
        data = self._render_icon(image_data.pil_image, size, background)

        path = self._image_service.output_path(input_path, output_dir, size)
        try:
            self._image_service.write_png(data, path)
        except OSError as exc:
            raise OutputError(f"Не удалось записать {path}: {exc}") from exc

        print(
            f"✅ Иконка создана: {path} ({size}x{size}, "
            f"из {image_data.path.name} {image_data.width}x{image_data.height})"
        )
        return path

    def _render_icon(
        self,
        image: Image.Image,
        size: int,
        background: Optional[Tuple[int, int, int, int]],
    ) -> bytes:
        """Масштабирование, маска, подложка и кодирование PNG в памяти."""
        try:
            icon = self._image_service.fit_cover(image, size)
            mask = self._mask_service.render_mask(size)
            icon = self._mask_service.apply_mask(icon, mask)
            if background is not None:
                icon = self._mask_service.composite_background(icon, background)
            data = self._image_service.encode_png(icon)
        except IconError:
            raise
        except Exception as exc:
            raise ProcessingError(f"Ошибка обработки изображения ({size}x{size}): {exc}") from exc
        return data

    # ---- Helpers ----
    @staticmethod
    def _wrap_error(exc: Exception) -> IconError:
        """Оборачивает ошибку в класс таксономии с единым префиксом."""
        message = f"{FAILURE_PREFIX}{exc}"
        if isinstance(exc, IconError):
            return type(exc)(message)
        if isinstance(exc, OSError):
            return OutputError(message)
        return ProcessingError(message)


def generate(request: IconRequest) -> IconResult:
    """Генерирует иконки контроллером по умолчанию."""
    return IconController().generate(request)
