"""Проверка параметров запроса до любых операций с файловой системой.

Принципы:
- SRP: только валидация и нормализация входных параметров.
- Ошибки сообщаются через `InvalidArgumentError`, файлы не трогаются.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from PIL import ImageColor

from appicon.errors import InvalidArgumentError
from appicon.models.icon_model import ALL_SIZES, MAX_SIZE, MIN_SIZE, SIZE_ALL, IconRequest

RGBA = Tuple[int, int, int, int]


class RequestService:
    def validate(self, request: IconRequest) -> Tuple[List[int], Optional[RGBA]]:
        """Проверяет запрос целиком.

        Returns:
            Пара (список размеров в порядке генерации, цвет подложки RGBA или None).

        Raises:
            InvalidArgumentError: пустой путь, некорректный размер или цвет.
        """
        if not self._has_path(request.input_path) or not self._has_path(request.output_dir):
            raise InvalidArgumentError("Необходимо указать входной файл и выходной каталог.")
        sizes = self.resolve_sizes(request.size)
        background = self.resolve_background(request.background_color)
        return sizes, background

    def resolve_sizes(self, size: str | int) -> List[int]:
        """Раскрывает селектор размера в упорядоченный список сторон.

        "all" -> [1024, 512, 256, 128]; число или строка с целым -> [n],
        где MIN_SIZE <= n <= MAX_SIZE.
        """
        if isinstance(size, bool):
            raise InvalidArgumentError(f"Некорректный размер: {size!r}")

        if isinstance(size, str):
            text = size.strip()
            if text.lower() == SIZE_ALL:
                return list(ALL_SIZES)
            try:
                value = int(text, 10)
            except ValueError as exc:
                raise InvalidArgumentError(f"Некорректный размер: {size!r}") from exc
        elif isinstance(size, int):
            value = size
        else:
            raise InvalidArgumentError(f"Некорректный размер: {size!r}")

        if value <= 0:
            raise InvalidArgumentError(f"Размер должен быть положительным числом: {value}")
        if not MIN_SIZE <= value <= MAX_SIZE:
            raise InvalidArgumentError(f"Размер должен быть от {MIN_SIZE} до {MAX_SIZE}: {value}")
        return [value]

    def resolve_background(self, color: Optional[str]) -> Optional[RGBA]:
        """Разбирает цвет подложки; `None` или пустая строка — без подложки.

        Альфа-канал цвета игнорируется: подложка всегда непрозрачна.
        """
        if not color:
            return None
        try:
            rgb = ImageColor.getrgb(color)
        except ValueError as exc:
            raise InvalidArgumentError(f"Некорректный цвет подложки: {color!r}") from exc
        r, g, b = rgb[:3]
        return (r, g, b, 255)

    # ---- Helpers ----
    @staticmethod
    def _has_path(value: str | Path | None) -> bool:
        if value is None:
            return False
        return bool(str(value).strip())
