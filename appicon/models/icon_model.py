"""Модели данных генератора иконок.

Принципы:
- SRP: только структуры данных и константы, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

# Порядок важен: "all" генерирует от большего к меньшему
ALL_SIZES: Tuple[int, ...] = (1024, 512, 256, 128)
SIZE_ALL = "all"

# Допустимые размеры стороны: ниже MIN_SIZE угловой пиксель не становится
# прозрачным, выше MAX_SIZE маска и буферы занимают гигабайты
MIN_SIZE = 16
MAX_SIZE = 4096

# Отношение радиуса скругления к стороне иконки (Apple)
CORNER_RADIUS_RATIO = 0.2237

DEFAULT_BACKGROUND = "#FFF"
PNG_COMPRESS_LEVEL = 9


@dataclass(frozen=True)
class IconRequest:
    """Запрос на генерацию иконок.

    Fields:
        input_path: Путь к исходному изображению (PNG/JPEG и т.п.).
        output_dir: Каталог для результатов, создаётся при отсутствии.
        size: 1024 | 512 | 256 | 128 | "all" (или любое целое от MIN_SIZE до MAX_SIZE).
        background_color: Цвет подложки (имя, HEX, rgb()). По умолчанию белый;
            явный `None` означает «без подложки», углы остаются прозрачными.
    """
    input_path: str | Path
    output_dir: str | Path
    size: str | int = SIZE_ALL
    background_color: Optional[str] = DEFAULT_BACKGROUND


@dataclass(frozen=True)
class IconResult:
    """Результат успешной генерации.

    Fields:
        success: Всегда True: ошибки сообщаются исключениями.
        output_dir: Каталог, в который записаны иконки.
        files: Записанные файлы в порядке генерации.
    """
    success: bool
    output_dir: Path
    files: Tuple[Path, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель загруженного изображения.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Загруженное изображение PIL (RGBA).
        width: Исходная ширина, px.
        height: Исходная высота, px.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
