from __future__ import annotations

from typing import Tuple

import numpy as np
from PIL import Image, ImageDraw

from appicon.errors import ProcessingError
from appicon.models.icon_model import CORNER_RADIUS_RATIO

# Масштаб отрисовки маски для сглаживания краёв
SUPERSAMPLE = 4
# Предельная сторона холста для отрисовки маски, px
MAX_MASK_CANVAS = 8192


class MaskService:
    def corner_radius(self, size: int) -> int:
        """
        Радиус скругления для стороны size: round(size * 0.2237).
        Половины округляются вверх, а не по-банковски.
        """
        return int(size * CORNER_RADIUS_RATIO + 0.5)

    def render_mask(self, size: int) -> Image.Image:
        """
        Маска иконки size x size (RGBA): полностью прозрачный холст,
        на котором залит непрозрачный скруглённый прямоугольник.
        Значим только альфа-канал.
        """
        radius = self.corner_radius(size)
        scale = max(1, min(SUPERSAMPLE, MAX_MASK_CANVAS // size))
        big = size * scale
        shape = Image.new("L", (big, big), 0)
        draw = ImageDraw.Draw(shape)
        draw.rounded_rectangle((0, 0, big - 1, big - 1), radius=radius * scale, fill=255)
        alpha = shape.resize((size, size), Image.Resampling.LANCZOS)

        mask = Image.new("RGBA", (size, size), (255, 255, 255, 0))
        mask.putalpha(alpha)
        return mask

    def apply_mask(self, image: Image.Image, mask: Image.Image) -> Image.Image:
        """
        Композиция «destination-in»: цвет берётся из изображения,
        альфа = min(альфа изображения, альфа маски).
        Всё вне скруглённого прямоугольника становится прозрачным.
        """
        if image.size != mask.size:
            raise ProcessingError(f"Размер маски {mask.size} не совпадает с изображением {image.size}")
        out = np.array(image.convert("RGBA"), dtype=np.uint8)
        mask_alpha = np.asarray(mask.getchannel("A"), dtype=np.uint8)
        out[..., 3] = np.minimum(out[..., 3], mask_alpha)
        return Image.fromarray(out)

    def composite_background(self, image: Image.Image, color: Tuple[int, int, int, int]) -> Image.Image:
        """Кладёт изображение поверх непрозрачной подложки цвета color (source-over)."""
        canvas = Image.new("RGBA", image.size, color)
        canvas.alpha_composite(image)
        return canvas
