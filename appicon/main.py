"""Точка входа: генерация иконок из командной строки."""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from appicon.controllers.icon_controller import IconController
from appicon.errors import IconError, InvalidArgumentError
from appicon.models.icon_model import ALL_SIZES, DEFAULT_BACKGROUND, SIZE_ALL, IconRequest


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="appicon",
        description="Создаёт иконки приложения со скруглёнными углами в стиле Apple.",
    )
    parser.add_argument("input_path", help="Исходное изображение (PNG, JPEG, ...).")
    parser.add_argument("output_dir", help="Каталог для PNG-файлов (создаётся при отсутствии).")
    parser.add_argument(
        "-s",
        "--size",
        default=SIZE_ALL,
        help=f"Сторона иконки в px или '{SIZE_ALL}' ({', '.join(str(s) for s in ALL_SIZES)}). По умолчанию: {SIZE_ALL}.",
    )
    background = parser.add_mutually_exclusive_group()
    background.add_argument(
        "-b",
        "--background",
        default=DEFAULT_BACKGROUND,
        help=f"Цвет подложки: имя, HEX или rgb(). По умолчанию: {DEFAULT_BACKGROUND}.",
    )
    background.add_argument(
        "-t",
        "--transparent",
        action="store_true",
        help="Без подложки: углы иконки остаются прозрачными.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Разбирает аргументы, запускает генерацию и возвращает код выхода."""
    args = _parse_args(argv)
    request = IconRequest(
        input_path=args.input_path,
        output_dir=args.output_dir,
        size=args.size,
        background_color=None if args.transparent else args.background,
    )

    try:
        result = IconController().generate(request)
    except InvalidArgumentError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    except IconError:
        # the controller has already reported the failure
        return 1

    print(f"Готово: {len(result.files)} файл(ов) в {result.output_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
