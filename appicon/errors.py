"""Иерархия ошибок генератора иконок.

Каждый класс дополнительно наследует подходящее встроенное исключение, поэтому
вызывающий код может ловить как `IconError`, так и привычные
`FileNotFoundError` / `PermissionError` / `OSError` / `ValueError`.
"""
from __future__ import annotations


class IconError(Exception):
    """Базовая ошибка генерации иконки."""


class InvalidArgumentError(IconError, ValueError):
    """Некорректные параметры запроса: пустой путь, размер, цвет."""


class InputNotFoundError(IconError, FileNotFoundError):
    """Исходный файл не существует или не является файлом."""


class InputPermissionError(IconError, PermissionError):
    """Исходный файл недоступен для чтения."""


class OutputError(IconError, OSError):
    """Не удалось создать выходной каталог или записать файл."""


class ProcessingError(IconError):
    """Ошибка декодирования, маскирования, композиции или кодирования PNG."""
