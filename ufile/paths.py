"""Функции для работы с путями и простые проверки файловой системы.

Проверки ``file_exists``, ``path_exists`` и ``is_dir``, а также ``abs_path``
и ``home_dir`` намеренно не пробрасывают ошибки: любой сбой превращается в
``False`` или в запасное значение.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from ufile.platforms import TargetPlatform, resolve_platform

LOGGER = logging.getLogger(__name__)

StrPath = Union[str, "os.PathLike[str]"]


def barename(path: str) -> str:
    """Возвращает имя файла без каталогов и без всех расширений.

    ``"/home/mark/data.dat"`` -> ``"data"``, ``"archive.tar.gz"`` -> ``"archive"``.
    Разделителем каталогов считаются и ``/``, и ``\\``.
    """

    index = max(path.rfind("/"), path.rfind("\\"))
    if index > -1:
        path = path[index + 1 :]
    # последовательное отбрасывание суффиксов оставляет всё до первой точки
    return path.partition(".")[0]


def longest_common_prefix(items: Sequence[str]) -> str:
    """Посимвольный общий префикс строк (пустая строка для пустого набора)."""

    return os.path.commonprefix(list(items))


def longest_common_path(
    paths: Iterable[str], *, platform: Optional[TargetPlatform] = None
) -> str:
    """Возвращает самый длинный общий путь из целых компонентов.

    Результат может быть пустой строкой, если общего пути нет, или корнем
    (``/`` либо ``\\``). На платформах без учёта регистра сравниваются и
    возвращаются строки в нижнем регистре; исходная коллекция не меняется.
    """

    target = resolve_platform(platform)
    items: List[str] = list(paths)
    if target.case_insensitive:
        items = [item.lower() for item in items]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]

    prefix = longest_common_prefix(items)
    if not prefix:
        return ""
    index = prefix.rfind(target.separator)
    if index == -1:
        return ""
    if index == 0:  # сохраняем корень
        index = 1
    return prefix[:index]


def abs_path(path: StrPath) -> str:
    """Возвращает абсолютный путь либо нормализованный исходный при ошибке."""

    try:
        return os.path.abspath(path)
    except OSError as exc:
        # например, текущий каталог был удалён
        LOGGER.debug("Cannot make %s absolute: %s", path, exc)
        return os.path.normpath(path)


def user_home_dir() -> Optional[str]:
    """Домашний каталог пользователя или None, если он неизвестен."""

    try:
        return str(Path.home())
    except (RuntimeError, KeyError) as exc:
        LOGGER.debug("Home directory is not resolvable: %s", exc)
        return None


def home_dir() -> str:
    """Возвращает домашний каталог, а если он неизвестен, абсолютный текущий."""

    return user_home_dir() or abs_path(".")


def file_exists(path: StrPath) -> bool:
    """True, если путь существует и это не каталог."""

    try:
        info = os.stat(path)
    except (OSError, ValueError):
        return False
    return not stat.S_ISDIR(info.st_mode)


def path_exists(path: StrPath) -> bool:
    """True, если по пути есть хоть что-то (файл, каталог, устройство)."""

    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def is_dir(path: StrPath) -> bool:
    """True, если путь указывает на каталог."""

    try:
        info = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISDIR(info.st_mode)
