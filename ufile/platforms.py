"""Описание целевой платформы: разделитель путей, регистр и конец строки."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class TargetPlatform:
    """Набор соглашений платформы, на которую рассчитан результат."""

    name: str
    separator: str = "/"
    case_insensitive: bool = False
    eol: str = "\n"


LINUX = TargetPlatform(name="linux")
# macOS по умолчанию работает с файловой системой без учёта регистра
DARWIN = TargetPlatform(name="darwin", case_insensitive=True)
WINDOWS = TargetPlatform(name="windows", separator="\\", case_insensitive=True, eol="\r\n")


def current_platform() -> TargetPlatform:
    """Возвращает описание платформы, на которой запущен интерпретатор."""

    if sys.platform == "win32":
        return WINDOWS
    if sys.platform == "darwin":
        return DARWIN
    return LINUX


def resolve_platform(platform: Optional[TargetPlatform]) -> TargetPlatform:
    """Подставляет текущую платформу, если явная не передана."""

    return platform if platform is not None else current_platform()
