"""Поиск конфигурационного файла приложения в принятых на платформе местах."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, NamedTuple, Optional, Tuple

import platformdirs

from ufile.exceptions import FileIOError
from ufile.paths import file_exists, user_home_dir

LOGGER = logging.getLogger(__name__)

INI_EXTENSION = ".ini"


class ConfigFile(NamedTuple):
    """Результат поиска: путь и признак того, что файл уже существует."""

    path: str
    found: bool


def user_config_dir() -> Optional[str]:
    """Базовый пользовательский каталог настроек или None, если он неизвестен."""

    try:
        value = platformdirs.user_config_dir(roaming=True)
    except (OSError, RuntimeError, KeyError) as exc:
        LOGGER.debug("User config directory is not resolvable: %s", exc)
        return None
    # expanduser оставляет "~" как есть, если домашний каталог не определён
    if not value or value.startswith("~"):
        return None
    return value


def _normalize_extension(ext: str) -> str:
    return ext if ext.startswith(".") else f".{ext}"


def config_file_candidates(domain: str, appname: str, ext: str) -> Tuple[List[str], str]:
    """Возвращает кандидатов в порядке приоритета и путь для сохранения.

    Для ``domain="qtrac.eu"``, ``appname="myapp"``, ``ext=".json"`` на Linux
    кандидаты такие: ``~/.config/qtrac.eu/myapp.json``,
    ``~/.config/myapp.json``, ``~/.qtrac.eu-myapp.json``, ``~/.myapp.json``.
    Если ни каталог настроек, ни домашний каталог не определяются, поиск идёт
    в текущем каталоге.
    """

    filename = appname + _normalize_extension(ext)
    candidates: List[str] = []
    preferred = ""
    fallback = ""

    config_dir = user_config_dir()
    if config_dir is not None:
        if domain:
            preferred = os.path.join(config_dir, domain, filename)
            candidates.append(preferred)
        name = os.path.join(config_dir, filename)
        candidates.append(name)
        preferred = preferred or name

    home = user_home_dir()
    if home is not None:
        if domain:
            fallback = os.path.join(home, f".{domain}-{filename}")
            candidates.append(fallback)
        name = os.path.join(home, f".{filename}")
        candidates.append(name)
        fallback = fallback or name

    if not candidates:  # последний вариант: текущий каталог
        if domain:
            candidates.append(f"{domain}-{filename}")
        candidates.append(filename)
        if domain:
            candidates.append(f".{domain}-{filename}")
        candidates.append(f".{filename}")

    save_path = preferred or fallback or (f"{domain}-{filename}" if domain else filename)
    return candidates, save_path


def get_config_file(domain: str, appname: str, ext: str) -> ConfigFile:
    """Находит существующий конфигурационный файл или предлагает, куда его сохранить.

    Возвращает первый существующий кандидат с ``found=True``; иначе самый
    предпочтительный путь с ``found=False``. Сама функция ничего не создаёт:
    перед первым сохранением может понадобиться :func:`ensure_parent_dir`.
    """

    candidates, save_path = config_file_candidates(domain, appname, ext)
    for candidate in candidates:
        if file_exists(candidate):
            LOGGER.debug("Found config file %s", candidate)
            return ConfigFile(candidate, True)
    LOGGER.debug("No config file among %s, proposing %s", candidates, save_path)
    return ConfigFile(save_path, False)


def get_ini_file(domain: str, appname: str) -> ConfigFile:
    """То же, что :func:`get_config_file` с расширением ``.ini``."""

    return get_config_file(domain, appname, INI_EXTENSION)


def ensure_parent_dir(path: str) -> None:
    """Создаёт каталог, в котором должен лежать файл ``path``."""

    directory = os.path.dirname(path)
    if not directory or directory == ".":
        return
    try:
        Path(directory).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileIOError(directory, str(exc)) from exc
