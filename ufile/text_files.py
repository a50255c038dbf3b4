"""Чтение и запись текстовых файлов UTF-8 построчно."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from ufile.exceptions import FileIOError
from ufile.paths import StrPath
from ufile.platforms import TargetPlatform, resolve_platform

LOGGER = logging.getLogger(__name__)

ENCODING = "utf-8"
LineResult = Tuple[str, Optional[FileIOError]]


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    return line.replace("\r", "")


def read_text_file(filename: StrPath) -> List[str]:
    """Читает файл целиком и возвращает список строк без символов конца строки.

    Все ``\\r`` удаляются, завершающий ``\\n`` (один) отбрасывается, так что
    пустая последняя строка не появляется. Пустой файл даёт пустой список.
    См. также :func:`read_utf8_lines`.
    """

    try:
        # newline="" отключает преобразование концов строк при чтении
        with open(filename, encoding=ENCODING, newline="") as file:
            content = file.read()
    except (OSError, ValueError) as exc:
        raise FileIOError(filename, str(exc)) from exc

    LOGGER.debug("Read %d characters from %s", len(content), filename)
    if not content:
        return []
    content = content.replace("\r", "")
    if content.endswith("\n"):
        content = content[:-1]
    return content.split("\n")


def read_utf8_lines(filename: StrPath) -> Iterator[LineResult]:
    """Лениво читает файл и выдаёт пары ``(строка, ошибка)``.

    Пока всё хорошо, ошибка равна ``None``. При сбое открытия, чтения или
    декодирования выдаётся ровно одна пара ``("", FileIOError)``, после чего
    итерация заканчивается. Строки декодируются по одной, поэтому
    все строки до повреждённой успевают выдаться. Строки совпадают с результатом
    :func:`read_text_file` для того же файла.

    Файл закрывается и при досрочном прекращении итерации: достаточно
    прервать цикл или вызвать ``close()`` у генератора.
    """

    try:
        file = open(filename, "rb")
    except (OSError, ValueError) as exc:
        yield "", FileIOError(filename, str(exc))
        return

    with file:
        while True:
            try:
                raw = file.readline()
                line = raw.decode(ENCODING)
            except (OSError, UnicodeDecodeError) as exc:
                yield "", FileIOError(filename, str(exc))
                return
            if not line:  # конец файла; последняя строка уже выдана
                return
            yield _strip_eol(line), None


def write_text_file(
    filename: StrPath,
    lines: Iterable[str],
    *,
    platform: Optional[TargetPlatform] = None,
) -> None:
    """Записывает строки, добавляя к каждой конец строки целевой платформы.

    Файл создаётся или усекается. Конец строки получает каждая строка,
    включая последнюю. При ошибке записи файл остаётся частично записанным.
    """

    eol = resolve_platform(platform).eol
    count = 0
    try:
        with open(filename, "w", encoding=ENCODING, newline="") as file:
            for line in lines:
                file.write(line)
                file.write(eol)
                count += 1
            file.flush()
    except (OSError, ValueError) as exc:
        raise FileIOError(filename, str(exc)) from exc
    LOGGER.debug("Wrote %d lines to %s", count, filename)
