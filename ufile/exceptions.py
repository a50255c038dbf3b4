"""Исключения пакета ufile."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Union

LOGGER = logging.getLogger(__name__)


class UFileError(Exception):
    """Базовое исключение пакета с поддержкой контекста."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        """Сохраняет сообщение и контекст, логируя ошибку."""

        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message, self.context)


class FileIOError(UFileError):
    """Поднимается при ошибках открытия, чтения, декодирования или записи файла."""

    def __init__(self, path: Union[str, os.PathLike], reason: str) -> None:
        self.path = os.fspath(path)
        self.reason = reason
        super().__init__(
            f"I/O error with file '{self.path}': {reason}",
            context={"path": self.path, "reason": reason},
        )
