"""Вспомогательные функции для путей, конфигурационных и текстовых файлов."""

from ufile.config_files import (
    ConfigFile,
    ensure_parent_dir,
    get_config_file,
    get_ini_file,
    user_config_dir,
)
from ufile.exceptions import FileIOError, UFileError
from ufile.paths import (
    abs_path,
    barename,
    file_exists,
    home_dir,
    is_dir,
    longest_common_path,
    longest_common_prefix,
    path_exists,
)
from ufile.platforms import DARWIN, LINUX, WINDOWS, TargetPlatform, current_platform
from ufile.text_files import read_text_file, read_utf8_lines, write_text_file

__version__ = "1.0.0"

__all__ = [
    "ConfigFile",
    "DARWIN",
    "FileIOError",
    "LINUX",
    "TargetPlatform",
    "UFileError",
    "WINDOWS",
    "__version__",
    "abs_path",
    "barename",
    "current_platform",
    "ensure_parent_dir",
    "file_exists",
    "get_config_file",
    "get_ini_file",
    "home_dir",
    "is_dir",
    "longest_common_path",
    "longest_common_prefix",
    "path_exists",
    "read_text_file",
    "read_utf8_lines",
    "user_config_dir",
    "write_text_file",
]
