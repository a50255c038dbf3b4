"""Точка входа командной строки ufile."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from ufile import __version__
from ufile.config_files import INI_EXTENSION, get_config_file
from ufile.logger import configure_logging
from ufile.paths import barename, longest_common_path
from ufile.text_files import read_utf8_lines

LOGGER = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"


def build_parser() -> argparse.ArgumentParser:
    """Описывает подкоманды и общие параметры."""

    parser = argparse.ArgumentParser(prog="ufile", description="File and path helpers.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("UFILE_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        help="logging level (default: $UFILE_LOG_LEVEL or %(default)s)",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="also write a rotating ufile.log into this folder",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    bare = commands.add_parser("barename", help="print names without folders and suffixes")
    bare.add_argument("paths", nargs="+")

    common = commands.add_parser("common-path", help="print the longest common path")
    common.add_argument("paths", nargs="+")

    config = commands.add_parser("config-file", help="locate an application's config file")
    config.add_argument("--domain", default="")
    config.add_argument("appname")
    config.add_argument("ext", nargs="?", default=INI_EXTENSION)

    cat = commands.add_parser("cat", help="print a UTF-8 text file line by line")
    cat.add_argument("filename")
    return parser


def run(args: argparse.Namespace) -> int:
    """Выполняет выбранную подкоманду и возвращает код завершения."""

    if args.command == "barename":
        for path in args.paths:
            print(barename(path))
    elif args.command == "common-path":
        print(longest_common_path(args.paths))
    elif args.command == "config-file":
        path, found = get_config_file(args.domain, args.appname, args.ext)
        print(f"{path}\t{'found' if found else 'new'}")
    elif args.command == "cat":
        for line, error in read_utf8_lines(args.filename):
            if error is not None:
                return 1  # сообщение уже записано в лог самим исключением
            print(line)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Разбирает аргументы, настраивает логирование и запускает подкоманду."""

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_dir, level_name=args.log_level, stream=sys.stderr)
    except ValueError as exc:
        parser.error(str(exc))

    LOGGER.debug("ufile %s: %s", __version__, args.command)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
