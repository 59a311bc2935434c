"""Configuration for the todo CLI: where the list lives and how it logs."""

from __future__ import annotations

import logging
import os
from pathlib import Path

DB_PATH_ENV = "TODO_JSON_DB_PATH"
DEFAULT_FILENAME = ".todo.json"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def default_db_path() -> Path:
    return Path.home() / DEFAULT_FILENAME


def resolve_db_path(explicit: Path | str | None = None) -> Path:
    """Return the path of the backing file.

    ``explicit`` wins, then the ``TODO_JSON_DB_PATH`` environment variable,
    then ``~/.todo.json``.
    """
    if explicit:
        return Path(explicit).expanduser()
    env = os.environ.get(DB_PATH_ENV)
    if env:
        return Path(env).expanduser()
    return default_db_path()


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


__all__ = ["DB_PATH_ENV", "default_db_path", "resolve_db_path", "configure_logging"]
