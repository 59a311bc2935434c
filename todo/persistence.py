"""Persistence helpers for reading and writing the todo document on disk."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict

from .errors import StorageError
from .schema import validate_document

logger = logging.getLogger(__name__)


def load(path: Path) -> Dict[str, Any]:
    """Return the validated JSON document stored at ``path``.

    Raises :class:`~todo.errors.StorageError` if the file cannot be read, is
    not valid JSON or does not have the expected layout.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise StorageError(f"{path} is not valid JSON: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(f"Cannot read {path}: {exc}") from exc
    validate_document(data)
    logger.debug("Loaded %s", path)
    return data


def _file_mode(target: Path) -> int:
    """Mode for the rewritten file: the current one, or the umask default."""
    try:
        return target.stat().st_mode & 0o7777
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def save(data: Dict[str, Any], path: Path) -> None:
    """Write ``data`` to ``path`` as UTF-8 JSON.

    The document goes to a temporary file next to the real file (symlinks
    are followed) which then replaces it, so readers never see a
    half-written file. The file keeps its permissions.
    """
    try:
        payload = json.dumps(data, indent=4, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise StorageError(f"Cannot write {path}: text is not valid UTF-8 ({exc.reason})") from exc

    target = Path(os.path.realpath(path))
    tmp_name = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        mode = _file_mode(target)
        with tempfile.NamedTemporaryFile(
            "wb", dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
        ) as f:
            tmp_name = f.name
            f.write(payload)
            f.flush()
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as exc:
        raise StorageError(f"Cannot write {path}: {exc}") from exc
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
    logger.debug("Saved %s", target)


__all__ = ["save", "load"]
