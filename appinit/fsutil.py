from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Callable, Iterator
from contextlib import contextmanager, suppress
from typing import TextIO

from appinit.errors import FilePermissionError, FileStatError, FileWriteError

logger = logging.getLogger(__name__)


def _discard(tmp: str) -> None:
    with suppress(FileNotFoundError):
        os.unlink(tmp)


@contextmanager
def atomic_write(path: str, *, mode: int = 0o644) -> Iterator[TextIO]:
    """Write ``path`` through a temporary sibling file.

    The temporary file lives in the destination directory so the final
    ``os.replace`` is a same-filesystem rename. Readers see either no file or
    the complete content. On any failure the temporary file is removed.
    """
    directory = os.path.dirname(path) or "."
    try:
        fd, tmp = tempfile.mkstemp(
            prefix=f".{os.path.basename(path)}.", suffix=".tmp", dir=directory
        )
    except OSError as exc:
        raise FileWriteError(f"cannot write {path}: {exc}", path=path) from exc

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            yield f
            f.flush()
            os.fsync(f.fileno())
    except (OSError, UnicodeError) as exc:
        _discard(tmp)
        raise FileWriteError(f"cannot write {path}: {exc}", path=path) from exc
    except BaseException:
        _discard(tmp)
        raise

    # mkstemp creates 0600; fix the mode before the file becomes visible.
    try:
        os.chmod(tmp, mode)
    except OSError as exc:
        _discard(tmp)
        raise FilePermissionError(
            f"cannot set mode {mode:o} on {path}: {exc}", path=path, mode=mode
        ) from exc

    try:
        os.replace(tmp, path)
    except OSError as exc:
        _discard(tmp)
        raise FileWriteError(f"cannot write {path}: {exc}", path=path) from exc


def write_file_atomic(path: str, content: str, *, mode: int = 0o644) -> None:
    with atomic_write(path, mode=mode) as f:
        f.write(content)


def check_file_or_do(path: str, action: Callable[[], None]) -> bool:
    """Run ``action`` only when ``path`` does not exist.

    Returns True if the action ran. Stat errors other than "not found" are
    fatal, since we cannot tell whether the file is there.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        action()
        return True
    except OSError as exc:
        raise FileStatError(f"cannot stat {path}: {exc}", path=path) from exc

    logger.info("%s exists, leaving it untouched", path)
    return False


def check_file_or_create(path: str, content: str, *, mode: int = 0o644) -> bool:
    def _create() -> None:
        write_file_atomic(path, content, mode=mode)
        logger.info("Created %s", path)

    return check_file_or_do(path, _create)
