from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from appinit.errors import WorkDirError

logger = logging.getLogger(__name__)

_DEFAULT_FILE_MODE = 0o644
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def go_bin() -> str:
    return (os.environ.get("APPINIT_GO_BIN") or "go").strip() or "go"


def log_level() -> str:
    v = (os.environ.get("APPINIT_LOG_LEVEL") or "WARNING").strip().upper()
    return v if v in _LOG_LEVELS else "WARNING"


def file_mode() -> int:
    raw = (os.environ.get("APPINIT_FILE_MODE") or "").strip()
    if not raw:
        return _DEFAULT_FILE_MODE
    try:
        mode = int(raw, 8)
    except ValueError:
        logger.warning(
            "Invalid octal mode for APPINIT_FILE_MODE=%r, using %o",
            raw,
            _DEFAULT_FILE_MODE,
        )
        return _DEFAULT_FILE_MODE
    if not 0 <= mode <= 0o777:
        logger.warning(
            "APPINIT_FILE_MODE=%r out of range, using %o", raw, _DEFAULT_FILE_MODE
        )
        return _DEFAULT_FILE_MODE
    return mode


@dataclass(frozen=True)
class InitConfig:
    """Ambient state for one scaffolding run.

    Everything the orchestrator would otherwise read from the process
    (working directory, tool location, file mode) is captured here.
    """

    work_dir: str
    go_bin: str = "go"
    file_mode: int = _DEFAULT_FILE_MODE

    @classmethod
    def from_env(cls, *, work_dir: str | None = None) -> InitConfig:
        if work_dir is None:
            try:
                work_dir = os.getcwd()
            except OSError as exc:
                raise WorkDirError(
                    f"cannot determine working directory: {exc}"
                ) from exc
        return cls(work_dir=work_dir, go_bin=go_bin(), file_mode=file_mode())

    def path(self, name: str) -> str:
        return os.path.join(self.work_dir, name)
