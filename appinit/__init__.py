"""Scaffolding for new Fyne applications.

`appinit init` derives an application id and name from a Go module path and
writes the starter files into the current directory. It never overwrites
existing files, so it is safe to re-run after fixing a failure.
"""

from appinit.errors import (
    AppInitError,
    FilePermissionError,
    FileStatError,
    FileWriteError,
    ModuleCommandError,
    WorkDirError,
)
from appinit.identifier import derive_app_id, derive_app_name
from appinit.scaffold import InitOptions, InitResult, init_project

__all__ = [
    "AppInitError",
    "FilePermissionError",
    "FileStatError",
    "FileWriteError",
    "InitOptions",
    "InitResult",
    "ModuleCommandError",
    "WorkDirError",
    "derive_app_id",
    "derive_app_name",
    "init_project",
]
