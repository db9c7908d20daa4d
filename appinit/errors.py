from __future__ import annotations


class AppInitError(RuntimeError):
    """Base class for every fatal scaffolding error."""


class WorkDirError(AppInitError):
    pass


class FileStatError(AppInitError):
    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class FileWriteError(AppInitError):
    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class FilePermissionError(AppInitError):
    def __init__(self, message: str, *, path: str, mode: int) -> None:
        super().__init__(message)
        self.path = path
        self.mode = mode


class ModuleCommandError(AppInitError):
    def __init__(
        self, message: str, *, command: list[str], returncode: int | None = None
    ) -> None:
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
