from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from appinit.errors import ModuleCommandError

if TYPE_CHECKING:  # pragma: no cover
    from appinit.config import InitConfig

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def run(
        self,
        args: list[str],
        *,
        cwd: str | None = None,
        env: dict[str, str] | None = None,
        check: bool = True,
    ) -> subprocess.CompletedProcess[str]: ...


@dataclass
class SubprocessRunner:
    # stdout/stderr are inherited so the user sees the tool's own output.
    def run(
        self,
        args: list[str],
        *,
        cwd: str | None = None,
        env: dict[str, str] | None = None,
        check: bool = True,
    ) -> subprocess.CompletedProcess[str]:
        return subprocess.run(args, cwd=cwd, env=env, text=True, check=check)


class ModuleManager(Protocol):
    def initialize(self, module_path: str) -> None: ...

    def resolve_dependencies(self) -> None: ...


class GoModuleManager:
    """Drives ``go mod init`` / ``go mod tidy`` in the project directory."""

    def __init__(
        self,
        runner: CommandRunner | None = None,
        *,
        go_bin: str = "go",
        cwd: str | None = None,
        env: dict[str, str] | None = None,
    ) -> None:
        self._runner = runner or SubprocessRunner()
        self._go = go_bin
        self._cwd = cwd
        self._env = env

    @classmethod
    def from_config(
        cls, config: InitConfig, *, runner: CommandRunner | None = None
    ) -> GoModuleManager:
        return cls(runner, go_bin=config.go_bin, cwd=config.work_dir)

    def _run(self, args: list[str]) -> None:
        cmd = " ".join(args)
        logger.info("Running %s", cmd)
        try:
            cp = self._runner.run(args, cwd=self._cwd, env=self._env, check=True)
        except subprocess.CalledProcessError as exc:
            raise ModuleCommandError(
                f"failed to run command {cmd!r}: exit status {exc.returncode}",
                command=args,
                returncode=exc.returncode,
            ) from exc
        except OSError as exc:
            raise ModuleCommandError(
                f"failed to run command {cmd!r}: {exc}", command=args
            ) from exc
        # Runners are not required to honour check=True.
        if cp.returncode != 0:
            raise ModuleCommandError(
                f"failed to run command {cmd!r}: exit status {cp.returncode}",
                command=args,
                returncode=cp.returncode,
            )

    def initialize(self, module_path: str) -> None:
        self._run([self._go, "mod", "init", module_path])

    def resolve_dependencies(self) -> None:
        self._run([self._go, "mod", "tidy"])
