"""Idempotent project scaffolding.

Each file step checks whether its target exists and leaves existing files
alone; only ``go mod tidy`` runs unconditionally. The first failure aborts the
run and nothing already written is rolled back.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from appinit.config import InitConfig
from appinit.fsutil import check_file_or_create, check_file_or_do
from appinit.identifier import derive_app_id, derive_app_name
from appinit.module_manager import GoModuleManager, ModuleManager
from appinit.templates import (
    ENTRY_POINT_FILE,
    METADATA_FILE,
    MODULE_DESCRIPTOR_FILE,
    render_fyne_app_toml,
    render_main_go,
)

logger = logging.getLogger(__name__)

DEFAULT_MODULE_PATH = "example"


@dataclass(frozen=True)
class InitOptions:
    module_path: str | None = None
    app_id: str | None = None
    app_name: str | None = None


@dataclass(frozen=True)
class ResolvedProject:
    module_path: str
    app_id: str
    app_name: str


@dataclass
class InitResult:
    project: ResolvedProject
    created: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    module_initialized: bool = False


def resolve_module_path(explicit: str | None, work_dir: str) -> str:
    if explicit:
        return explicit

    base = os.path.basename(os.path.normpath(work_dir)) if work_dir else ""
    if base and base not in (".", os.sep):
        return base
    return DEFAULT_MODULE_PATH


def resolve_project(options: InitOptions, config: InitConfig) -> ResolvedProject:
    modpath = resolve_module_path(options.module_path, config.work_dir)
    app_id = options.app_id or derive_app_id(modpath)
    app_name = options.app_name or derive_app_name(modpath)
    logger.debug("Resolved module=%s id=%s name=%s", modpath, app_id, app_name)
    return ResolvedProject(module_path=modpath, app_id=app_id, app_name=app_name)


def init_project(
    options: InitOptions,
    config: InitConfig,
    *,
    module_manager: ModuleManager | None = None,
) -> InitResult:
    project = resolve_project(options, config)
    mm = module_manager or GoModuleManager.from_config(config)
    result = InitResult(project=project)

    def _record(name: str, created: bool) -> None:
        (result.created if created else result.skipped).append(name)

    _record(
        ENTRY_POINT_FILE,
        check_file_or_create(
            config.path(ENTRY_POINT_FILE),
            render_main_go(project.app_id),
            mode=config.file_mode,
        ),
    )

    def _init_module() -> None:
        mm.initialize(project.module_path)
        result.module_initialized = True

    _record(
        MODULE_DESCRIPTOR_FILE,
        check_file_or_do(config.path(MODULE_DESCRIPTOR_FILE), _init_module),
    )

    _record(
        METADATA_FILE,
        check_file_or_create(
            config.path(METADATA_FILE),
            render_fyne_app_toml(project.app_name, project.app_id),
            mode=config.file_mode,
        ),
    )

    mm.resolve_dependencies()
    return result
