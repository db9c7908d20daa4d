from __future__ import annotations

import argparse
import logging
import sys

from appinit.config import InitConfig, log_level
from appinit.errors import AppInitError
from appinit.scaffold import InitOptions, init_project

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appinit",
        description="A command line helper for setting up Fyne applications.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser(
        "init",
        help="Initializes a new Fyne project.",
        description=(
            "Initializes a new Fyne project in the current directory, including "
            "a go.mod, main.go, and FyneApp.toml file (unless existing)."
        ),
    )
    init.add_argument("module_path", nargs="?", metavar="module-path")
    init.add_argument(
        "--appID",
        "--id",
        dest="app_id",
        help=(
            "set appID in reversed domain notation for Android, darwin and "
            "Windows targets, or a valid provisioning profile on iOS"
        ),
    )
    init.add_argument(
        "--name",
        dest="app_name",
        help="set name the application (default: derived from module path)",
    )
    return parser


def _run_init(args: argparse.Namespace) -> None:
    config = InitConfig.from_env()
    init_project(
        InitOptions(
            module_path=args.module_path,
            app_id=args.app_id,
            app_name=args.app_name,
        ),
        config,
    )


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=log_level(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        if args.command == "init":
            _run_init(args)
    except AppInitError as exc:
        logger.debug("init failed", exc_info=True)
        print(exc, file=sys.stderr)
        return 1
    return 0
