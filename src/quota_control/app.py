from __future__ import annotations

import argparse
import platform
from pathlib import Path
from typing import Callable

from loguru import logger
from rich.console import Console
from rich.markup import escape

from quota_control.collectors.group_collector import GroupDirectory
from quota_control.collectors.quota_collector import QuotaCollector, QuotaLoader
from quota_control.errors import DirectoryError
from quota_control.services import privilege_service
from quota_control.services.config_service import ConfigPaths, ConfigService
from quota_control.services.log_service import setup_logging

EXIT_OK = 0
EXIT_NO_QUOTA_ROOT = 3
EXIT_NOT_PRIVILEGED = 5
EXIT_UNSUPPORTED_PLATFORM = 9009

console = Console(highlight=False, soft_wrap=True)


def _default_runner(collector: QuotaCollector, groups: list[str]) -> None:
    from quota_control.tui.dashboard import run_dashboard

    run_dashboard(collector, groups)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quota-control",
        description="Terminal dashboard for per-group disk quota snapshots.",
    )
    parser.add_argument("--quota-root", default=None, metavar="PATH", help="Directory holding <group>.quota files")
    parser.add_argument("--config", type=Path, default=None, metavar="PATH", help="Path to JSON config file")
    parser.add_argument(
        "--cache",
        action="store_true",
        default=None,
        help="Re-read a snapshot only when its modification time or size changes",
    )
    parser.add_argument("--log-file", default=None, metavar="PATH", help="Log file (default: XDG state dir)")
    return parser


def main(
    argv: list[str] | None = None,
    *,
    system: Callable[[], str] = platform.system,
    check_privilege: Callable[[str], bool] = privilege_service.check_privilege,
    terminate: Callable[..., None] = privilege_service.terminate,
    run_dashboard: Callable[[QuotaCollector, list[str]], None] = _default_runner,
) -> None:
    args = build_parser().parse_args(argv)

    if system() == "Windows":
        # group lookups rely on the unix group database
        console.print("There is currently no support for windows!")
        terminate(EXIT_UNSUPPORTED_PLATFORM)
        return

    config = ConfigService(ConfigPaths(path=args.config) if args.config else None)
    settings = config.settings(
        {
            "quota_root": args.quota_root,
            "cache_snapshots": args.cache,
            "log_path": args.log_file,
        }
    )
    setup_logging(settings)
    logger.info("starting with quota_root={} cache={}", settings.quota_root, settings.cache_snapshots)

    if not check_privilege(settings.admin_group_pattern):
        console.print("[bold red]Error:[/bold red] you are not a member of an administrative group")
        terminate(EXIT_NOT_PRIVILEGED)
        return

    try:
        groups = GroupDirectory(settings.quota_root).list_groups()
    except DirectoryError as e:
        logger.error("{}", e)
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        terminate(EXIT_NO_QUOTA_ROOT)
        return

    loader = QuotaLoader(settings.quota_root, cache=settings.cache_snapshots)
    run_dashboard(QuotaCollector(loader), groups)

    logger.info("quit")
    terminate(EXIT_OK)


def run() -> None:
    main()
