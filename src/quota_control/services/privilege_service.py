from __future__ import annotations

import os
import re
from typing import Callable, Iterable, NoReturn

import psutil
from loguru import logger

from quota_control.services.config_service import DEFAULT_ADMIN_PATTERN


def current_group_names() -> list[str]:
    import grp  # unix only

    proc = psutil.Process()
    user = proc.username()
    gid = proc.gids().real

    names: list[str] = []
    for g in os.getgrouplist(user, gid):
        try:
            names.append(grp.getgrgid(g).gr_name)
        except KeyError:
            continue
    return names


def is_admin(group_names: Iterable[str], pattern: str = DEFAULT_ADMIN_PATTERN) -> bool:
    rx = re.compile(pattern)
    return any(rx.match(name) for name in group_names)


def check_privilege(pattern: str = DEFAULT_ADMIN_PATTERN) -> bool:
    try:
        names = current_group_names()
    except (psutil.Error, OSError, KeyError) as e:
        logger.error("group lookup failed: {}", e)
        return False
    ok = is_admin(names, pattern)
    logger.info("privilege check: groups={} admin={}", names, ok)
    return ok


def terminate(code: int, cleanup: Callable[[], None] | None = None) -> NoReturn:
    if cleanup is not None:
        cleanup()
    raise SystemExit(code)
