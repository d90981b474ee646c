from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Callable, MutableMapping, Optional

from .runtime import FsRuntime


def is_windows() -> bool:
    """
    Whether the interpreter runs on native Windows; Cygwin is POSIX.
    """
    return sys.platform.startswith("win")


def get_process_uid() -> Optional[int]:
    getuid = getattr(os, "getuid", None)
    return getuid() if getuid else None


def get_process_gid() -> Optional[int]:
    getgid = getattr(os, "getgid", None)
    return getgid() if getgid else None


@dataclass(frozen=True)
class SystemContext:
    """
    Host facilities consumed by the executable lookup.

    Everything ambient (environment, filesystem, platform, process
    identity) goes through this object so tests can fabricate a host.
    """

    environ: MutableMapping[str, str]
    fs: FsRuntime = field(default_factory=FsRuntime)
    windows: bool = False
    get_uid: Callable[[], Optional[int]] = get_process_uid
    get_gid: Callable[[], Optional[int]] = get_process_gid

    @classmethod
    def current(cls) -> SystemContext:
        return cls(environ=os.environ, fs=FsRuntime(), windows=is_windows())
