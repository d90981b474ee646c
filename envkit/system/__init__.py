"""Injectable host facilities: environment, filesystem, platform, identity."""

from .context import (
    SystemContext,
    get_process_gid,
    get_process_uid,
    is_windows,
)
from .runtime import FsRuntime

__all__ = [
    "FsRuntime",
    "SystemContext",
    "get_process_gid",
    "get_process_uid",
    "is_windows",
]
