"""
Platform rules deciding whether a regular file counts as executable.

Windows-family platforms go by file suffix (``PATHEXT``); everything else
goes by permission bits and ownership.
"""

from __future__ import annotations

import ntpath
import posixpath
import stat
from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

from envkit.errors import FileStatusUnavailableError, IdentityUnavailableError

OWNER_EXECUTE = stat.S_IXUSR  # 0o100
GROUP_EXECUTE = stat.S_IXGRP  # 0o010
OTHERS_EXECUTE = stat.S_IXOTH  # 0o001


class ExecutablePolicy(ABC):
    """
    Base class for the per-platform classification rules.
    """

    pathmod = posixpath

    def is_absolute(self, path: str) -> bool:
        return self.pathmod.isabs(path)

    def join(self, directory: str, basename: str) -> str:
        return self.pathmod.join(directory, basename)

    @abstractmethod
    def is_executable(
        self,
        path: str,
        st,
        uid: Optional[int] = None,
        gid: Optional[int] = None,
    ) -> bool:
        """
        Classify a path already known to be a regular file.
        """
        pass

    @abstractmethod
    def strip_suffix(self, basename: str) -> str:
        pass


class PosixPolicy(ExecutablePolicy):
    """
    Permission bit rules.

    Executable when others may execute, when the group may execute and the
    group matches, when the owner may execute and the owner matches, or when
    the effective user is root and the owner or group may execute.

    Args:
        get_uid: Provider of the process user ID, used when no uid is given.
        get_gid: Provider of the process group ID, used when no gid is given.
    """

    pathmod = posixpath

    def __init__(
        self,
        get_uid: Callable[[], Optional[int]],
        get_gid: Callable[[], Optional[int]],
    ):
        self.get_uid = get_uid
        self.get_gid = get_gid

    def is_executable(self, path, st, uid=None, gid=None) -> bool:
        own_gid = gid if gid is not None else self.get_gid()
        own_uid = uid if uid is not None else self.get_uid()
        if own_gid is None:
            raise IdentityUnavailableError("group")
        if own_uid is None:
            raise IdentityUnavailableError("user")

        path_gid = getattr(st, "st_gid", None)
        path_mode = getattr(st, "st_mode", None)
        path_uid = getattr(st, "st_uid", None)
        if path_gid is None:
            raise FileStatusUnavailableError(path, "group ID")
        if path_mode is None:
            raise FileStatusUnavailableError(path, "mode")
        if path_uid is None:
            raise FileStatusUnavailableError(path, "user ID")

        return bool(
            path_mode & OTHERS_EXECUTE
            or (path_mode & GROUP_EXECUTE and own_gid == path_gid)
            or (path_mode & OWNER_EXECUTE and own_uid == path_uid)
            or (path_mode & (OWNER_EXECUTE | GROUP_EXECUTE) and own_uid == 0)
        )

    def strip_suffix(self, basename: str) -> str:
        return basename


class WindowsPolicy(ExecutablePolicy):
    """
    Suffix rules: the lowercased path must end with a lowercased known
    suffix without being that suffix itself.

    Args:
        suffixes: Known executable suffixes, e.g. ``[".COM", ".EXE"]``.
    """

    pathmod = ntpath

    def __init__(self, suffixes: Sequence[str]):
        self.suffixes = [suffix.lower() for suffix in suffixes]

    def is_executable(self, path, st=None, uid=None, gid=None) -> bool:
        lowered = path.lower()
        return any(
            lowered != suffix and lowered.endswith(suffix) for suffix in self.suffixes
        )

    def strip_suffix(self, basename: str) -> str:
        return ntpath.splitext(basename)[0]
