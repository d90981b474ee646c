from __future__ import annotations

import os
from typing import Iterator, List


class FsRuntime:
    """
    Wrapper for the filesystem operations the executable lookup needs.

    Unlike a best-effort scanner, every method here lets ``OSError``
    propagate: callers decide which failures mean "nothing here".
    """

    def __init__(self, follow_symlinks: bool = True):
        self.follow_symlinks = follow_symlinks

    def cwd(self) -> str:
        return os.getcwd()

    def stat(self, path: str) -> os.stat_result:
        return os.stat(path, follow_symlinks=self.follow_symlinks)

    def scandir(self, path: str) -> Iterator[os.DirEntry]:
        """
        Open a directory for iteration. Use as a context manager so the
        handle is released when the caller stops early.
        """
        return os.scandir(path)

    def listdir(self, path: str) -> List[str]:
        """
        Entry names of a directory, in listing order.
        """
        with self.scandir(path) as entries:
            return [entry.name for entry in entries]
