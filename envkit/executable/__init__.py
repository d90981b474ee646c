"""
Executable discovery through the search path.

The module level functions operate on the live process; build an
``ExecutableFinder`` or ``ExecutableClassifier`` with a ``SystemContext``
to work against a fabricated host.
"""

from __future__ import annotations

from typing import AsyncIterator, Iterable, Iterator, Optional, Sequence

from .classifier import ExecutableClassifier, select_policy
from .enumerator import Cwd, ExecutableFinder
from .filters import FilterSet, compile_pattern
from .models import ExecutableEntry, Filter
from .policies import ExecutablePolicy, PosixPolicy, WindowsPolicy


def iter_executables(
    cwd: Cwd = False, filters: Iterable[Filter] = ()
) -> Iterator[ExecutableEntry]:
    """Lazily yield the executables on the live search path."""
    return ExecutableFinder().iter_executables(cwd=cwd, filters=filters)


def iter_executables_async(
    cwd: Cwd = False, filters: Iterable[Filter] = ()
) -> AsyncIterator[ExecutableEntry]:
    """Async form of ``iter_executables``."""
    return ExecutableFinder().iter_executables_async(cwd=cwd, filters=filters)


def get_executable(specifier: Filter, cwd: Cwd = False) -> Optional[ExecutableEntry]:
    """First executable on the live search path matching the specifier."""
    return ExecutableFinder().get_executable(specifier, cwd=cwd)


async def get_executable_async(
    specifier: Filter, cwd: Cwd = False
) -> Optional[ExecutableEntry]:
    """Async form of ``get_executable``."""
    return await ExecutableFinder().get_executable_async(specifier, cwd=cwd)


def is_executable_path(
    path: str,
    may_not_exist: bool = False,
    gid: Optional[int] = None,
    uid: Optional[int] = None,
    suffixes: Optional[Sequence[str]] = None,
) -> bool:
    """Whether the path is executable for the live process."""
    return ExecutableClassifier().is_executable_path(
        path, may_not_exist=may_not_exist, gid=gid, uid=uid, suffixes=suffixes
    )


async def is_executable_path_async(
    path: str,
    may_not_exist: bool = False,
    gid: Optional[int] = None,
    uid: Optional[int] = None,
    suffixes: Optional[Sequence[str]] = None,
) -> bool:
    """Async form of ``is_executable_path``."""
    return await ExecutableClassifier().is_executable_path_async(
        path, may_not_exist=may_not_exist, gid=gid, uid=uid, suffixes=suffixes
    )


__all__ = [
    "Cwd",
    "ExecutableClassifier",
    "ExecutableEntry",
    "ExecutableFinder",
    "ExecutablePolicy",
    "Filter",
    "FilterSet",
    "PosixPolicy",
    "WindowsPolicy",
    "compile_pattern",
    "get_executable",
    "get_executable_async",
    "is_executable_path",
    "is_executable_path_async",
    "iter_executables",
    "iter_executables_async",
    "select_policy",
]
