from __future__ import annotations

import asyncio
import contextlib
import functools
import logging
from typing import (
    AsyncIterator,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Set,
    Union,
)

from envkit.env import Env
from envkit.errors import InvalidPathError
from envkit.system import SystemContext

from .classifier import ExecutableClassifier, select_policy
from .filters import FilterSet
from .models import ExecutableEntry, Filter
from .policies import ExecutablePolicy

logger = logging.getLogger(__name__)

# A search directory failing with one of these is skipped, anything else
# aborts the enumeration.
SKIPPABLE_DIRECTORY_ERRORS = (FileNotFoundError, NotADirectoryError, PermissionError)

Cwd = Union[bool, str]


class ExecutableFinder:
    """
    Enumerates executables reachable through the search path.

    Every call reads ``PATH``, ``PATHEXT`` and the directories afresh; the
    first directory in search order wins when the same absolute path shows
    up twice.

    Args:
        context: Host facilities, the live process when omitted.
        suffixes: Executable suffixes overriding ``PATHEXT`` (Windows only).
    """

    def __init__(
        self,
        context: Optional[SystemContext] = None,
        suffixes: Optional[Sequence[str]] = None,
    ):
        self.context = context or SystemContext.current()
        self.suffixes = suffixes
        self.classifier = ExecutableClassifier(self.context)

    def _validate_cwd(self, cwd: Cwd, policy: ExecutablePolicy) -> None:
        if isinstance(cwd, str) and not policy.is_absolute(cwd):
            raise InvalidPathError(cwd)

    def _search_directories(self, cwd: Cwd, policy: ExecutablePolicy) -> List[str]:
        directories = Env.from_context(self.context).path.get()

        if isinstance(cwd, str):
            directories.insert(0, cwd)
        elif cwd:
            directories.insert(0, self.context.fs.cwd())

        return [directory for directory in directories if policy.is_absolute(directory)]

    def _build_entry(
        self, directory: str, basename: str, policy: ExecutablePolicy
    ) -> ExecutableEntry:
        return ExecutableEntry(
            basename=basename,
            name=policy.strip_suffix(basename),
            path=policy.join(directory, basename),
        )

    def iter_executables(
        self, cwd: Cwd = False, filters: Iterable[Filter] = ()
    ) -> Iterator[ExecutableEntry]:
        """
        Lazily yield the executables, synchronously.

        Args:
            cwd: False to skip the working directory, True to search the
                process working directory first, or a directory to search
                first.
            filters: Strings (exact) or compiled patterns (search) matched
                against basename, name and path. Empty yields everything.

        Raises:
            InvalidPathError: If ``cwd`` is a relative path.
            InvalidFilterError: If a filter has an unsupported type.
        """
        filter_set = FilterSet(filters)
        policy = select_policy(self.context, self.suffixes)
        self._validate_cwd(cwd, policy)
        return self._scan(cwd, filter_set, policy)

    def _scan(
        self, cwd: Cwd, filter_set: FilterSet, policy: ExecutablePolicy
    ) -> Iterator[ExecutableEntry]:
        yielded: Set[str] = set()

        for directory in self._search_directories(cwd, policy):
            try:
                handle = self.context.fs.scandir(directory)
            except SKIPPABLE_DIRECTORY_ERRORS as e:
                logger.debug("Skipping search directory %s: %s", directory, e)
                continue

            with handle as dir_entries:
                for dir_entry in dir_entries:
                    path = policy.join(directory, dir_entry.name)
                    if path in yielded:
                        continue

                    try:
                        if not self.classifier.is_executable_path(path, policy=policy):
                            continue
                    except OSError as e:
                        logger.debug("Skipping %s: %s", path, e)
                        continue

                    entry = self._build_entry(directory, dir_entry.name, policy)
                    if filter_set.matches(entry):
                        yielded.add(path)
                        yield entry

    def iter_executables_async(
        self, cwd: Cwd = False, filters: Iterable[Filter] = ()
    ) -> AsyncIterator[ExecutableEntry]:
        """
        Lazily yield the executables, asynchronously.

        Directory listings and status lookups run in the default executor;
        arguments are validated before the iterator is returned.
        """
        filter_set = FilterSet(filters)
        policy = select_policy(self.context, self.suffixes)
        self._validate_cwd(cwd, policy)
        return self._scan_async(cwd, filter_set, policy)

    async def _scan_async(
        self, cwd: Cwd, filter_set: FilterSet, policy: ExecutablePolicy
    ) -> AsyncIterator[ExecutableEntry]:
        loop = asyncio.get_event_loop()
        yielded: Set[str] = set()

        for directory in self._search_directories(cwd, policy):
            try:
                basenames = await loop.run_in_executor(
                    None, functools.partial(self.context.fs.listdir, directory)
                )
            except SKIPPABLE_DIRECTORY_ERRORS as e:
                logger.debug("Skipping search directory %s: %s", directory, e)
                continue

            for basename in basenames:
                path = policy.join(directory, basename)
                if path in yielded:
                    continue

                try:
                    if not await self.classifier.is_executable_path_async(
                        path, policy=policy
                    ):
                        continue
                except OSError as e:
                    logger.debug("Skipping %s: %s", path, e)
                    continue

                entry = self._build_entry(directory, basename, policy)
                if filter_set.matches(entry):
                    yielded.add(path)
                    yield entry

    def get_executable(
        self, specifier: Filter, cwd: Cwd = False
    ) -> Optional[ExecutableEntry]:
        """
        First executable matching the specifier, or None.

        Stops scanning as soon as a match is found.
        """
        with contextlib.closing(
            self.iter_executables(cwd=cwd, filters=[specifier])
        ) as entries:
            for entry in entries:
                return entry
        return None

    async def get_executable_async(
        self, specifier: Filter, cwd: Cwd = False
    ) -> Optional[ExecutableEntry]:
        async with contextlib.aclosing(
            self.iter_executables_async(cwd=cwd, filters=[specifier])
        ) as entries:
            async for entry in entries:
                return entry
        return None
