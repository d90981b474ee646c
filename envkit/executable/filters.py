from __future__ import annotations

import re
from typing import Iterable, Tuple

from envkit.errors import InvalidFilterError

from .models import ExecutableEntry, Filter


def compile_pattern(raw: str) -> re.Pattern:
    """
    Compile a user supplied regular expression into a filter.

    Raises:
        InvalidFilterError: If the expression does not compile.
    """
    try:
        return re.compile(raw)
    except re.error as e:
        raise InvalidFilterError(raw, reason=str(e)) from e


class FilterSet:
    """
    Name/path filters for discovered executables.

    A string matches by equality, a compiled pattern by ``search``; both are
    tried against the basename, the stripped name and the full path. An
    empty set matches everything.
    """

    def __init__(self, filters: Iterable[Filter] = ()):
        self.filters: Tuple[Filter, ...] = tuple(filters)
        for item in self.filters:
            if not isinstance(item, (str, re.Pattern)):
                raise InvalidFilterError(item)

    def __len__(self) -> int:
        return len(self.filters)

    def matches(self, entry: ExecutableEntry) -> bool:
        if not self.filters:
            return True

        candidates = (entry.basename, entry.name, entry.path)
        for item in self.filters:
            if isinstance(item, str):
                if item in candidates:
                    return True
            elif any(item.search(candidate) for candidate in candidates):
                return True
        return False
