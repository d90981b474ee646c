from __future__ import annotations

from typing import List, Optional

from envkit.constants import DEFAULT_PATHEXT, PATHEXT_KEY
from envkit.errors import InvalidExtensionError

from .delimitation import EnvDelimitation, unique


def assert_extensions(values) -> None:
    for value in values:
        if not value.startswith("."):
            raise InvalidExtensionError(value)


class EnvPathExt:
    """
    The ``PATHEXT`` variable. Only meaningful on Windows-family platforms;
    elsewhere reads return ``None`` and writes do nothing.
    """

    def __init__(self, delimitation: EnvDelimitation, windows: bool = False):
        self.delimitation = delimitation
        self.windows = windows

    def get(self) -> Optional[List[str]]:
        if not self.windows:
            return None
        result = unique(self.delimitation.get(PATHEXT_KEY))
        return result or list(DEFAULT_PATHEXT)

    def add(self, *values: str) -> None:
        assert_extensions(values)
        if self.windows and values:
            current = unique(self.delimitation.get(PATHEXT_KEY))
            self.delimitation.set(
                PATHEXT_KEY, unique(current + [value.upper() for value in values])
            )

    def delete(self, *values: str) -> None:
        assert_extensions(values)
        if self.windows and values:
            removed = {value.upper() for value in values}
            current = unique(self.delimitation.get(PATHEXT_KEY))
            self.delimitation.set(
                PATHEXT_KEY, [value for value in current if value not in removed]
            )
