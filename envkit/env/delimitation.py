from __future__ import annotations

from typing import Iterable, List

from envkit.constants import DELIMITER_COLON, DELIMITER_SEMICOLON

from .general import EnvGeneral


def get_delimiter(windows: bool) -> str:
    return DELIMITER_SEMICOLON if windows else DELIMITER_COLON


def unique(values: Iterable[str]) -> List[str]:
    """
    Drop repeated values, keeping the first occurrence in place.
    """
    return list(dict.fromkeys(values))


class EnvDelimitation:
    """
    Treats an environment variable as an ordered list of non-empty
    strings joined by the platform delimiter.

    Args:
        general: Underlying variable accessor.
        windows: Selects ``;`` instead of ``:`` as the delimiter.
    """

    def __init__(self, general: EnvGeneral, windows: bool = False):
        self.general = general
        self.delimiter = get_delimiter(windows)

    def get(self, key: str) -> List[str]:
        raw = self.general.get(key) or ""
        return [value for value in raw.split(self.delimiter) if value]

    def set(self, key: str, values: Iterable[str]) -> None:
        self.general.set(key, self.delimiter.join(value for value in values if value))

    def append(self, key: str, *values: str) -> None:
        self.set(key, self.get(key) + list(values))

    def prepend(self, key: str, *values: str) -> None:
        self.set(key, list(values) + self.get(key))

    def insert(self, key: str, index: int, *values: str) -> None:
        current = self.get(key)
        current[index:index] = values
        self.set(key, current)

    def remove(self, key: str, *values: str) -> bool:
        """
        Remove every occurrence of the given values.

        Returns:
            bool: True if the variable was rewritten.
        """
        current = self.get(key)
        remaining = [value for value in current if value not in values]
        if len(remaining) == len(current):
            return False
        self.set(key, remaining)
        return True

    def dedupe(self, key: str) -> bool:
        """
        Rewrite the variable without repeated values.

        Returns:
            bool: True if duplicates were found and removed.
        """
        current = self.get(key)
        deduped = unique(current)
        if len(deduped) == len(current):
            return False
        self.set(key, deduped)
        return True
