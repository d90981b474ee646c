from __future__ import annotations

import logging
import ntpath
import posixpath
from typing import List

from envkit.constants import PATH_KEY
from envkit.errors import InvalidPathError

from .delimitation import EnvDelimitation, unique

logger = logging.getLogger(__name__)


class EnvPath:
    """
    The ``PATH`` variable as an ordered, de-duplicated list of absolute
    directories.
    """

    def __init__(self, delimitation: EnvDelimitation, windows: bool = False):
        self.delimitation = delimitation
        self.pathmod = ntpath if windows else posixpath

    def _assert_absolute(self, values) -> None:
        for value in values:
            if not self.pathmod.isabs(value):
                raise InvalidPathError(value)

    def get(self) -> List[str]:
        return unique(self.delimitation.get(PATH_KEY))

    def add(self, *values: str) -> None:
        """
        Append directories that are not already present.

        Raises:
            InvalidPathError: If any value is not an absolute path.
        """
        self._assert_absolute(values)
        if values:
            self.delimitation.set(PATH_KEY, unique(self.get() + list(values)))

    def prepend(self, *values: str) -> None:
        """
        Move or insert directories at the front, keeping their given order.
        """
        self._assert_absolute(values)
        if values:
            self.delimitation.set(PATH_KEY, unique(list(values) + self.get()))

    def delete(self, *values: str) -> None:
        self._assert_absolute(values)
        if not values:
            return

        stored = self.delimitation.get(PATH_KEY)
        result = unique(stored)
        had_duplicates = len(result) != len(stored)
        remaining = [value for value in result if value not in values]

        if had_duplicates or len(remaining) != len(result):
            logger.debug(
                "Rewriting PATH, %d entries removed", len(stored) - len(remaining)
            )
            self.delimitation.set(PATH_KEY, remaining)
