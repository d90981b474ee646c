from __future__ import annotations

from dataclasses import asdict, dataclass
import re
from typing import Dict, Union

Filter = Union[str, "re.Pattern[str]"]


@dataclass(frozen=True)
class ExecutableEntry:
    """
    An executable found through the search path.
    """

    basename: str  # directory entry name, e.g. "git.exe"
    name: str  # basename without the executable suffix on Windows, e.g. "git"
    path: str  # absolute path

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
