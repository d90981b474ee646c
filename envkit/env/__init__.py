"""Environment variable accessors, including list-valued variables."""

from __future__ import annotations

from typing import MutableMapping, Optional

from envkit.system import SystemContext, is_windows

from .delimitation import EnvDelimitation, get_delimiter, unique
from .general import EnvGeneral
from .path import EnvPath
from .pathext import EnvPathExt


class Env(EnvGeneral):
    """
    Environment accessor with list helpers for ``PATH`` and ``PATHEXT``.

    Args:
        environ: Mapping to operate on, ``os.environ`` when omitted.
        windows: Platform flag, detected from the interpreter when omitted.
    """

    def __init__(
        self,
        environ: Optional[MutableMapping[str, str]] = None,
        windows: Optional[bool] = None,
    ):
        super().__init__(environ)
        self.windows = is_windows() if windows is None else windows
        self.delimitation = EnvDelimitation(self, windows=self.windows)
        self.path = EnvPath(self.delimitation, windows=self.windows)
        self.pathext = EnvPathExt(self.delimitation, windows=self.windows)

    @classmethod
    def from_context(cls, context: SystemContext) -> Env:
        return cls(context.environ, windows=context.windows)


env = Env()

__all__ = [
    "Env",
    "EnvDelimitation",
    "EnvGeneral",
    "EnvPath",
    "EnvPathExt",
    "env",
    "get_delimiter",
    "unique",
]
