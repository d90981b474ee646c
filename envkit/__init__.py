# -*- coding: utf-8 -*-
"""Environment variable accessors and executable discovery."""

from envkit.constants import DELIMITER_COLON, DELIMITER_SEMICOLON
from envkit.env import (
    Env,
    EnvDelimitation,
    EnvGeneral,
    EnvPath,
    EnvPathExt,
    env,
)
from envkit.executable import (
    ExecutableClassifier,
    ExecutableEntry,
    ExecutableFinder,
    get_executable,
    get_executable_async,
    is_executable_path,
    is_executable_path_async,
    iter_executables,
    iter_executables_async,
)
from envkit.system import FsRuntime, SystemContext

DELIMITER = env.delimitation.delimiter

__all__ = [
    "DELIMITER",
    "DELIMITER_COLON",
    "DELIMITER_SEMICOLON",
    "Env",
    "EnvDelimitation",
    "EnvGeneral",
    "EnvPath",
    "EnvPathExt",
    "ExecutableClassifier",
    "ExecutableEntry",
    "ExecutableFinder",
    "FsRuntime",
    "SystemContext",
    "env",
    "get_executable",
    "get_executable_async",
    "is_executable_path",
    "is_executable_path_async",
    "iter_executables",
    "iter_executables_async",
]
