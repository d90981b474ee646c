import logging
import os
from configparser import ConfigParser, Error as ConfigParserError
from pathlib import Path
from typing import List, NamedTuple, Optional, Tuple

from envkit.constants import get_config_file

from .log_codes import (
    SETTINGS_FILE_MISSING,
    SETTINGS_FILE_UNREADABLE,
    SETTINGS_RESOLVED,
)

logger = logging.getLogger(__name__)

EXECUTABLE_SECTION_NAME = "executable"
INCLUDE_CWD_KEY = "include_cwd"
SUFFIXES_KEY = "suffixes"

ENV_INCLUDE_CWD = "ENVKIT_INCLUDE_CWD"
ENV_SUFFIXES = "ENVKIT_SUFFIXES"

DEFAULT_INCLUDE_CWD = False

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


class Settings(NamedTuple):
    """
    Lookup settings.

    Args:
        include_cwd (bool): Search the working directory before PATH.
        suffixes (Optional[List[str]]): Executable suffixes overriding
            PATHEXT on Windows, None to use PATHEXT.
    """

    include_cwd: bool
    suffixes: Optional[List[str]]


def _parse_bool(raw: str, source: str) -> bool:
    """
    Parse a boolean setting.

    Raises:
        ValueError: If the value is not a recognised boolean.
    """
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean {raw!r} for {INCLUDE_CWD_KEY} via {source}")


def _parse_suffixes(raw: str, source: str) -> Optional[List[str]]:
    """
    Parse suffixes separated by commas, semicolons or whitespace.

    Raises:
        ValueError: If a suffix does not start with a dot.
    """
    values = [value for value in raw.replace(";", " ").replace(",", " ").split()]
    if not values:
        return None

    invalid = [value for value in values if not value.startswith(".")]
    if invalid:
        raise ValueError(
            f"Invalid executable suffixes via {source}: {', '.join(invalid)}"
        )
    return values


def _read_config_ini(path: Path) -> Tuple[Optional[str], Optional[str]]:
    if not path.exists():
        logger.debug(SETTINGS_FILE_MISSING, extra={"path": str(path)})
        return None, None

    config = ConfigParser()
    try:
        config.read(path, encoding="utf-8")
    except (ConfigParserError, UnicodeDecodeError):
        logger.exception(SETTINGS_FILE_UNREADABLE, extra={"path": str(path)})
        return None, None

    if not config.has_section(EXECUTABLE_SECTION_NAME):
        return None, None

    section = config[EXECUTABLE_SECTION_NAME]
    return section.get(INCLUDE_CWD_KEY), section.get(SUFFIXES_KEY)


def get_settings(
    include_cwd: Optional[bool] = None,
    config_path: Optional[Path] = None,
) -> Settings:
    """
    Resolve the settings.

    Precedence per setting: explicit argument, environment variable,
    config.ini, default.

    Args:
        include_cwd (Optional[bool]): Value given on the command line.
        config_path (Optional[Path]): config.ini location override.

    Returns:
        Settings: The resolved settings.
    """
    ini_include_cwd, ini_suffixes = _read_config_ini(config_path or get_config_file())

    if include_cwd is not None:
        resolved_cwd, cwd_source = include_cwd, "cli"
    elif os.environ.get(ENV_INCLUDE_CWD):
        resolved_cwd = _parse_bool(os.environ[ENV_INCLUDE_CWD], "env")
        cwd_source = "env"
    elif ini_include_cwd:
        resolved_cwd = _parse_bool(ini_include_cwd, "config.ini")
        cwd_source = "config.ini"
    else:
        resolved_cwd, cwd_source = DEFAULT_INCLUDE_CWD, "default"

    suffixes = None
    if os.environ.get(ENV_SUFFIXES):
        suffixes = _parse_suffixes(os.environ[ENV_SUFFIXES], "env")
    elif ini_suffixes:
        suffixes = _parse_suffixes(ini_suffixes, "config.ini")

    logger.debug(
        SETTINGS_RESOLVED,
        extra={"include_cwd": resolved_cwd, "source": cwd_source},
    )
    return Settings(include_cwd=resolved_cwd, suffixes=suffixes)
