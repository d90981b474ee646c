# -*- coding: utf-8 -*-
import os
from pathlib import Path

DIR_NAME = ".envkit"

# Delimiters used to join list-valued environment variables.
DELIMITER_COLON = ":"
DELIMITER_SEMICOLON = ";"

PATH_KEY = "PATH"
PATHEXT_KEY = "PATHEXT"

DEFAULT_PATHEXT = (
    ".COM",
    ".EXE",
    ".BAT",
    ".CMD",
    ".VBS",
    ".VBE",
    ".JS",
    ".JSE",
    ".WSF",
    ".WSH",
    ".MSC",
)


def get_user_dir() -> Path:
    """
    Get the user directory for the envkit configuration.

    Returns:
        Path: The user directory path.
    """
    return Path("~", DIR_NAME).expanduser()


CONFIG_FILE_NAME = "config.ini"
ENV_CONFIG_PATH = "ENVKIT_CONFIG_PATH"


def get_config_file() -> Path:
    """
    Get the config.ini location, honouring the ENVKIT_CONFIG_PATH override.
    """
    raw = os.environ.get(ENV_CONFIG_PATH)
    if raw:
        return Path(raw).expanduser()
    return get_user_dir() / CONFIG_FILE_NAME


# Exit codes
EXIT_CODE_OK = 0
EXIT_CODE_FAILURE = 1
EXIT_CODE_NOT_FOUND = 1
EXIT_CODE_INVALID_INPUT = 2
EXIT_CODE_ENVIRONMENT_ERROR = 3
