from __future__ import annotations

import logging
import os
from typing import Dict, MutableMapping, Optional

logger = logging.getLogger(__name__)


class EnvGeneral:
    """
    Plain get/set/delete access to environment variables.

    Args:
        environ: Mapping to operate on, ``os.environ`` when omitted.
    """

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    def get(self, key: str) -> Optional[str]:
        return self.environ.get(key)

    def get_all(self) -> Dict[str, str]:
        """
        Snapshot of the environment variables at invocation.
        """
        return dict(self.environ)

    def has(self, key: str) -> bool:
        return key in self.environ

    def set(self, key: str, value: str) -> None:
        logger.debug("Setting environment variable %s", key)
        self.environ[key] = value

    def delete(self, key: str) -> None:
        """
        Delete a variable; deleting a missing variable is not an error.
        """
        if self.environ.pop(key, None) is not None:
            logger.debug("Deleted environment variable %s", key)
