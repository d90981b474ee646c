from importlib.metadata import PackageNotFoundError, version
import logging
from typing import Optional


LOG = logging.getLogger(__name__)


def get_version() -> Optional[str]:
    """
    Get the version of the envkit package.

    Returns:
      Optional[str]: The envkit version if found, otherwise None.
    """
    try:
        return version("envkit")
    except PackageNotFoundError:
        LOG.exception("Unable to get envkit version.")
        return None
