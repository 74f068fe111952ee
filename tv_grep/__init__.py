import logging
from importlib.metadata import version, PackageNotFoundError

logger = logging.getLogger(__name__)
PACKAGE_NAME = "tv-grep"
try:
    __version__ = version(PACKAGE_NAME)
except PackageNotFoundError:
    # package is not installed
    logger.debug(f"Package '{PACKAGE_NAME}' is not installed")
    __version__ = "0.0.0"
