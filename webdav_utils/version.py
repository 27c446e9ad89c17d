"""
Version lookup for webdav-utils

Installed copies report the distribution metadata; a source checkout that
was never installed reads the root VERSION file.
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION_NAME = "webdav-utils"


def get_version() -> str:
    """Return the webdav-utils version string"""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        version_file = Path(__file__).parent.parent / "VERSION"
        return version_file.read_text().strip()


__version__ = get_version()
