from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _version

from msgversions.exceptions import InvalidRange, NotRepresentable, ParseError, VersionsException
from msgversions.versions import (
    ALL,
    MAX_VERSION,
    MIN_VERSION,
    NONE,
    NONE_STRING,
    VersionRange,
    parse,
)

__version__: str
try:
    __version__ = _version(__name__)
except PackageNotFoundError:
    # running from a source checkout that was never installed
    __version__ = "0.0.0+unknown"
