import contextlib
import warnings
from typing import Optional

from msgversions.exceptions import _BaseVersionsException
from msgversions.settings import MSGVERSIONS_WARNINGS


class VersionsWarning(_BaseVersionsException, Warning):
    pass


def versions_warn(warning: VersionsWarning | str, hint=None, stacklevel: int = 1):
    """
    Emit a warning. ``stacklevel`` counts from the caller of this function,
    so 1 reports the warning at the line that called ``versions_warn``.
    """
    if isinstance(warning, str):
        warning = VersionsWarning(warning, hint=hint)
    warnings.warn(warning, stacklevel=stacklevel + 1)


@contextlib.contextmanager
def warnings_filter(warnings_control: Optional[str] = MSGVERSIONS_WARNINGS):
    # filters installed inside the block are discarded on exit
    with warnings.catch_warnings():
        set_warnings_filter(warnings_control)
        yield


def set_warnings_filter(warnings_control: Optional[str]):
    if warnings_control == "error":
        action = "error"
    elif warnings_control == "none":
        action = "ignore"
    elif warnings_control is None:
        action = "default"
    else:
        raise ValueError(f"unrecognized warnings control: {warnings_control}")

    # the newest filter wins, so this overrides any earlier control for
    # VersionsWarning and leaves filters for other categories alone
    warnings.simplefilter(action, category=VersionsWarning)


class InvertedRange(VersionsWarning):
    """
    Warn when a range is written with its bounds inverted
    """

    pass
