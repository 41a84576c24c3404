import textwrap

from msgversions.settings import MSGVERSIONS_ERROR_ANNOTATIONS
from msgversions.utils import annotate_source


class _BaseVersionsException(Exception):
    """
    Base msgversions exception class.

    This exception is not raised directly. Other exceptions inherit it in
    order to display source annotations in the error string.
    """

    def __init__(self, message="Error Message not found.", source=None, col_offset=None, hint=None):
        """
        Exception initializer.

        Arguments
        ---------
        message : str
            Error message to display with the exception.
        source : str, optional
            The text being processed when the exception occurred, e.g. the
            version range string handed to the parser.
        col_offset : int, optional
            0-indexed column in ``source`` where the problem begins.
        hint : str | Callable[[], str], optional
            Suggestion appended to the message.
        """
        self._message = message
        self._hint = hint
        self.source = source
        self.col_offset = col_offset

    @property
    def hint(self):
        # hints may be expensive to compute, so wait until the formatted
        # message is actually requested
        if callable(self._hint):
            return self._hint()
        return self._hint

    @property
    def message(self):
        msg = self._message
        hint = self.hint
        if hint:
            msg += f"\n\n  (hint: {hint})"
        return msg

    def format_annotation(self):
        if self.source is None:
            return None

        try:
            annotation = annotate_source(self.source, self.col_offset)
        except ValueError:
            return None

        col_offset_str = "" if self.col_offset is None else f" col {self.col_offset}"
        return textwrap.indent(f"input{col_offset_str}:\n{annotation}\n", "  ")

    def __str__(self):
        if not MSGVERSIONS_ERROR_ANNOTATIONS:
            return self.message

        annotation = self.format_annotation()
        if annotation is None:
            return self.message
        return f"{self.message}\n\n{annotation}"


class VersionsException(_BaseVersionsException):
    pass


class InvalidRange(VersionsException):
    """Version range bounds are outside of the representable domain."""


class ParseError(VersionsException):
    """Version range string is malformed."""


class NotRepresentable(VersionsException):
    """Result of a range operation cannot be expressed as a single range."""

    def __init__(self, message, pieces=(), hint=None):
        super().__init__(message, hint=hint)
        self.pieces = tuple(pieces)
