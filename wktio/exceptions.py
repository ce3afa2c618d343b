import click

# Exit codes

# Reserved for defects in wktio itself, never for bad input.
UNCATEGORIZED_ERROR = 11

GEOMETRY_ERROR = 26
INVALID_FILE_FORMAT = 28


class WKTError(click.ClickException):
    """
    A ClickException that can easily be constructed with any exit code.
    Every error raised by wktio is one of these, so an application built on click
    reports them the same way as its own errors.
    """

    exit_code = UNCATEGORIZED_ERROR

    def __init__(self, message, *, exit_code=None):
        super(WKTError, self).__init__(message)

        if exit_code is not None:
            self.exit_code = exit_code


class ParseError(WKTError):
    """
    The input text is not WKT that wktio understands.
    token - the token where parsing failed, if there was one.
    """

    exit_code = INVALID_FILE_FORMAT

    def __init__(self, message, *, token=None):
        super().__init__(message)
        self.token = token


class TokenizationError(ParseError):
    """Part of the input text isn't any kind of WKT token."""

    def __init__(self, message, *, text=None, offset=None):
        super().__init__(message)
        self.text = text
        self.offset = offset

    @property
    def fragment(self):
        """Up to 20 characters of the input starting at the offending offset."""
        if self.text is None or self.offset is None:
            return None
        return self.text[self.offset : self.offset + 20]


class GeometryError(WKTError):
    exit_code = GEOMETRY_ERROR


class InternalError(WKTError):
    """
    Something that can't happen, happened. These indicate a bug in wktio,
    not a problem with the caller's input.
    """

    exit_code = UNCATEGORIZED_ERROR
