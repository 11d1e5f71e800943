"""Fatal conversion errors."""

from rgss_serializer.domain.enums import ErrorKind


class ConversionError(Exception):
    """Base class for errors that abort a conversion run."""

    kind: ErrorKind = ErrorKind.CODEC_FAILURE

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class MissingSourceError(ConversionError):
    """A required input file or directory does not exist."""

    kind = ErrorKind.MISSING_SOURCE


class MissingDependencyError(ConversionError):
    """A script index entry references a file that does not exist."""

    kind = ErrorKind.MISSING_DEPENDENCY


class UnrecognizedDirectionError(ConversionError):
    """An unknown top-level conversion mode was requested."""

    kind = ErrorKind.UNRECOGNIZED_DIRECTION
