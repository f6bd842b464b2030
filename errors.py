"""Error taxonomy for the media download pipeline."""

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of fatal failures."""

    USAGE = "usage"
    PATTERN_MISMATCH = "pattern_mismatch"
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    FILESYSTEM = "filesystem"


EXIT_CODES = {
    ErrorKind.USAGE: 1,
    ErrorKind.PATTERN_MISMATCH: 2,
    ErrorKind.CONFIGURATION: 3,
    ErrorKind.TRANSPORT: 4,
    ErrorKind.PROTOCOL: 5,
    ErrorKind.FILESYSTEM: 6,
}


class MediaFetchError(Exception):
    """Base class for every failure that aborts a run."""

    kind: ErrorKind = ErrorKind.PROTOCOL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def exit_code(self) -> int:
        return EXIT_CODES[self.kind]


class UsageError(MediaFetchError):
    kind = ErrorKind.USAGE


class PatternMismatchError(MediaFetchError):
    kind = ErrorKind.PATTERN_MISMATCH


class ConfigurationError(MediaFetchError):
    kind = ErrorKind.CONFIGURATION


class TransportError(MediaFetchError):
    kind = ErrorKind.TRANSPORT


class ProtocolError(MediaFetchError):
    kind = ErrorKind.PROTOCOL


class FilesystemError(MediaFetchError):
    kind = ErrorKind.FILESYSTEM
