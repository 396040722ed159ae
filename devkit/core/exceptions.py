"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every failure the CLI can report derives from ApplicationError; the command
router prints the message and exits non-zero.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when local configuration is missing or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")


class StorageError(ApplicationError):
    """Raised when the profile file cannot be read or written."""

    def __init__(self, message: str = "Storage error") -> None:
        super().__init__(message, code="STORAGE_IO_ERROR")


class ProfileFileError(ConfigurationError, StorageError):
    """Raised when the profile file exists but is not a valid profile store."""

    def __init__(self, message: str = "Invalid profile file") -> None:
        ApplicationError.__init__(self, message, code="CFG_PROFILE_FILE_INVALID")


class TransportError(ApplicationError):
    """Raised when a request could not be sent or no response arrived."""

    def __init__(self, message: str = "Transport error") -> None:
        super().__init__(message, code="API_TRANSPORT_ERROR")


class RequestError(ApplicationError):
    """Raised when the service answers with a non-success status."""

    def __init__(
        self,
        status_code: int,
        body: str,
        method: str | None = None,
        path: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.method = method
        self.path = path
        target = f"{method} {path}" if method and path else "Request"
        super().__init__(
            f"{target} failed with status {status_code}: {body}",
            code="API_REQUEST_FAILED",
        )


class DecodeError(ApplicationError):
    """Raised when a success response does not match the expected shape."""

    def __init__(self, message: str = "Unexpected response body") -> None:
        super().__init__(message, code="API_DECODE_ERROR")
