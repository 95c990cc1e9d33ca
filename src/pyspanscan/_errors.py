"""Exception hierarchy for caller contract violations.

Malformed input never raises: the scanners degrade to truncated or
not-found results instead. These exceptions cover arguments the caller
should never pass.
"""


class ScanError(Exception):
    """Base exception for scanner contract violations.

    Provides dual messaging: a short user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message

    def internal(self) -> str:
        return self.internal_details


class BufferNotWritableError(ScanError):
    """Raised when an in-place operation receives an immutable buffer."""


class InvalidLengthError(ScanError):
    """Raised when a length does not fit the supplied buffer."""


class InvalidCapacityError(ScanError):
    """Raised when a dictionary capacity is below one entry."""


class InvalidPropertyNameError(ScanError):
    """Raised when a JSON property name cannot fit the search pattern."""


ERR_MSG_NOT_WRITABLE = "buffer must be a writable bytearray"
ERR_MSG_INVALID_LENGTH = "length exceeds buffer"
ERR_MSG_INVALID_CAPACITY = "capacity must be at least one entry"
ERR_MSG_NAME_TOO_LONG = "property name too long"
ERR_MSG_NAME_NUL = "property name cannot contain null bytes"
