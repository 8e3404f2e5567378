"""
Custom exception classes for unit reference analysis.

The reference extraction core never raises; these exceptions cover the
surrounding layers (configuration, file reading) that can genuinely fail.
"""

from typing import Optional


class UnitRefError(Exception):
    """Base exception class for all unit reference analysis errors.

    Attributes:
        message: Human-readable error message describing the error.
    """

    def __init__(self, message: str) -> None:
        """Initialize a UnitRefError with a message.

        Args:
            message: Error message describing what went wrong.
        """
        self.message = message
        super().__init__(self.message)


class UnitFileReadError(UnitRefError):
    """Exception raised when a unit file cannot be read or decoded.

    Attributes:
        message: Error message describing the failure.
        path: Path of the file that could not be read.
        reason: Optional description of the underlying failure.
    """

    def __init__(
        self, message: str, path: str, reason: Optional[str] = None
    ) -> None:
        """Initialize a UnitFileReadError.

        Args:
            message: Error message describing the failure.
            path: Path of the file that could not be read.
            reason: Optional description of the underlying failure.
        """
        self.path = path
        self.reason = reason

        if reason:
            message = f"{message}: {reason}"

        super().__init__(message)


class ConfigurationError(UnitRefError):
    """Exception raised when an ExtractorConfig holds invalid values.

    Attributes:
        message: Error message describing the invalid setting.
        field_name: Name of the offending configuration field.
    """

    def __init__(self, message: str, field_name: str) -> None:
        super().__init__(message)
        self.field_name = field_name
