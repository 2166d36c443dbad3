"""Custom exception hierarchy for mdbook-abbr configuration and processing."""


class MdbookAbbrError(Exception):
    """Base exception for all mdbook-abbr errors.

    All mdbook-abbr specific exceptions inherit from this class, so the CLI
    can map them to exit codes in one place.
    """

    pass


class ConfigError(MdbookAbbrError):
    """Exception raised for configuration errors.

    Raised when the abbreviation table cannot be read, has the wrong shape,
    or contains an abbreviation that cannot be compiled into a pattern.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class FileNotFoundError(MdbookAbbrError):
    """Exception raised when an abbreviation file is not found.

    Attributes:
        path: Path to the file that was not found
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FileNotFoundError with path and message.

        Args:
            path: Path to the file that was not found
            message: Descriptive error message, optionally with suggestions
        """
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")


class InputError(MdbookAbbrError):
    """Exception raised when the preprocessor input cannot be decoded."""

    def __init__(self, message: str) -> None:
        """Create an input error for malformed [context, book] payloads."""
        self.message = message
        super().__init__(message)
