from typing import Optional

from envkit.constants import (
    EXIT_CODE_ENVIRONMENT_ERROR,
    EXIT_CODE_FAILURE,
    EXIT_CODE_INVALID_INPUT,
)


class EnvkitException(Exception):
    """
    Base exception for unexpected envkit failures.

    Args:
        message (str): The error message template.
        info (str): Additional information to include in the error message.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred in envkit: {info}",
        info: str = "",
    ):
        self.message = message.format(info=info)
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        return EXIT_CODE_FAILURE


class EnvkitError(Exception):
    """
    Generic envkit error.

    Args:
        message (str): The error message.
        error_code (Optional[int]): The error code.
    """

    def __init__(
        self,
        message: str = "An error occurred while running envkit.",
        error_code: Optional[int] = None,
    ):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        """
        Get the exit code associated with this error.

        Returns:
            int: The exit code.
        """
        return EXIT_CODE_FAILURE


class ValidationError(EnvkitError):
    """
    Error raised when a caller supplies a malformed value. Always raised
    before any environment or filesystem access happens.
    """

    def get_exit_code(self) -> int:
        return EXIT_CODE_INVALID_INPUT


class InvalidPathError(ValidationError):
    """
    Error raised when a directory value is not an absolute path.

    Args:
        value (str): The offending value.
    """

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"`{value}` is not an absolute path!")


class InvalidExtensionError(ValidationError):
    """
    Error raised when an executable suffix does not start with a dot.

    Args:
        value (str): The offending value.
    """

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"`{value}` is not a valid file extension!")


class InvalidFilterError(ValidationError):
    """
    Error raised when a filter is neither a string nor a compiled pattern.

    Args:
        value (object): The offending filter.
        reason (Optional[str]): Extra detail, e.g. a regex compile error.
    """

    def __init__(self, value: object, reason: Optional[str] = None):
        self.value = value
        message = f"`{value!r}` is not a valid executable filter!"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class EnvironmentStateError(EnvkitError):
    """
    Error raised when the host cannot provide information the POSIX
    classification needs. Fatal for the whole enumeration.
    """

    def get_exit_code(self) -> int:
        return EXIT_CODE_ENVIRONMENT_ERROR


class IdentityUnavailableError(EnvironmentStateError):
    """
    Error raised when the process user or group ID cannot be determined.

    Args:
        kind (str): Either "user" or "group".
    """

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unable to get the {kind} ID of the process!")


class FileStatusUnavailableError(EnvironmentStateError):
    """
    Error raised when a file status lacks the mode or ownership fields.

    Args:
        path (str): The file being classified.
        field (str): The missing field, e.g. "mode".
    """

    def __init__(self, path: str, field: str):
        self.path = path
        self.field = field
        super().__init__(f"Unable to get the {field} of the file `{path}`!")
