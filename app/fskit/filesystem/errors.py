"""Error taxonomy for filesystem operations.

Every validated operation fails with a single exception type,
FilesystemError, tagged with one member of the closed ErrorCode enum.
Callers match on ``error.code`` rather than on exception subclasses.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Kind of a failed filesystem precondition.

    Attributes:
        NOT_A_DIRECTORY: Path is absent or is not a directory.
        NON_EXISTENT_DIRECTORY: A required directory does not exist.
        DIRECTORY_ALREADY_EXISTS: Directory exists and may not be replaced.
        NON_EXISTENT_FILE: A required file does not exist.
        NOT_A_FILE: Path is absent or is not a regular file.
        FILE_CONTENT_IS_EMPTY_OR_INVALID: Content to write or read is empty,
            of the wrong type, or cannot be (de)serialized.
    """

    NOT_A_DIRECTORY = "NOT_A_DIRECTORY"
    NON_EXISTENT_DIRECTORY = "NON_EXISTENT_DIRECTORY"
    DIRECTORY_ALREADY_EXISTS = "DIRECTORY_ALREADY_EXISTS"
    NON_EXISTENT_FILE = "NON_EXISTENT_FILE"
    NOT_A_FILE = "NOT_A_FILE"
    FILE_CONTENT_IS_EMPTY_OR_INVALID = "FILE_CONTENT_IS_EMPTY_OR_INVALID"


class FilesystemError(Exception):
    """Raised when a filesystem operation's precondition is not met.

    Attributes:
        message: Human-readable description of the failure.
        code: The ErrorCode identifying the kind of failure.
    """

    def __init__(self, message: str, code: ErrorCode) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return f"{self.message} ({self.code.value})"

    def __repr__(self) -> str:
        return f"FilesystemError({self.message!r}, {self.code})"
