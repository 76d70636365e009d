"""Custom exceptions for pullem"""

from typing import Optional


class PullemError(Exception):
    """Base exception for all pullem errors."""
    pass


class GitOperationError(PullemError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class WalkError(PullemError):
    """Exception raised when the directory tree cannot be walked at all."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        self.message = message

        error_msg = f"Cannot walk '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


def describe_error(error: Exception) -> str:
    """Collapse an exception message onto a single line."""
    return " ".join(str(error).split())
