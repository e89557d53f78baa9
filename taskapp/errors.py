"""
Errors shared by the Task API server and its clients.
"""


class TaskError(Exception):
    """Base class for task errors. Carries a user-facing message."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskError):
    status_code = 400


class NotFoundError(TaskError):
    status_code = 404

    def __init__(self, message: str = "Task not found"):
        super().__init__(message)


class TransportError(TaskError):
    """The server could not be reached at all."""


class RequestFailedError(TaskError):
    """The server answered, but not with the status we expected."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


def describe_error(error: Exception, action: str = "load tasks") -> str:
    """Turn an error into the message shown to the user."""
    if isinstance(error, TransportError):
        return "Server is unreachable. Please make sure the backend is running."
    if isinstance(error, (ValidationError, NotFoundError)):
        return error.message
    return f"Failed to {action}. Please try again later."
