"""Application exceptions."""


class AppError(Exception):
    """Base exception for application errors."""


class InvalidTeacherError(AppError):
    """Raised when a candidate teacher record fails validation."""

    def __init__(self, message: str = "Invalid teacher data"):
        super().__init__(message)


class RecordNotFoundError(AppError):
    """Raised when a record is not found in the collection."""

    def __init__(self, model_name: str, record_id: str):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(f"{model_name} with id={record_id} not found")


class StorageError(AppError):
    """Base exception for storage file operations."""


class StorageWriteError(StorageError):
    """Raised when the collection cannot be written back to its file.

    Only raised when strict persistence is enabled; otherwise write
    failures are logged and swallowed by the store.
    """

    def __init__(self, path: str, original_error: str):
        """Initialize StorageWriteError.

        Args:
            path: Storage file that could not be written.
            original_error: Original error message from the filesystem.
        """
        self.path = path
        self.original_error = original_error
        super().__init__(f"Failed to write {path}: {original_error}")


class OperationFailedError(AppError):
    """Raised when an endpoint fails unexpectedly.

    Carries the fixed, endpoint-specific message returned to the client.
    The underlying exception is chained as ``__cause__``.
    """
