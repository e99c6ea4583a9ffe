# sismed/core/errors.py
"""
Error taxonomy shared by the store, the repository services and the facade.

The facade collapses these to ``{"detail": message}``; everything below it
works with the typed exceptions.
"""


class SismedError(Exception):
    kind = "error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class StorageUnavailable(SismedError):
    """The store file or its directory cannot be opened or created."""

    kind = "storage_unavailable"
    status_code = 503


class ConstraintViolation(SismedError):
    """A uniqueness or foreign-key rule rejected a write."""

    kind = "constraint"
    status_code = 409


class NotFound(SismedError):
    kind = "not_found"
    status_code = 404


class IoFailure(SismedError):
    kind = "io_failure"
    status_code = 500


class Cancelled(SismedError):
    """The user dismissed a file-selection dialog."""

    kind = "cancelled"
    status_code = 400

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)
