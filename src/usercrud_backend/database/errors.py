"""Errors raised by user store backends."""


class StoreError(Exception):
    """Raised when the underlying store fails or rejects an operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateEmailError(StoreError):
    """Raised when a write violates the unique ``email`` index."""


class UserValidationError(StoreError):
    """Raised when a record is missing one of its required fields."""


class InvalidUserIdError(StoreError):
    """Raised when an identifier cannot be interpreted by the store."""


__all__ = [
    "DuplicateEmailError",
    "InvalidUserIdError",
    "StoreError",
    "UserValidationError",
]
