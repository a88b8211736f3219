"""Backend-neutral representation of a stored user."""

from __future__ import annotations

from dataclasses import dataclass

from usercrud_backend.database.errors import UserValidationError

REQUIRED_FIELDS = ("name", "email", "password")


@dataclass(slots=True)
class UserRecord:
    """A user as held by the store; ``id`` is assigned on insert."""

    name: str | None
    email: str | None
    password: str | None
    id: str | None = None

    def validate(self) -> None:
        """Reject records with a missing or empty required field."""

        missing = [field for field in REQUIRED_FIELDS if not getattr(self, field)]
        if missing:
            details = ", ".join(f"{field}: Path `{field}` is required." for field in missing)
            msg = f"User validation failed: {details}"
            raise UserValidationError(msg)


__all__ = ["REQUIRED_FIELDS", "UserRecord"]
