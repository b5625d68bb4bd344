"""Domain exceptions raised by services and translated by the API layer."""

from __future__ import annotations

from typing import Literal

IntegrityKind = Literal["unique", "foreign_key", "check", "not_null", "unknown"]


class ForumError(Exception):
    """Base class for failures that surface to the user as a notification."""

    status_code: int = 400
    default_detail: str = "Request failed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationFailure(ForumError):
    """Field-length or enum checks failed before anything was submitted."""

    status_code = 422
    default_detail = "Invalid input"


class AuthenticationFailure(ForumError):
    """Credentials are missing, invalid, expired, or revoked."""

    status_code = 401
    default_detail = "Could not validate credentials"


class AuthorizationFailure(ForumError):
    """A row-level policy rejected the operation.

    The detail is always generic so callers cannot probe which rows exist
    or who owns them.
    """

    status_code = 403
    default_detail = "Not authorized"

    def __init__(self) -> None:
        super().__init__(self.default_detail)


class IntegrityFailure(ForumError):
    """A uniqueness, foreign-key, or check constraint rejected a write."""

    status_code = 409
    default_detail = "Conflicting data"

    def __init__(self, detail: str | None = None, *, kind: IntegrityKind = "unknown") -> None:
        super().__init__(detail)
        self.kind = kind
        if kind in ("check", "not_null"):
            self.status_code = 422


class NotFound(ForumError):
    """The referenced entity does not exist."""

    status_code = 404
    default_detail = "Not found"
