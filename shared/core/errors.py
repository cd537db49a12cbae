"""Domain errors shared by every service.

Each error carries a stable code, a user-safe message and the HTTP status
the exception handlers answer with.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Domain error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    INVALID_STATUS = "INVALID_STATUS"
    MISSING_FILE = "MISSING_FILE"
    SPACE_NOT_FOUND = "SPACE_NOT_FOUND"
    ADOPTION_NOT_FOUND = "ADOPTION_NOT_FOUND"
    MEDIA_NOT_FOUND = "MEDIA_NOT_FOUND"
    SPACE_ALREADY_ADOPTED = "SPACE_ALREADY_ADOPTED"
    UPLOAD_TOO_LARGE = "UPLOAD_TOO_LARGE"
    UPLOAD_TYPE_NOT_ALLOWED = "UPLOAD_TYPE_NOT_ALLOWED"
    STORE_FAILURE = "STORE_FAILURE"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    http_status = 400

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Missing required field, invalid enum value or missing file."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_INPUT) -> None:
        super().__init__(code=code, message=message)


class NotFoundError(DomainError):
    http_status = 404


class ConflictError(DomainError):
    # legacy clients expect 400 for "already adopted"
    http_status = 400


class UploadError(DomainError):
    """Rejected upload: oversize or disallowed type."""


class StoreError(DomainError):
    http_status = 500

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(code=ErrorCode.STORE_FAILURE, message=message)


class SpaceNotFoundError(NotFoundError):
    def __init__(self, space_id: int) -> None:
        super().__init__(code=ErrorCode.SPACE_NOT_FOUND, message="Space not found")
        self.space_id = space_id


class AdoptionNotFoundError(NotFoundError):
    def __init__(self, adoption_id: int) -> None:
        super().__init__(code=ErrorCode.ADOPTION_NOT_FOUND, message="Adoption not found")
        self.adoption_id = adoption_id


class MediaNotFoundError(NotFoundError):
    def __init__(self, media_id: int) -> None:
        super().__init__(code=ErrorCode.MEDIA_NOT_FOUND, message="Image not found")
        self.media_id = media_id


class SpaceAlreadyAdoptedError(ConflictError):
    def __init__(self, space_id: int) -> None:
        super().__init__(
            code=ErrorCode.SPACE_ALREADY_ADOPTED,
            message="Space already adopted",
        )
        self.space_id = space_id
