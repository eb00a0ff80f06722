"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    PROFILE_MISSING = "PROFILE_MISSING"
    CART_ITEM_NOT_FOUND = "CART_ITEM_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CART_ITEM = "INVALID_CART_ITEM"

    # Conflict errors (reported as 400 for client compatibility)
    PROFILE_ALREADY_EXISTS = "PROFILE_ALREADY_EXISTS"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

    @property
    def payload(self) -> Any:
        """JSON body sent to the client."""
        return {
            "error_code": self.error_code.value,
            "message": self.message,
            "details": self.details,
        }


class StorageError(Exception):
    """The storage backend failed to complete an operation."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


# Profile and cart errors keep the response bodies existing clients parse.


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {profile_id}",
            status_code=404,
            details={"profile_id": profile_id},
        )

    @property
    def payload(self) -> Any:
        return {"error": "ProfileNotFound"}


class ProfileMissingError(AppException):
    """Request carried no profile body.

    Create answers 404 for historical reasons; update answers 400.
    """

    def __init__(self, status_code: int = 404) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_MISSING,
            message="Profile missing",
            status_code=status_code,
        )

    @property
    def payload(self) -> Any:
        return {"message": self.message}


class ProfileAlreadyExistsError(AppException):
    """A profile with this ID already exists."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_ALREADY_EXISTS,
            message="profile already exists",
            status_code=400,
            details={"profile_id": profile_id},
        )

    @property
    def payload(self) -> Any:
        return {"message": self.message}


class ProfileStorageError(AppException):
    """Storage failure while listing, reading or creating profiles.

    ``field`` selects the key that carries the error text in the body.
    """

    def __init__(self, error: str, field: str = "message") -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message=error,
            status_code=500,
        )
        self.field = field

    @property
    def payload(self) -> Any:
        return {self.field: self.message}


class ProfileLookupError(AppException):
    """Profile could not be found ahead of an update."""

    def __init__(self, profile_id: str, error: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Could not find profile '{profile_id}'",
            status_code=404,
            details={"profile_id": profile_id, "error": error},
        )
        self.error = error

    @property
    def payload(self) -> Any:
        return {"message": self.message, "error": self.error}


class ProfileUpdateError(AppException):
    """Profile update failed in storage."""

    def __init__(self, profile_id: str, error: str) -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message=f"Could not update profile '{profile_id}'",
            status_code=500,
            details={"profile_id": profile_id, "error": error},
        )
        self.error = error

    @property
    def payload(self) -> Any:
        return {"message": self.message, "error": self.error}


class ProfileDeleteError(AppException):
    """Profile deletion failed in storage."""

    def __init__(self, profile_id: str, error: str) -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message=f"Could not delete profile with ID: {profile_id}",
            status_code=500,
            details={"profile_id": profile_id, "error": error},
        )
        self.error = error

    @property
    def payload(self) -> Any:
        return {"message": self.message, "error": self.error}


class InvalidCartItemError(AppException):
    """Cart item is missing item_id, qty or order_type."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_CART_ITEM,
            message="Must include item_id, qty, and order_type to add to cart",
            status_code=400,
        )

    @property
    def payload(self) -> Any:
        return self.message


class CartItemNotFoundError(AppException):
    """No matching item in the profile's cart."""

    def __init__(self, profile_id: str, item_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.CART_ITEM_NOT_FOUND,
            message=f"no items with id {item_id} in profile {profile_id}'s shopping cart",
            status_code=404,
            details={"profile_id": profile_id, "item_id": item_id},
        )

    @property
    def payload(self) -> Any:
        return {"message": self.message}


class CartStorageError(AppException):
    """Storage failure during a cart operation.

    The underlying error is logged, never returned.
    """

    def __init__(self, action: str) -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message=f"A server error has occurred while {action}",
            status_code=500,
        )

    @property
    def payload(self) -> Any:
        return {"message": self.message}
