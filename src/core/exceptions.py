"""Custom exceptions and error codes.

Every application error carries a ``{field: message}`` map which is sent
verbatim as the response body, plus an ``ErrorCode`` used for logging.
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"
    EXPERIENCE_NOT_FOUND = "EXPERIENCE_NOT_FOUND"
    EDUCATION_NOT_FOUND = "EDUCATION_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INCORRECT_PASSWORD = "INCORRECT_PASSWORD"
    ALREADY_LIKED = "ALREADY_LIKED"
    NOT_LIKED = "NOT_LIKED"
    HANDLE_TAKEN = "HANDLE_TAKEN"
    EMAIL_TAKEN = "EMAIL_TAKEN"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        errors: dict[str, str],
        status_code: int = 400,
    ) -> None:
        self.error_code = error_code
        self.errors = errors
        self.status_code = status_code
        super().__init__("; ".join(errors.values()))


class ValidationFailedError(AppException):
    """Incoming fields failed validation."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            errors=errors,
            status_code=400,
        )


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            errors={"unauthorized": message},
            status_code=401,
        )


class NotAuthorizedError(AppException):
    """The authenticated user does not own the resource."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_AUTHORIZED,
            errors={"notauthorized": "User not authorized"},
            status_code=401,
        )


class UserNotFoundError(AppException):
    """No user registered under the given email."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            errors={"email": "User not found"},
            status_code=404,
        )


class IncorrectPasswordError(AppException):
    """Password does not match the stored hash."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INCORRECT_PASSWORD,
            errors={"password": "Password incorrect"},
            status_code=400,
        )


class EmailTakenError(AppException):
    """Email is already registered."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.EMAIL_TAKEN,
            errors={"email": "Email already exists"},
            status_code=400,
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, message: str = "There is no profile for this user") -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            errors={"noprofile": message},
            status_code=404,
        )


class HandleTakenError(AppException):
    """Profile handle is already used by another profile."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.HANDLE_TAKEN,
            errors={"handle": "That handle already exists"},
            status_code=400,
        )


class ExperienceNotFoundError(AppException):
    """Experience entry not found in the profile."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.EXPERIENCE_NOT_FOUND,
            errors={"experiencenotfound": "Experience entry does not exist"},
            status_code=404,
        )


class EducationNotFoundError(AppException):
    """Education entry not found in the profile."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.EDUCATION_NOT_FOUND,
            errors={"educationnotfound": "Education entry does not exist"},
            status_code=404,
        )


class PostNotFoundError(AppException):
    """Post not found."""

    def __init__(self, message: str = "No post found") -> None:
        super().__init__(
            error_code=ErrorCode.POST_NOT_FOUND,
            errors={"postnotfound": message},
            status_code=404,
        )


class CommentNotFoundError(AppException):
    """Comment not found on the post."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.COMMENT_NOT_FOUND,
            errors={"commentnotexists": "Comment does not exist"},
            status_code=404,
        )


class AlreadyLikedError(AppException):
    """User already liked the post."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.ALREADY_LIKED,
            errors={"alreadyliked": "User already liked this post"},
            status_code=400,
        )


class NotLikedError(AppException):
    """User has not liked the post."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_LIKED,
            errors={"notliked": "You have not yet liked this post"},
            status_code=400,
        )
