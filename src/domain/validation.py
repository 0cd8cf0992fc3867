"""Input validation helpers.

Each ``validate_*`` function is pure: it takes the raw request fields and
returns a ``ValidationResult`` of ``(errors, is_valid)``, where ``errors``
maps a field name to a human-readable message.
"""

from datetime import date, datetime
from typing import Any, Mapping, NamedTuple

from email_validator import EmailNotValidError, validate_email
from pydantic import HttpUrl, TypeAdapter, ValidationError

_http_url = TypeAdapter(HttpUrl)

SOCIAL_FIELDS = ("youtube", "twitter", "facebook", "linkedin", "instagram")

# Column sizes of the stored free-text fields
PROFILE_MAX_LENGTHS = {
    "status": 255,
    "company": 255,
    "website": 500,
    "location": 255,
    "githubusername": 100,
}
EXPERIENCE_MAX_LENGTHS = {"title": 255, "company": 255, "location": 255}
EDUCATION_MAX_LENGTHS = {"school": 255, "degree": 255, "fieldofstudy": 255}
AUTHOR_MAX_LENGTHS = {"name": 100, "avatar": 500}


class ValidationResult(NamedTuple):
    errors: dict[str, str]
    is_valid: bool


def _result(errors: dict[str, str]) -> ValidationResult:
    return ValidationResult(errors=errors, is_valid=not errors)


def text_value(data: Mapping[str, Any], key: str) -> str:
    """Return the field as a stripped string; missing or null becomes ''."""
    value = data.get(key)
    if value is None:
        return ""
    return str(value).strip()


def _raw_value(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_url(value: str) -> bool:
    """Accept http(s) URLs; a bare domain is treated as http://."""
    candidate = value if "://" in value else f"http://{value}"
    try:
        url = _http_url.validate_python(candidate)
    except ValidationError:
        return False
    return bool(url.host) and "." in url.host


def parse_skills(value: Any) -> list[str]:
    """Skills arrive as a comma-separated string or a list of strings."""
    if value is None:
        return []
    items = value if isinstance(value, (list, tuple)) else str(value).split(",")
    return [str(item).strip() for item in items if str(item).strip()]


def parse_date(value: Any) -> date | None:
    """Parse an ISO date or datetime string; None when it is not one."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip() if value is not None else ""
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def validate_register_input(data: Mapping[str, Any]) -> ValidationResult:
    errors: dict[str, str] = {}
    name = text_value(data, "name")
    email = text_value(data, "email")
    password = _raw_value(data, "password")
    password2 = _raw_value(data, "password2")

    if not 2 <= len(name) <= 30:
        errors["name"] = "Name must be between 2 and 30 characters"
    if not name:
        errors["name"] = "Name field is required"

    if not is_email(email):
        errors["email"] = "Email is invalid"
    if not email:
        errors["email"] = "Email field is required"

    if not 6 <= len(password) <= 30:
        errors["password"] = "Password must be between 6 and 30 characters"
    if not password:
        errors["password"] = "Password field is required"

    if password != password2:
        errors["password2"] = "Passwords must match"
    if not password2:
        errors["password2"] = "Confirm Password field is required"

    return _result(errors)


def validate_login_input(data: Mapping[str, Any]) -> ValidationResult:
    errors: dict[str, str] = {}
    email = text_value(data, "email")
    password = _raw_value(data, "password")

    if not is_email(email):
        errors["email"] = "Email is invalid"
    if not email:
        errors["email"] = "Email field is required"
    if not password:
        errors["password"] = "Password field is required"

    return _result(errors)


def validate_profile_input(data: Mapping[str, Any]) -> ValidationResult:
    errors: dict[str, str] = {}
    handle = text_value(data, "handle")

    if not 2 <= len(handle) <= 40:
        errors["handle"] = "Handle needs to be between 2 and 40 characters"
    if not handle:
        errors["handle"] = "Profile handle is required"
    if not text_value(data, "status"):
        errors["status"] = "Status field is required"
    if not parse_skills(data.get("skills")):
        errors["skills"] = "Skills field is required"

    for key in ("website", *SOCIAL_FIELDS):
        value = text_value(data, key)
        if value and not is_url(value):
            errors[key] = "Not a valid URL"

    _check_max_lengths(data, PROFILE_MAX_LENGTHS, errors)
    return _result(errors)


def _check_max_lengths(
    data: Mapping[str, Any], limits: Mapping[str, int], errors: dict[str, str]
) -> None:
    """Flag fields longer than their stored column; earlier errors win."""
    for key, limit in limits.items():
        if key not in errors and len(text_value(data, key)) > limit:
            errors[key] = f"Must be at most {limit} characters"


def _validate_date_range(data: Mapping[str, Any], errors: dict[str, str]) -> None:
    if not text_value(data, "from"):
        errors["from"] = "From date field is required"
    elif parse_date(data.get("from")) is None:
        errors["from"] = "From date is not a valid date"

    if text_value(data, "to") and parse_date(data.get("to")) is None:
        errors["to"] = "To date is not a valid date"


def validate_experience_input(data: Mapping[str, Any]) -> ValidationResult:
    errors: dict[str, str] = {}
    if not text_value(data, "title"):
        errors["title"] = "Job title field is required"
    if not text_value(data, "company"):
        errors["company"] = "Company field is required"
    _validate_date_range(data, errors)
    _check_max_lengths(data, EXPERIENCE_MAX_LENGTHS, errors)
    return _result(errors)


def validate_education_input(data: Mapping[str, Any]) -> ValidationResult:
    errors: dict[str, str] = {}
    if not text_value(data, "school"):
        errors["school"] = "School field is required"
    if not text_value(data, "degree"):
        errors["degree"] = "Degree field is required"
    if not text_value(data, "fieldofstudy"):
        errors["fieldofstudy"] = "Field of study field is required"
    _validate_date_range(data, errors)
    _check_max_lengths(data, EDUCATION_MAX_LENGTHS, errors)
    return _result(errors)


def validate_post_input(data: Mapping[str, Any]) -> ValidationResult:
    """Used for both posts and comments."""
    errors: dict[str, str] = {}
    text = text_value(data, "text")

    if not 10 <= len(text) <= 300:
        errors["text"] = "Post must be between 10 and 300 characters"
    if not text:
        errors["text"] = "Text field is required"
    _check_max_lengths(data, AUTHOR_MAX_LENGTHS, errors)

    return _result(errors)
