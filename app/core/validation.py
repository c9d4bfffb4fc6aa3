from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.exceptions.http import ValidationError
from app.models.definitions import EMAIL_MAX_LENGTH

_email_adapter = TypeAdapter(EmailStr)


def validate_email_address(raw: str | None) -> str:
    """
    Syntactic email check for identifiers arriving outside a request body
    (e.g. query parameters).

    Returns the address normalized the same way EmailStr normalizes request
    bodies (domain lowercased), so it matches what registration stored.
    Raises ValidationError (HTTP 400) when it is missing, too long or malformed.
    """
    value = (raw or "").strip()
    if not value:
        raise ValidationError("Email address is required.")
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValidationError(f"Email address must not exceed {EMAIL_MAX_LENGTH} characters.")
    try:
        return _email_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValidationError("Email address is not valid.", details={"email": value}) from None
