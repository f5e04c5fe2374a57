"""
Shared validators for input normalization.
"""

import re

from shared.utils.exceptions import ValidationError

_FARE_CODE_PATTERN = re.compile(r"^[A-Z0-9/]+$")


def escape_like_pattern(value: str) -> str:
    """
    Escape special characters in LIKE patterns.

    SQL LIKE uses % and _ as wildcards. This function escapes them
    so user text is matched literally (use with escape="\\").

    Args:
        value: The search string to escape

    Returns:
        The escaped string safe for use in LIKE patterns
    """
    if not value:
        return value

    # Escape the escape character first, then the wildcards
    value = value.replace("\\", "\\\\")
    value = value.replace("%", "\\%")
    value = value.replace("_", "\\_")
    return value


def normalize_code(value: str | None) -> str:
    """Trim and upper-case a natural key (IATA, ISO, fare code)."""
    return (value or "").strip().upper()


def validate_code_length(value: str | None, length: int, label: str) -> str:
    """
    Normalize a fixed-length code, raising ValidationError when it is blank
    or has the wrong length.
    """
    code = normalize_code(value)
    if not code or len(code) != length:
        raise ValidationError(f"Invalid {label} provided.", field=label, value=value)
    return code


def validate_fare_code(value: str | None, max_length: int) -> str:
    """Fare codes are 1..max_length characters of A-Z, 0-9 or '/'."""
    code = normalize_code(value)
    if not code or len(code) > max_length:
        raise ValidationError(
            f"Fare code must be between 1 and {max_length} characters.",
            field="code",
            value=value,
        )
    if not _FARE_CODE_PATTERN.match(code):
        raise ValidationError(
            "Fare code must be uppercase alphanumeric or contain '/'.",
            field="code",
            value=value,
        )
    return code


def require_text(value: str | None, message: str) -> str:
    """Return the stripped text or raise ValidationError when it is blank."""
    text = (value or "").strip()
    if not text:
        raise ValidationError(message)
    return text


def validate_max_length(value: str, max_length: int, label: str) -> str:
    """Raise ValidationError when text exceeds its column width."""
    if len(value) > max_length:
        raise ValidationError(
            f"{label} must be at most {max_length} characters.",
            field=label,
            length=len(value),
        )
    return value
