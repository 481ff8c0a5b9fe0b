from errors import ValidationError


def is_number(value) -> bool:
    # bool is an int subclass; JSON true/false are not numbers here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def require_text(value, message: str) -> str:
    """Return ``value`` trimmed, or raise if it is not a non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def optional_text(value):
    """Trimmed string, or None for anything that is not a non-empty string."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def require_positive_number(value, message: str):
    if not is_number(value) or value <= 0:
        raise ValidationError(message)
    return value


def require_positive_int(value, message: str) -> int:
    if not is_number(value) or value <= 0 or int(value) != value:
        raise ValidationError(message)
    return int(value)


def require_percentage(value, message: str):
    if not is_number(value) or not 0 <= value <= 100:
        raise ValidationError(message)
    return value


def require_object(payload) -> dict:
    """Request bodies must be JSON objects."""
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload
