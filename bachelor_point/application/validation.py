from typing import Any

from bachelor_point.domain.exceptions import ValidationError

ALL_FIELDS_REQUIRED = "All fields are required!"


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(message: str = ALL_FIELDS_REQUIRED, **fields: Any) -> None:
    """Raise ValidationError naming every missing or blank field."""
    missing = [name for name, value in fields.items() if _is_blank(value)]
    if missing:
        raise ValidationError(f"{message} Missing: {', '.join(missing)}.")
