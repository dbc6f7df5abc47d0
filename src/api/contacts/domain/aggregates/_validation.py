from shared_kernel.exceptions import ValidationError


def require_text(value: str | None, field_name: str) -> str:
    """Return ``value`` stripped, rejecting None and blank strings."""
    if value is None or not value.strip():
        raise ValidationError(f"{field_name} must not be blank")
    return value.strip()
