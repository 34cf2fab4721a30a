from clubs.domain.errors import ValidationFailedError


def require(**fields) -> None:
    """Raise ValidationFailedError for the first missing or blank field."""
    for name, value in fields.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationFailedError(name)
