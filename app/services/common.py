from app.exceptions import ValidationError


def parse_id(raw: str | int, label: str) -> int:
    """Turn a path/body id into a primary key or raise ``Invalid <label> ID``."""
    value = str(raw)
    if not (value.isascii() and value.isdigit()) or int(value) < 1:
        raise ValidationError(f"Invalid {label} ID")
    return int(value)


def normalize_name(name: str) -> str:
    return name.strip().lower()
