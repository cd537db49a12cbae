from typing import Optional

TRUTHY_FORM_VALUES = {"on", "true", "1", "yes"}


def parse_flag(value: Optional[str]) -> bool:
    """Checkbox-style form value to bool; absent or unknown means False."""
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY_FORM_VALUES


def parse_int(value: Optional[str], default: int = 0) -> int:
    if value is None:
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default
