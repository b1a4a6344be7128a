from __future__ import annotations

from typing import Any, Optional


def clamp(value: int, low: int, high: int) -> int:
    """Return ``value`` bounded to the inclusive range ``[low, high]``."""
    return max(low, min(value, high))


def coerce_int(value: Any, default: int) -> int:
    """Convert form input into an int, falling back to ``default``.

    Zero counts as missing input, matching the numeric fields of the editor
    where an empty or zero entry means "use the default".
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value or default
    if isinstance(value, float):
        return int(value) or default
    text = str(value if value is not None else "").strip()
    if not text:
        return default
    sign = 1
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if not char.isdigit():
            break
        digits += char
    if not digits:
        return default
    return (sign * int(digits)) or default


def normalize_group_id(value: Any) -> Optional[str]:
    """Trim a group tag; empty input means "no group"."""
    if value is None:
        return None
    token = str(value).strip()
    return token or None


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


__all__ = ["clamp", "coerce_int", "is_blank", "normalize_group_id"]
