"""Small string helpers shared by services and the section renderer."""

from typing import Optional


def has_text(value: Optional[str]) -> bool:
    """True when value holds at least one non-whitespace character."""
    return value is not None and value.strip() != ""
