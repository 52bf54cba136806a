"""Address validation, run before any network I/O."""
from __future__ import annotations

import re

from .errors import ValidationError

# "r" followed by 25-34 base-58 characters (no 0, O, I, l)
ADDRESS_RE = re.compile(r"r[1-9A-HJ-NP-Za-km-z]{25,34}")

INVALID_ADDRESS_MESSAGE = (
    'Invalid XRP address format. Address must start with "r" '
    "and be 25-34 characters long."
)


def validate_address(value: object) -> str:
    """Return ``value`` if it is a well-formed XRP address, else raise."""
    if not isinstance(value, str) or not value:
        raise ValidationError(INVALID_ADDRESS_MESSAGE)
    if ADDRESS_RE.fullmatch(value) is None:
        raise ValidationError(INVALID_ADDRESS_MESSAGE)
    return value
