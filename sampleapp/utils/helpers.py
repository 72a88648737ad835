"""
Validation and text utilities for sampleapp
"""

import re
from types import MappingProxyType
from typing import Mapping


# Whitespace as browsers define it for regex \s (differs from Python's \s)
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000-\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Shape check only: local@domain.tld, no whitespace, a single "@"
EMAIL_PATTERN = re.compile(
    r'[^{ws}@]+@[^{ws}@]+\.[^{ws}@]+'.format(ws=WHITESPACE)
)

ELLIPSIS = "..."

ERROR_MESSAGES: Mapping[str, str] = MappingProxyType({
    "INVALID_EMAIL": "Please enter a valid email address",
    "PASSWORD_TOO_SHORT": "Password must be at least 8 characters",
    "GENERIC_ERROR": "Something went wrong. Please try again.",
})


def validate_email(email: str) -> bool:
    """Check that email looks like an address (no deliverability check)"""
    return EMAIL_PATTERN.fullmatch(email) is not None


def truncate(text: str, length: int) -> str:
    """
    Cut text to length characters and append an ellipsis.

    Text that already fits is returned unchanged. The ellipsis is not counted
    against length, so truncate("hello world", 5) gives "hello...".
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if len(text) <= length:
        return text
    return text[:length] + ELLIPSIS
