"""
UI message catalog and navigation labels
"""

from types import MappingProxyType
from typing import Mapping, Tuple


MESSAGES: Mapping[str, str] = MappingProxyType({
    "welcome": "Welcome to Langsmith",
    "login": "Login",
    "logout": "Logout",
    "save": "Save changes",
    "cancel": "Cancel",
    "loading": "Loading...",
    "error": "An error occurred",
})

# Rendered in this order
LABELS: Tuple[str, ...] = (
    "Home",
    "About",
    "Contact",
)
