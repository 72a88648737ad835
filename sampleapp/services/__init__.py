"""Services module for backend API access"""

from .users import API_URLS, FetchError, fetch_user, format_date

__all__ = ["API_URLS", "FetchError", "fetch_user", "format_date"]
