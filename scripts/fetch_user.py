#!/usr/bin/env python
"""
Fetch User Script - Query the backend for a single user record
"""

import asyncio
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sampleapp.config import settings
from sampleapp.logging_config import configure_logging
from sampleapp.services import fetch_user, format_date
from sampleapp.utils import ERROR_MESSAGES
import structlog

configure_logging(settings)

logger = structlog.get_logger()


def main():
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="Fetch a user from the backend API")
    parser.add_argument(
        "user_id",
        type=str,
        help="Identifier of the user to fetch"
    )

    args = parser.parse_args()

    logger.info("Fetching user", user_id=args.user_id, base_url=settings.api_base_url)

    try:
        user = asyncio.run(fetch_user(args.user_id))
    except Exception as e:
        logger.error("Fetch failed", error=str(e))
        print(ERROR_MESSAGES["GENERIC_ERROR"])
        sys.exit(1)

    print(f"\nUser record ({format_date(date.today())}):")
    if isinstance(user, dict):
        for key, value in user.items():
            print(f"  {key}: {value}")
    else:
        print(f"  {user}")


if __name__ == "__main__":
    main()
