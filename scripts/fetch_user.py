#!/usr/bin/env python3
"""
Manual check against the live user API.

Fetches one user from the configured endpoint (SAMPLE_API_URL) and
prints the record, or the error that came back.

Run from project root:
    python -m scripts.fetch_user 1
"""

import asyncio
import json
import sys

import httpx

from app.services.api_client import UserFetchError, fetch_user_data
from config import settings


async def main(user_id: str) -> int:
    print(f"Fetching user {user_id} from {settings.sample.api_url}")

    try:
        user = await fetch_user_data(user_id)
    except UserFetchError as e:
        print(f"   ❌ {e}")
        return 1
    except httpx.TransportError as e:
        print(f"   ❌ Transport failure: {e!r}")
        return 2

    print("   ✅ User retrieved\n")
    print(json.dumps(user, indent=2))
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: python -m scripts.fetch_user <user_id>")
        sys.exit(64)
    sys.exit(asyncio.run(main(sys.argv[1])))
