#!/usr/bin/env python3
"""One-off: call the /records endpoint through RecordsClient and print the summary.
Usage: RECORDS_BASE_URL=http://localhost:3000 PAGE=2 COLORS=red,brown python scripts/debug_records_api.py"""
import asyncio
import json
import logging
import os
import sys

from managed_records.config import settings
from managed_records.schemas.records import RetrieveResult
from managed_records.services.http_client import close_http_client, init_http_client
from managed_records.services.records_client import build_records_url, retrieve

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)

PAGE = int(os.environ.get("PAGE", "1"))
COLORS = [c.strip() for c in os.environ.get("COLORS", "").split(",") if c.strip()]


async def main():
    print("=== GET {} ===".format(build_records_url(settings.records_base_url, PAGE, COLORS,
                                                    pad_single_color=settings.records_pad_single_color)))
    init_http_client(timeout=settings.records_request_timeout_seconds)
    try:
        result = await retrieve({"page": PAGE, "colors": COLORS})
    finally:
        await close_http_client()
    if isinstance(result, RetrieveResult):
        print(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        print("Degraded result:", result)


if __name__ == "__main__":
    asyncio.run(main())
