"""
rate_limit.py — Global rate limiter instance.

Uses slowapi (a Starlette-compatible wrapper around the `limits` library).
Requests are keyed by client IP address.

Only the CSV export is limited: every other endpoint is pure in-memory
computation over the static table, but the export builds a download
payload and is the one route scrapers hammer.

Usage in routes:
    from fastapi import Request
    from fencemap.core.rate_limit import limiter

    @router.get("/export.csv")
    @limiter.limit(settings.export_rate_limit)
    async def export(request: Request):
        ...
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)
