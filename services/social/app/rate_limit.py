"""
Global slowapi rate limiter.

Imported by friending/router.py for per-endpoint limits.  Mounted onto app.state
in main.py so slowapi middleware can find it.

Storage: in-memory by default; set RATE_LIMIT_STORAGE_URI (e.g. redis://...) to
share counters between workers.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import Settings

FRIEND_REQUEST_RATE_LIMIT = "30/hour"

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=Settings().rate_limit_storage_uri,
)
