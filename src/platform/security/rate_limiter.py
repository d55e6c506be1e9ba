"""
API rate limiting (slowapi)

https://slowapi.readthedocs.io/en/latest/
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.platform.config.core_setting import settings


RATE_LIMIT_MESSAGE = 'Too many requests from this IP, please try again later.'

# Every decorated route draws from the same per-IP bucket
API_RATE_LIMIT_SCOPE = 'api'

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    enabled=settings.RATE_LIMIT_ENABLED,
)

api_rate_limit = limiter.shared_limit(
    settings.RATE_LIMIT,
    scope=API_RATE_LIMIT_SCOPE,
    error_message=RATE_LIMIT_MESSAGE,
)
