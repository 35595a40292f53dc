"""
Middleware package exports.
"""

from middleware.request_id import RequestIDMiddleware, get_request_id
from middleware.rate_limiter import limiter

__all__ = ["RequestIDMiddleware", "get_request_id", "limiter"]
