"""
Logging helpers shared by routers, services and middleware.
"""

import logging
from contextvars import ContextVar
from typing import Any, Dict, Optional

# Never shown, not even partially
REDACTED_FIELDS = {'password', 'secret', 'salt'}
# Shown as an 8-character prefix so sessions can be correlated
PARTIAL_FIELDS = {'token'}


def get_logger(name: str) -> logging.Logger:
    """
    Usage:
        from utils.logger import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)


def sanitize_log_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of ``data`` that is safe to log.

    Keys mentioning a token keep their first 8 characters so a session can
    still be correlated across log lines; passwords, salts and secrets are
    redacted entirely. Nested dictionaries are sanitized recursively.
    """
    sanitized = data.copy()

    for key, value in sanitized.items():
        lowered = key.lower()
        if any(field in lowered for field in REDACTED_FIELDS):
            if isinstance(value, str):
                sanitized[key] = "***REDACTED***"

        elif any(field in lowered for field in PARTIAL_FIELDS):
            if isinstance(value, str):
                sanitized[key] = f"{value[:8]}..." if len(value) > 8 else "***REDACTED***"

        elif isinstance(value, dict):
            sanitized[key] = sanitize_log_data(value)

    return sanitized


def log_request(
    logger: logging.Logger,
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    client_ip: str,
    extra: Optional[Dict[str, Any]] = None
):
    """
    Log one HTTP exchange, picking the level from the status code.

    Usage:
        log_request(logger, "POST", "/users/login", 200, 45.2, "127.0.0.1")
    """
    log_data = {
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": round(duration_ms, 2),
        "client_ip": client_ip,
    }

    if extra:
        log_data.update(sanitize_log_data(extra))

    message = f'{client_ip} - "{method} {path}" {status_code}'
    if status_code >= 500:
        logger.error(message, extra=log_data)
    elif status_code >= 400:
        logger.warning(message, extra=log_data)
    else:
        logger.info(message, extra=log_data)


# Id of the request being handled in the current task; set by RequestIDMiddleware
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class RequestIDFilter(logging.Filter):
    """Stamps each record with the request id of the context that emitted it."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True
