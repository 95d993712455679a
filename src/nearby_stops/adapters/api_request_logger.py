"""Utility for logging feed requests when NBS_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check if request logging is enabled via NBS_LOG_REQUESTS environment variable."""
    return os.getenv("NBS_LOG_REQUESTS", "").lower() == "true"


def _redact_url(url: str) -> str:
    """Hide the value of an ``auth`` query parameter (Firebase database secrets)."""
    if "auth=" not in url:
        return url
    base, _, query = url.partition("?")
    parts = [
        "auth=***REDACTED***" if part.startswith("auth=") else part for part in query.split("&")
    ]
    return f"{base}?{'&'.join(parts)}"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    sensitive_keys = {"authorization", "cookie", "x-api-key"}
    return {k: "***REDACTED***" if k.lower() in sensitive_keys else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    **details: Any,
) -> None:
    """Log request details if NBS_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method or library call name.
        url: Request URL or endpoint description.
        headers: Request headers (optional, sensitive headers are redacted).
        **details: Extra values worth logging, such as the timeout.
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {_redact_url(url)}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(_redact_sensitive_headers(headers), indent=2)}")
    for key, value in sorted(details.items()):
        log_parts.append(f"{key}: {value}")

    logger.info("API Request:\n" + "\n".join(log_parts))
