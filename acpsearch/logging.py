"""
ACP search logging utilities.

Provides configurable logging for HTTP requests/responses and search outcome
classification. Ensures secret-looking values never reach the log output.
"""

import logging
import re
from typing import Any

# Create package-specific loggers
_sdk_logger = logging.getLogger("acpsearch")
_http_logger = logging.getLogger("acpsearch.http")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Secret/token patterns in response bodies
    (re.compile(r"(secret|token|password|api_key|apikey)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = frozenset({"secret", "token", "password", "api_key", "apikey"})

# Maximum number of characters of a response body kept in a log line
_BODY_PREVIEW_LENGTH = 500


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure ACP search logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from acpsearch.logging import configure_logging

        # Show every request sent to the directory service
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get an ACP search logger.

    Args:
        name: Logger name suffix (e.g., "http", "search"). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"acpsearch.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Args:
        text: Text that may contain sensitive data

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: secret, token, password, api_key, apikey)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    keys = _DEFAULT_SENSITIVE_KEYS if sensitive_keys is None else frozenset(sensitive_keys)

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if key_lower in keys or any(sk in key_lower for sk in keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
) -> None:
    """
    Log an HTTP request at DEBUG level with sensitive data masked.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        params: Query parameters (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {url}"]

    if params:
        log_parts.append(f"params={safe_log_dict(params)}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    body: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level with sensitive data masked.

    Args:
        status_code: HTTP status code
        url: Request URL
        body: Raw response text (optional, truncated)
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if body:
        preview = body[:_BODY_PREVIEW_LENGTH]
        if len(body) > _BODY_PREVIEW_LENGTH:
            preview += "..."
        log_parts.append(f"body={mask_sensitive_data(preview)}")

    _http_logger.debug(" | ".join(log_parts))


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
]
