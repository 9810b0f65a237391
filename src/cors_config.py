"""CORS configuration for the FastAPI application."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def _normalize_origin(origin: str) -> str:
    """
    Normalize a CORS origin by adding https:// if no protocol is specified.

    Args:
        origin: The origin string (e.g., "example.com" or "https://example.com")

    Returns:
        The normalized origin with protocol (e.g., "https://example.com")
    """
    if not origin.startswith(("http://", "https://")):
        return f"https://{origin}"
    return origin


def get_cors_config(production_origin: str | None = None) -> dict[str, Any]:
    """
    Get the CORS middleware configuration.

    Args:
        production_origin: Optional production origin. If provided, only this
                          origin will be allowed (normalized with https:// if
                          no protocol specified) and credentials are allowed.
                          If not provided, any origin may call the API
                          without credentials.

    Returns:
        Dictionary with CORS configuration including allow_origins,
        allow_credentials, allow_methods, and allow_headers
    """
    if production_origin:
        allowed_origins = [_normalize_origin(production_origin)]
        allow_credentials = True
    else:
        # Browsers reject credentialed requests against a wildcard origin
        allowed_origins = ["*"]
        allow_credentials = False
    logger.info(f"CORS allowed_origins setting is {allowed_origins}")

    return {
        "allow_origins": allowed_origins,
        "allow_credentials": allow_credentials,
        "allow_methods": ["*"],
        "allow_headers": ["*"],
    }
