"""
Config Schema - Nutritionix API Client

Defines the defaults every outgoing Nutritionix request starts from.
"""

from typing import Any

DEFAULT_API_ENDPOINT = "https://api.nutritionix.com/v2/"

APP_ID_HEADER = "X-APP-ID"
APP_KEY_HEADER = "X-APP-KEY"


def join_url(base_url: str, path: str) -> str:
    """Join the API base URL and a relative endpoint with a single slash."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def base_request_config(
    endpoint_url: str, app_id: str | None, app_key: str | None
) -> dict[str, Any]:
    """
    Build the baseline request descriptor.

    Args:
        endpoint_url: Absolute URL of the API endpoint being called
        app_id: Application id sent in the X-APP-ID header
        app_key: Application key sent in the X-APP-KEY header

    Returns:
        Dictionary with method, url, credential headers and empty params
    """
    return {
        "method": "GET",
        "url": endpoint_url,
        "headers": {
            APP_ID_HEADER: app_id,
            APP_KEY_HEADER: app_key,
        },
        "params": {},
    }
