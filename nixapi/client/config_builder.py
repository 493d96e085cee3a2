# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Config Builder - Nutritionix API Client

Builds the final request descriptor by merging baseline defaults, the
service-wide HTTP config, and per-call overrides.
This is the single source of truth for request composition.
"""

from collections.abc import Mapping
from typing import Any

from nixapi.utils import deep_merge

from .config_schema import base_request_config, join_url
from .settings import ClientSettings


def build_request_config(
    settings: ClientSettings,
    endpoint: str,
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Build the final request descriptor for a call to ``endpoint``.

    This function implements a three-layer merge strategy:
    1. Start with the baseline (GET, endpoint URL, credential headers, empty params)
    2. Apply the service-wide HTTP config from the settings
    3. Apply per-call overrides

    Later layers win on conflicting scalar and list values; nested
    dictionaries such as ``headers`` and ``params`` are merged, so a call
    can add a header without losing the credential headers.

    Args:
        settings: Client settings with endpoint, credentials and HTTP config
        endpoint: Relative API endpoint, e.g. '/estimated-nutrition/bulk'
        overrides: Optional call-specific descriptor values

    Returns:
        Request descriptor dictionary ready to be sent

    Example:
        >>> settings = ClientSettings(endpoint="https://api.example.com/v2/", app_id="ID1", app_key="KEY1")
        >>> build_request_config(settings, "/foo", {"params": {"q": 1}})["url"]
        'https://api.example.com/v2/foo'
    """
    baseline = base_request_config(
        join_url(settings.endpoint, endpoint), settings.app_id, settings.app_key
    )

    return deep_merge(baseline, settings.http_config, overrides or {})
