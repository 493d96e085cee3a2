# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Nutritionix API Factory - Nutritionix API Client

Low level function to build API clients on top of. Each call merges the
configured defaults with call-specific overrides and issues exactly one
HTTP request using the httpx async client.

Key Features:
- Real HTTP requests using httpx async client
- Credential headers added to every request
- Transport and HTTP status errors propagate unchanged (no retry, no caching)
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from .config_builder import build_request_config
from .settings import ClientSettings

logger = logging.getLogger(__name__)

# Descriptor keys forwarded to httpx as-is
_PASSTHROUGH_KEYS = (
    "json",
    "content",
    "files",
    "auth",
    "extensions",
    "timeout",
    "cookies",
    "follow_redirects",
)


def _drop_none(values: Mapping[str, Any] | None) -> dict[str, Any]:
    return {key: value for key, value in (values or {}).items() if value is not None}


def _header_value(value: Any) -> str | bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_httpx_kwargs(config: Mapping[str, Any]) -> dict[str, Any]:
    """
    Translate a request descriptor to keyword arguments for ``httpx.AsyncClient.request``.

    Headers and params with a ``None`` value are left out, so credentials
    that were never set are not sent. Other header values are sent as
    strings. ``data`` holds the request body: dictionaries and lists are
    sent as JSON, strings and bytes as raw content. The httpx arguments
    ``json``, ``content``, ``files``, ``auth``, ``extensions``, ``timeout``,
    ``cookies`` and ``follow_redirects`` are forwarded unchanged (pass file
    contents in ``files`` as bytes, descriptors are deep-copied). Other
    descriptor keys are not transmitted.

    Args:
        config: Request descriptor built by ``build_request_config``

    Returns:
        Dictionary of httpx request arguments

    Raises:
        ValueError: If ``data`` is combined with ``json`` or ``content``
    """
    kwargs: dict[str, Any] = {
        "method": config.get("method", "GET"),
        "url": config["url"],
        "headers": {
            key: _header_value(value)
            for key, value in _drop_none(config.get("headers")).items()
        },
        "params": _drop_none(config.get("params")),
    }

    for key in _PASSTHROUGH_KEYS:
        if key in config:
            kwargs[key] = config[key]

    body = config.get("data")
    if body is not None:
        if "json" in kwargs or "content" in kwargs:
            raise ValueError(
                "Request descriptor sets 'data' together with 'json' or 'content'"
            )
        if isinstance(body, (Mapping, list, tuple)):
            kwargs["json"] = body
        elif isinstance(body, (str, bytes)):
            kwargs["content"] = body
        else:
            raise ValueError(
                f"Unsupported request body type {type(body).__name__}, "
                "expected a dict, list, str or bytes"
            )

    return kwargs


class NixApi:
    """
    Callable used to make calls to the Nutritionix API.

    Settings are read on every call, so changes made through the provider
    after this object was created still apply.
    """

    def __init__(
        self, settings: ClientSettings, http_client: httpx.AsyncClient | None = None
    ):
        """
        Initialize the API factory.

        Args:
            settings: Client settings shared with the provider that created this object
            http_client: Optional httpx client to reuse. When omitted, every call
                         opens and closes its own client.
        """
        self.settings = settings
        self.http_client = http_client

    def build_config(
        self, endpoint: str, config: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Return the request descriptor for ``endpoint`` without sending it."""
        return build_request_config(self.settings, endpoint, config)

    async def request(
        self, endpoint: str, config: Mapping[str, Any] | None = None
    ) -> httpx.Response:
        """
        Call a Nutritionix API endpoint.

        The default descriptor is built like this and then overridden by the
        service-wide HTTP config and finally by ``config``:

            {
                "method": "GET",
                "url": <endpoint from settings> + endpoint,
                "headers": {"X-APP-ID": app_id, "X-APP-KEY": app_key},
                "params": {},
            }

        Args:
            endpoint: Relative API endpoint, e.g. '/estimated-nutrition/bulk'
            config: Call-specific override for the request descriptor

        Returns:
            The httpx response for a successful (2xx) call

        Raises:
            httpx.HTTPStatusError: If the API answers with a non-2xx status
            httpx.RequestError: If the request could not be completed
            ValueError: If the descriptor sets more than one request body
        """
        request_config = self.build_config(endpoint, config)
        kwargs = to_httpx_kwargs(request_config)

        try:
            if self.http_client is not None:
                response = await self.http_client.request(**kwargs)
                response.raise_for_status()
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.request(**kwargs)
                    response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Nutritionix API error {e.response.status_code} for "
                f"{kwargs['method']} {kwargs['url']}"
            )
            raise
        except httpx.RequestError as e:
            logger.warning(
                f"Nutritionix API request failed for {kwargs['method']} {kwargs['url']}: {e}"
            )
            raise

        logger.debug(
            f"Nutritionix API {kwargs['method']} {kwargs['url']} -> {response.status_code}"
        )
        return response

    async def __call__(
        self, endpoint: str, config: Mapping[str, Any] | None = None
    ) -> httpx.Response:
        return await self.request(endpoint, config)
