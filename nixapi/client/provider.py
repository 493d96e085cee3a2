# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Nutritionix API Provider - Nutritionix API Client

Used for configuring the Nutritionix API factory during application startup.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from .nix_api import NixApi
from .settings import ClientSettings

logger = logging.getLogger(__name__)


class NixApiProvider:
    """
    Configures endpoint, credentials and default HTTP config for ``NixApi``.

    Setters return the provider so startup code can chain them:

        >>> provider = NixApiProvider().set_credentials("app-id", "app-key")
        >>> nix_api = provider.get()
    """

    def __init__(self, settings: ClientSettings | None = None):
        """
        Initialize the provider.

        Args:
            settings: Optional initial settings; defaults to the public v2 endpoint
                      with no credentials and an empty HTTP config
        """
        self.settings = settings if settings is not None else ClientSettings()

    def set_endpoint(self, endpoint: str) -> "NixApiProvider":
        """
        Change the Nutritionix API base endpoint.

        Args:
            endpoint: Base URL, defaults to https://api.nutritionix.com/v2/
        """
        self.settings.endpoint = endpoint
        return self

    def set_credentials(self, app_id: str, app_key: str) -> "NixApiProvider":
        """
        Set API credentials generated at the https://developer.nutritionix.com portal.

        Args:
            app_id: Application id
            app_key: Application key
        """
        self.settings.app_id = app_id
        self.settings.app_key = app_key
        return self

    def set_http_config(self, config: Any) -> "NixApiProvider":
        """
        Set the service-wide override for the request descriptor.

        Anything that isn't a dictionary is ignored and the previous config
        is kept.

        Args:
            config: Request descriptor values applied to every call
        """
        if isinstance(config, Mapping):
            self.settings.http_config = dict(config)
        else:
            logger.debug(
                f"Ignoring HTTP config of type {type(config).__name__}, expected a mapping"
            )
        return self

    def get(self, http_client: httpx.AsyncClient | None = None) -> NixApi:
        """
        Create the API factory bound to this provider's settings.

        Args:
            http_client: Optional httpx client shared across calls

        Returns:
            NixApi instance
        """
        return NixApi(self.settings, http_client=http_client)
