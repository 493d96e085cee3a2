"""
Nutritionix API client: provider, request factory and configuration.
"""

from .config_builder import build_request_config
from .config_schema import APP_ID_HEADER, APP_KEY_HEADER, DEFAULT_API_ENDPOINT
from .nix_api import NixApi
from .provider import NixApiProvider
from .settings import ClientSettings

__all__ = [
    "APP_ID_HEADER",
    "APP_KEY_HEADER",
    "DEFAULT_API_ENDPOINT",
    "ClientSettings",
    "NixApi",
    "NixApiProvider",
    "build_request_config",
]
