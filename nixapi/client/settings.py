"""
Client Settings - Nutritionix API Client

Holds endpoint, credentials and the service-wide HTTP config for one client.
"""

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .config_schema import DEFAULT_API_ENDPOINT


class ClientSettings(BaseModel):
    """
    Configuration for a single Nutritionix API client.

    **Simple Explanation:**
    Everything the client needs to know before it can talk to the API lives
    here. Each provider owns its own settings object, so two clients with
    different keys can run side by side in the same process.
    """

    endpoint: str = DEFAULT_API_ENDPOINT
    app_id: str | None = None
    app_key: str | None = None
    http_config: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """
        Build settings from environment variables (and a .env file if present).

        Reads NIX_API_ENDPOINT, NIX_APP_ID and NIX_APP_KEY. A missing
        endpoint falls back to the public Nutritionix v2 endpoint.
        """
        load_dotenv()
        return cls(
            endpoint=os.getenv("NIX_API_ENDPOINT") or DEFAULT_API_ENDPOINT,
            app_id=os.getenv("NIX_APP_ID"),
            app_key=os.getenv("NIX_APP_KEY"),
        )
