# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Centralized test configuration for pytest.

This file is automatically loaded by pytest and provides:
- Environment variable loading via dotenv
- Shared test fixtures and constants
"""

import json
import os
from typing import Any

import httpx
import pytest
from dotenv import load_dotenv

from nixapi.client import ClientSettings, NixApiProvider

# Load environment variables once for all tests
load_dotenv()

TEST_ENDPOINT = "https://api.example.com/v2/"
TEST_APP_ID = "ID1"
TEST_APP_KEY = "KEY1"

# Check if integration tests should run
RUN_INTEGRATION_TESTS = os.getenv("RUN_INTEGRATION_TESTS", "false").lower() == "true"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request and answers with a fixed response."""

    def __init__(self, status_code: int = 200, payload: Any = None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.payload = payload if payload is not None else {"foods": []}
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.status_code,
            content=json.dumps(self.payload).encode(),
            headers={"Content-Type": "application/json"},
        )


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(
        endpoint=TEST_ENDPOINT, app_id=TEST_APP_ID, app_key=TEST_APP_KEY
    )


@pytest.fixture
def provider(settings: ClientSettings) -> NixApiProvider:
    return NixApiProvider(settings)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()
