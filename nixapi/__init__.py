# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Nutritionix API Client

Python client library to make calls to the Nutritionix API.
"""

from .client import ClientSettings, NixApi, NixApiProvider
from .filters import FILTERS, find_nutrient
from .utils import deep_merge

__version__ = "0.1.0"

__all__ = [
    "FILTERS",
    "ClientSettings",
    "NixApi",
    "NixApiProvider",
    "deep_merge",
    "find_nutrient",
]
