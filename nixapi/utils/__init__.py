# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Utilities - Nutritionix API Client

Shared utility functions used across multiple modules.
"""

from .deep_merge import deep_merge

__all__ = ["deep_merge"]
