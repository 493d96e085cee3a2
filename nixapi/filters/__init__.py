"""
Filters - Nutritionix API Client

Standalone helpers for templates and renderers, registered by name in FILTERS.
"""

from .nutrient import find_nutrient, parse_int

# Name -> callable, for registering with a template environment
FILTERS = {
    "nutrient": find_nutrient,
}

__all__ = ["FILTERS", "find_nutrient", "parse_int"]
