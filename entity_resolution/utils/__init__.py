"""
Utility Functions

Modules:
    text: Field value coercion and normalization
"""

from entity_resolution.utils.text import coerce_text, normalize_text

__all__ = [
    "coerce_text",
    "normalize_text",
]
