"""
Domain models and value objects.

Contains option models that bundle algorithm parameters, like LayoutOptions.
"""

from textcore.domain.layout import LayoutOptions, apply_layout

__all__ = [
    # Layout model
    "LayoutOptions",
    "apply_layout",
]
