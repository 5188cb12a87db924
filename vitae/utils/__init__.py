"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Text wrapping and grouping
- Logging setup
- Environment settings
- PDF inspection
"""

from vitae.utils.text_processing import group_items, wrap_text_to_width

__all__ = ["group_items", "wrap_text_to_width"]
