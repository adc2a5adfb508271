"""
Language-specific dialects.

This module contains the rendering dialects for target languages.
"""

from .java import JavaDialect

__all__ = ["JavaDialect"]
