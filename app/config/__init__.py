"""
Configuration package.

This package provides formatting configuration (timezone, locales,
defaults) via Settings class loaded from environment variables.
"""

from .settings import Settings

__all__ = ['Settings']
