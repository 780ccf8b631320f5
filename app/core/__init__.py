"""
Core utilities package.

This package provides logging configuration and setup functions.
"""

from .logger import setup_logger

__all__ = ['setup_logger']
