"""Command-line interface module for Simple XML Builder.

This module provides a demonstration tool that prints example documents
built with the node tree API.
"""

from .main import main

__all__ = ["main"]
