"""
CLI Layer

Command-line entry point.
"""

from depextify.cli.app import app, scan, list_categories, version

__all__ = [
    "app",
    "scan",
    "list_categories",
    "version",
]
