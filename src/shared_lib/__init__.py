"""
Shared Library - Common components used across the chart packages.

This module contains settings, schemas and utilities that are reused by the
chart pipeline, the renderer and the command-line session.
"""

__all__ = [
    "core",
    "models",
    "utils"
]
