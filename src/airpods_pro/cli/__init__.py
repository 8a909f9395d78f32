"""Command-line interface for airpods-pro.

The console script entry point is ``airpods_pro.cli.main:main``.
"""

from .main import cli

__all__ = ["cli"]
