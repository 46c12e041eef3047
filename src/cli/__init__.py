"""Command line interface for the floral formula database."""

from .main import __version__, build_parser, format_record, main

__all__ = ["__version__", "build_parser", "format_record", "main"]
