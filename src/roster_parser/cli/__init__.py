"""CLI module exports."""

from roster_parser.cli.parse import main as parse_main

__all__ = ["parse_main"]
