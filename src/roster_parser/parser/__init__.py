"""Roster markup parser: grammar extraction, row assembly and grouping."""

from roster_parser.parser.engine import RosterParser
from roster_parser.parser.grouping import OTHERS_KEY, group_records
from roster_parser.parser.title import TitleResolution, resolve_title

__all__ = [
    "RosterParser",
    "group_records",
    "resolve_title",
    "TitleResolution",
    "OTHERS_KEY",
]
