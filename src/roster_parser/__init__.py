"""Public package API for roster-bbcode-parser."""

from roster_parser.api import parse_file, parse_roster
from roster_parser.export import document_to_dict, to_bbcode, to_csv, to_markdown
from roster_parser.labels import extract_header_tags, extract_tags, strip_inline_tag_words
from roster_parser.models import Group, ParseReport, Record, RosterDocument
from roster_parser.nationality import guess_flag, normalize_nationality
from roster_parser.parser.engine import RosterParser
from roster_parser.rates import clean_rate
from roster_parser.text_utils import extract_link_and_text, normalize_text, strip_markup
from roster_parser.timeparse import build_date_note, parse_clock_time, parse_time_range

__all__ = [
    "RosterParser",
    "parse_roster",
    "parse_file",
    "Record",
    "Group",
    "RosterDocument",
    "ParseReport",
    "to_csv",
    "to_markdown",
    "to_bbcode",
    "document_to_dict",
    "strip_markup",
    "extract_link_and_text",
    "normalize_text",
    "clean_rate",
    "normalize_nationality",
    "guess_flag",
    "extract_tags",
    "extract_header_tags",
    "strip_inline_tag_words",
    "parse_clock_time",
    "parse_time_range",
    "build_date_note",
]
