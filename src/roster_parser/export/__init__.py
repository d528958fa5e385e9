"""Serializers for parsed rosters (CSV, Markdown, BBCode, JSON payload)."""

from roster_parser.export.bbcode import to_bbcode
from roster_parser.export.interchange import CSV_HEADER, document_to_dict, to_csv
from roster_parser.export.markdown import to_markdown

__all__ = ["to_csv", "to_markdown", "to_bbcode", "document_to_dict", "CSV_HEADER"]
