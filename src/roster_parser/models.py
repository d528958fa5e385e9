"""Core data models for parsed roster records, groups and parse reports."""

from dataclasses import MISSING, dataclass, field
from datetime import date, datetime
from typing import Any, Optional


def schema_field(
    description: str,
    *,
    default: Any = MISSING,
    default_factory: Any = MISSING,
    json_schema: dict[str, Any] | None = None,
) -> Any:
    """Create a dataclass field with reusable JSON Schema metadata."""

    metadata: dict[str, Any] = {"description": description}
    if json_schema is not None:
        metadata["json_schema"] = json_schema

    kwargs: dict[str, Any] = {"metadata": metadata}
    if default is not MISSING:
        kwargs["default"] = default
    if default_factory is not MISSING:
        kwargs["default_factory"] = default_factory
    return field(**kwargs)


@dataclass
class RowCells:
    """Raw cells of one roster row, as produced by either input grammar."""

    row: int
    nationality: str
    name: str
    time_label: str
    rate: Optional[str] = None
    service: Optional[str] = None
    url: Optional[str] = None
    header_hints: list[str] = field(default_factory=list)


@dataclass
class Record:
    """Represents one roster entry (one worker on the roster day)."""

    name: str = schema_field("Display name with link markup and annotation words removed.")
    nationality_key: str = schema_field(
        "Lower-cased, whitespace-collapsed nationality grouping key; empty when unknown.",
    )
    time_label: str = schema_field("Normalized human-readable time range, kept even when unparseable.")
    flag: str = schema_field(default="", description="Decorative glyph for the nationality; empty if unknown.")
    start: Optional[datetime] = schema_field(
        default=None,
        description="Shift start on the roster day; null when the time expression could not be parsed.",
    )
    end: Optional[datetime] = schema_field(
        default=None,
        description="Shift end; advanced by one day when not after `start` (overnight shift).",
    )
    rate: Optional[str] = schema_field(
        default=None,
        description="Normalized rate token such as `$300/H`; null when no rate was found.",
    )
    tags: list[str] = schema_field(
        default_factory=list,
        description="Annotation labels (e.g. `NEW`, `VIP`), deduplicated in first-seen order.",
    )
    profile_url: Optional[str] = schema_field(
        default=None,
        description="Link target recovered from a labeled link in the name cell.",
    )


@dataclass
class Group:
    """Records sharing one nationality key, in roster order."""

    key: str = schema_field("Nationality key of the group; `others` for records without one.")
    flag: str = schema_field(default="", description="Glyph of the group key; empty if unknown.")
    records: list[Record] = schema_field(default_factory=list, description="Records of this group.")

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class ParseReport:
    """Fail-open diagnostics collected while parsing one roster text."""

    source: str = schema_field("Name of the parsed input (file path or `<text>`).")
    grammar: str = schema_field(
        default="table",
        description="Input grammar detected for the text.",
        json_schema={"enum": ["table", "lines"]},
    )
    title_source: str = schema_field(
        default="fallback",
        description="Where the title and day came from.",
        json_schema={"enum": ["markup", "fallback"]},
    )
    rows_seen: int = schema_field(default=0, description="Candidate rows or lines inspected.")
    rows_parsed: int = schema_field(default=0, description="Rows assembled into records.")
    skipped_rows: list[dict[str, object]] = schema_field(
        default_factory=list,
        description="Rows skipped with the reason (`row`, `reason`, `text`).",
    )
    unparsed_times: list[dict[str, object]] = schema_field(
        default_factory=list,
        description="Records whose time label did not parse (`name`, `time_label`).",
    )
    unknown_nationalities: list[str] = schema_field(
        default_factory=list,
        description="Nationality keys without a known glyph, in first-seen order.",
    )

    def is_clean(self) -> bool:
        return not self.skipped_rows and not self.unparsed_times and not self.unknown_nationalities


@dataclass
class RosterDocument:
    """Complete parse result: title, grouped records and the flat record list."""

    title: str = schema_field("Roster title resolved from the markup or the caller fallback.")
    day: date = schema_field("Calendar day all timestamps are anchored to.")
    groups: list[Group] = schema_field(
        default_factory=list,
        description="Groups in first-appearance order of their key.",
    )
    records: list[Record] = schema_field(
        default_factory=list,
        description="All records, group order then intra-group order.",
    )
    date_note: Optional[str] = schema_field(
        default=None,
        description="Summary of the earliest start and latest end, e.g. `10:00 → next day 02:00`.",
    )
    grammar: str = schema_field(
        default="table",
        description="Input grammar the records were extracted with.",
        json_schema={"enum": ["table", "lines"]},
    )
    report: Optional[ParseReport] = schema_field(
        default=None,
        description="Diagnostics for skipped rows and unparsed values.",
    )

    def get_group(self, key: str) -> Optional[Group]:
        """Return the group with ``key``, if any."""
        return next((g for g in self.groups if g.key == key), None)

    def __len__(self) -> int:
        return len(self.records)
