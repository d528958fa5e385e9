"""Fold records into nationality groups."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from roster_parser.models import Group, Record
from roster_parser.nationality import guess_flag

OTHERS_KEY = "others"


def group_records(records: Iterable[Record], sort_by_start: bool = True) -> list[Group]:
    """
    Group records by nationality key in first-appearance order.

    Records without a key go to the ``others`` group. With ``sort_by_start``
    each group is stably sorted by start time, records without one first.
    """
    groups: dict[str, Group] = {}
    for record in records:
        key = record.nationality_key or OTHERS_KEY
        if key not in groups:
            groups[key] = Group(key=key, flag=guess_flag(record.nationality_key))
        groups[key].records.append(record)

    if sort_by_start:
        for group in groups.values():
            group.records.sort(key=lambda r: r.start or datetime.min)
    return list(groups.values())


def flatten_groups(groups: Iterable[Group]) -> list[Record]:
    return [record for group in groups for record in group.records]
