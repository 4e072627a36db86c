"""
Stat entries and group run boundaries
"""

from typing import Any, NamedTuple


class StatEntry(NamedTuple):
    """A single navigable stat: label, value and the group it belongs to"""

    label: str
    value: str
    group: Any

    def __str__(self):
        return f"{self.label}: {self.value}"


def build_group_bounds(entries):
    """
    Find the index where each contiguous group run starts

    A group tag that reappears after a different group starts a new run,
    so groups [A, B, A] give bounds [0, 1, 2].

    Args:
        entries: Ordered sequence of StatEntry

    Returns:
        list: Strictly increasing run start indices, empty for empty input
    """
    bounds = []
    last_group = None
    for i, entry in enumerate(entries):
        if i == 0 or entry.group != last_group:
            bounds.append(i)
            last_group = entry.group
    return bounds


def entries_from_rows(rows):
    """
    Build StatEntry values from profile rows

    Each row is either a [label, value, group] list or a dict with
    "label", "value" and "group" keys. A missing group becomes "default".

    Args:
        rows: Iterable of rows as loaded from JSON

    Returns:
        list: StatEntry values in row order

    Raises:
        ValueError: If a row has the wrong shape
    """
    entries = []
    for i, row in enumerate(rows):
        if isinstance(row, dict):
            if "label" not in row or "value" not in row:
                raise ValueError(f"Entry {i} is missing 'label' or 'value'")
            label, value, group = row["label"], row["value"], row.get("group", "default")
        elif isinstance(row, (list, tuple)) and len(row) in (2, 3):
            label, value = row[0], row[1]
            group = row[2] if len(row) == 3 else "default"
        else:
            raise ValueError(f"Entry {i} must be [label, value, group] or an object, got {row!r}")
        if isinstance(group, (list, dict)):
            raise ValueError(f"Entry {i} group must be a string or number, got {group!r}")
        entries.append(StatEntry(str(label), str(value), group))
    return entries
