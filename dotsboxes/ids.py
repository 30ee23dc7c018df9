from __future__ import annotations

import re

from dotsboxes.models import Box, Orientation

_LINE_ID_RE = re.compile(r"^(horizontal|vertical)-(\d+)-(\d+)$")


def line_id(orientation: Orientation | str, row: int, col: int) -> str:
    return f"{Orientation(orientation).value}-{row}-{col}"


def box_id(row: int, col: int) -> str:
    return f"b-{row}-{col}"


def parse_line_id(text: str) -> tuple[Orientation, int, int]:
    """Split a line id such as `vertical-2-3` into (orientation, row, col)."""

    m = _LINE_ID_RE.match(text)
    if m is None:
        raise ValueError(f"Malformed line id: {text!r}")
    return Orientation(m.group(1)), int(m.group(2)), int(m.group(3))


def box_line_ids(box: Box) -> tuple[str, str, str, str]:
    """Bounding line ids of a box, in top, bottom, left, right order."""

    return (
        line_id(Orientation.horizontal, box.row, box.col),
        line_id(Orientation.horizontal, box.row + 1, box.col),
        line_id(Orientation.vertical, box.row, box.col),
        line_id(Orientation.vertical, box.row, box.col + 1),
    )
