"""Datetime layouts written against a reference timestamp.

A layout spells out how the reference time ``Mon Jan 2 15:04:05 MST 2006``
(zone offset ``-0700``) would be rendered, e.g. ``2006-01-02T15:04:05Z07:00``.
Layouts are translated to ``strptime`` patterns once and cached.
"""

from __future__ import annotations

import re
from datetime import datetime
from functools import lru_cache

NAMED_LAYOUTS: dict[str, str] = {
    "ANSIC": "Mon Jan _2 15:04:05 2006",
    "RFC822": "02 Jan 06 15:04 MST",
    "RFC822Z": "02 Jan 06 15:04 -0700",
    "RFC850": "Monday, 02-Jan-06 15:04:05 MST",
    "RFC1123": "Mon, 02 Jan 2006 15:04:05 MST",
    "RFC1123Z": "Mon, 02 Jan 2006 15:04:05 -0700",
    "RFC3339": "2006-01-02T15:04:05Z07:00",
    "RFC3339Nano": "2006-01-02T15:04:05.999999999Z07:00",
    "Kitchen": "3:04PM",
    "DateTime": "2006-01-02 15:04:05",
    "DateOnly": "2006-01-02",
    "TimeOnly": "15:04:05",
}

DEFAULT_LAYOUT = NAMED_LAYOUTS["RFC3339"]

# Longest tokens first within each group of shared prefixes.
_TOKENS: list[tuple[str, str]] = [
    ("January", "%B"),
    ("Jan", "%b"),
    ("Monday", "%A"),
    ("Mon", "%a"),
    ("MST", "%Z"),
    ("2006", "%Y"),
    ("002", "%j"),
    ("01", "%m"),
    ("02", "%d"),
    ("03", "%I"),
    ("04", "%M"),
    ("05", "%S"),
    ("06", "%y"),
    ("_2", "%d"),
    ("15", "%H"),
    ("1", "%m"),
    ("2", "%d"),
    ("3", "%I"),
    ("4", "%M"),
    ("5", "%S"),
    ("PM", "%p"),
    ("pm", "%p"),
    ("Z07:00:00", "%z"),
    ("-07:00:00", "%z"),
    ("Z07:00", "%z"),
    ("-07:00", "%z"),
    ("Z0700", "%z"),
    ("-0700", "%z"),
    ("Z07", "%z"),
    ("-07", "%z"),
]

_FRACTION_RE = re.compile(r"[.,](0+|9+)(?!\d)")
_LONG_FRACTION_RE = re.compile(r"(:\d\d[.,]\d{6})\d+")
_ZONE_ABBREV_RE = re.compile(r"(?<![A-Za-z])[A-Z]{3,4}(?![A-Za-z])")


def resolve_layout(layout: str) -> str:
    """Map a named layout to its reference form; empty means RFC3339."""
    if not layout:
        return DEFAULT_LAYOUT
    return NAMED_LAYOUTS.get(layout, layout)


@lru_cache(maxsize=256)
def to_strptime(layout: str) -> str:
    """Translate a reference-timestamp layout into a ``strptime`` pattern.

    Patterns that already contain ``%`` directives are returned unchanged.
    """
    layout = resolve_layout(layout)
    if "%" in layout:
        return layout

    out: list[str] = []
    i = 0
    while i < len(layout):
        fraction = _FRACTION_RE.match(layout, i)
        if fraction and out and out[-1] == "%S":
            out.append(layout[i] + "%f")
            i = fraction.end()
            continue
        for token, directive in _TOKENS:
            if layout.startswith(token, i):
                out.append(directive)
                i += len(token)
                break
        else:
            out.append(layout[i])
            i += 1
    return "".join(out)


def matches_layout(text: str, layout: str) -> bool:
    """Whether ``text`` parses against ``layout``.

    As with the reference parser, fractional seconds are accepted right
    after the seconds field even when the layout does not spell them out.
    """
    pattern = to_strptime(layout)
    # strptime reads at most microseconds; nanosecond input is cut down to them.
    text = _LONG_FRACTION_RE.sub(r"\1", text)
    if "%Z" in pattern:
        # %Z only knows UTC, GMT and local names; any abbreviation is accepted.
        text = _ZONE_ABBREV_RE.sub("UTC", text, count=1)
    candidates = [pattern]
    if "%S" in pattern and "%f" not in pattern:
        candidates.append(pattern.replace("%S", "%S.%f", 1))
    for candidate in candidates:
        try:
            datetime.strptime(text, candidate)
        except ValueError:
            continue
        return True
    return False
