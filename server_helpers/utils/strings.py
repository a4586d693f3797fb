"""String helpers for user supplied names and free text."""
from __future__ import annotations

import html
import re
import time
from typing import Iterable, Optional, Sequence

_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

TRUNCATE_START = 35
TRUNCATE_END = 50


def _now_ms() -> int:
    return int(time.time() * 1000)


def sanitize_input(value: str) -> str:
    """Render any markup in ``value`` inert.

    No tag or attribute is allowed through; instead of being dropped,
    disallowed tags are escaped together with their content so the user
    still sees exactly what they typed. Existing entities are decoded first
    so they are not escaped twice.
    """

    return html.escape(html.unescape(value), quote=False)


def lowercase_string(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.lower().strip()


def is_plural(data: Optional[Sequence]) -> str:
    return "s" if data is not None and len(data) > 1 else ""


def generate_next_name_and_slug(first_word: str) -> dict[str, str]:
    """Return a unique-enough name such as ``"app 1697040000000"`` and its slug."""

    name = f"{first_word} {_now_ms()}"
    slug = _WHITESPACE_RE.sub("-", name).lower()
    return {"name": name, "slug": slug}


def truncate_and_replace(name: str) -> str:
    """Make ``name`` unique by mixing in the current epoch milliseconds.

    Long names have their 35..50 character window swapped for the
    timestamp (first occurrence of that text), short ones get it appended.
    """

    timestamp = str(_now_ms())
    if len(name) > TRUNCATE_START:
        return name.replace(name[TRUNCATE_START:TRUNCATE_END], timestamp, 1)
    return name + timestamp


def _parse_leading_int(value: str) -> Optional[int]:
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else None


def get_max_copy_number(existing_names: Iterable[str], split_char: str = "_") -> int | str:
    """Return the next copy number for names like ``"app_1"``, ``"app_2"``.

    An empty list yields ``""`` so callers can tell "no clash at all" apart
    from "clashes without a numeric suffix" (which yields 1).
    """

    names = list(existing_names)
    if not names:
        return ""

    numbers = []
    for name in names:
        number = _parse_leading_int(name.split(split_char)[-1])
        if number is not None:
            numbers.append(number)

    return max([*numbers, 0]) + 1
