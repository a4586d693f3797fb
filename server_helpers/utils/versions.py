"""Version parsing and comparison helpers.

Two flavours live here. ``coerce_version`` and friends follow semver
coercion: the first ``major[.minor[.patch]]`` run found anywhere in the
string wins and everything around it (``v`` prefixes, pre-release tags,
build metadata) is ignored. ``is_version_greater_than_or_equal`` is the
lightweight dotted comparison used where any number of segments may appear.

Neither raises on malformed input.
"""
from __future__ import annotations

import re
from typing import Any, NamedTuple, Optional, Tuple

from server_helpers.config import settings

_COERCE_RE = re.compile(r"(?:^|[^0-9])([0-9]{1,16})(?:\.([0-9]{1,16}))?(?:\.([0-9]{1,16}))?(?:$|[^0-9])")
_SEGMENT_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


class Version(NamedTuple):
    """A coerced ``major.minor.patch`` version."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def coerce_segment(value: Any) -> int:
    """Return ``value`` as an integer, or 0 when it is not numeric."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and _SEGMENT_RE.fullmatch(value):
        return int(value)
    return 0


def parse_dotted_version(version: Optional[str]) -> Tuple[int, ...]:
    """Split ``"1.2.3-beta"`` into ``(1, 2, 3)``; bad segments become 0."""
    if not version:
        return ()
    return tuple(coerce_segment(part) for part in version.split("-")[0].split("."))


def coerce_version(version: Any) -> Optional[Version]:
    """Coerce a loose version string such as ``"v2.1"`` into a ``Version``."""
    if version is None or isinstance(version, bool):
        return None
    match = _COERCE_RE.search(str(version))
    if match is None:
        return None
    major, minor, patch = match.groups()
    return Version(int(major), int(minor or 0), int(patch or 0))


def extract_major_version(version: Any) -> Optional[str]:
    """Return the normalized ``major.minor.patch`` string, or None."""
    coerced = coerce_version(version)
    return str(coerced) if coerced is not None else None


def is_version_compatible(running_version: Any, importing_version: Any) -> bool:
    """True when data exported by ``importing_version`` can be imported into ``running_version``.

    Unrecognizable versions on either side are reported as incompatible.
    """
    running = coerce_version(running_version)
    importing = coerce_version(importing_version)
    if running is None or importing is None:
        return False
    return running >= importing


def check_version_compatibility(importing_version: Any) -> bool:
    """Check ``importing_version`` against the running ``settings.APP_VERSION``."""
    return is_version_compatible(settings.APP_VERSION, importing_version)


def is_normalized_app_definition_version(version: Any) -> bool:
    """True when ``version`` exports app definitions in the normalized schema."""
    coerced = coerce_version(version)
    if coerced is None:
        return False
    return coerced >= coerce_version(settings.NORMALIZED_APP_DEFINITION_MIN_VERSION)


def is_version_greater_than_or_equal(version1: Optional[str], version2: Optional[str]) -> bool:
    """Dotted ``version1 >= version2``; an empty ``version1`` is never greater."""
    if not version1:
        return False

    v1_parts = parse_dotted_version(version1)
    v2_parts = parse_dotted_version(version2)

    for index in range(max(len(v1_parts), len(v2_parts))):
        v1_part = v1_parts[index] if index < len(v1_parts) else 0
        v2_part = v2_parts[index] if index < len(v2_parts) else 0

        if v1_part < v2_part:
            return False
        if v1_part > v2_part:
            return True

    return True
