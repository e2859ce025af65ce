"""Extract the required LÖVE version from ``conf.lua`` text."""

from __future__ import annotations

import re
from typing import Optional

from packaging.version import InvalidVersion, Version

# The delimiter class also accepts a literal "|", and the greedy payload runs to
# the last delimiter on the line; both kept as-is, see DESIGN.md.
VERSION_ASSIGNMENT_RE = re.compile(r"""version *= *["|'](.*)["|']""")


def parse_version(value: str) -> Optional[Version]:
    """Parse a version string, returning None when it is not a valid version."""
    try:
        return Version(value.strip())
    except InvalidVersion:
        return None


def find_version_string(text: str) -> Optional[str]:
    """Return the payload of the first ``version = "..."`` assignment, if any."""
    match = VERSION_ASSIGNMENT_RE.search(text)
    if match is None:
        return None
    return match.group(1)


def extract_version(text: str) -> Optional[Version]:
    """Find the first version assignment in ``text`` and parse it.

    Only the leftmost match is considered: if it does not parse, no later
    assignment is tried.
    """
    captured = find_version_string(text)
    if captured is None:
        return None
    return parse_version(captured)
