"""Canonical identity and revision of a flow measure."""

from __future__ import annotations

import re
from dataclasses import dataclass

_REVISION_PATTERN = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_identifier(identifier: str) -> str:
    separator = identifier.rfind("-")
    return identifier if separator == -1 else identifier[:separator]


def _parse_revision(identifier: str) -> int:
    separator = identifier.rfind("-")
    if separator == -1:
        return 0
    match = _REVISION_PATTERN.match(identifier[separator + 1 :])
    if match is None:
        return 0
    revision = int(match.group(1))
    if not _INT_MIN <= revision <= _INT_MAX:
        raise OverflowError(f"Flow measure revision out of range: {identifier!r}")
    return revision


@dataclass(frozen=True)
class CanonicalFlowMeasureInfo:
    """The identifier of a flow measure without its revision suffix, plus the revision.

    For example "EHAA15A-2" has the canonical identifier "EHAA15A" and revision 2.
    """

    identifier: str
    revision: int

    def __init__(self, identifier: str) -> None:
        object.__setattr__(self, "identifier", _parse_identifier(identifier))
        object.__setattr__(self, "revision", _parse_revision(identifier))

    def is_after(self, other: CanonicalFlowMeasureInfo) -> bool:
        """Return True if this is a later revision of the same canonical measure."""
        return self.identifier == other.identifier and self.revision > other.revision