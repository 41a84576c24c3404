from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from msgversions.exceptions import InvalidRange, NotRepresentable, ParseError
from msgversions.utils import VersionLimits
from msgversions.warnings import InvertedRange, versions_warn

MIN_VERSION = VersionLimits.MIN_VERSION
MAX_VERSION = VersionLimits.MAX_VERSION

NONE_STRING = "none"

_NUMBER_RE = re.compile(r"[0-9]+")


def _parse_version(text: str, token: str, col_offset: int) -> int:
    if not _NUMBER_RE.fullmatch(token):
        raise ParseError(
            f"Invalid version number {token!r} in version range {text!r}",
            text,
            col_offset,
            hint=f'expected "{NONE_STRING}", "A", "A+" or "A-B"',
        )
    version = int(token)
    if version > MAX_VERSION:
        raise ParseError(
            f"Version number {version} is out of range",
            text,
            col_offset,
            hint=f"versions must be between {MIN_VERSION} and {MAX_VERSION}",
        )
    return version


@dataclass(frozen=True, slots=True)
class VersionRange:
    """Immutable, inclusive range of message versions.

    Both bounds are valid versions. A range whose lowest version is greater
    than its highest contains no versions at all; every such range is
    normalized to the canonical NONE form (0, -1).

    String forms:
        "V"     a single version V
        "A-B"   versions A through B
        "A+"    version A and everything after it
        "none"  the empty range
    """

    lowest: int
    highest: int

    def __post_init__(self):
        for bound in (self.lowest, self.highest):
            if not isinstance(bound, int) or isinstance(bound, bool):
                raise InvalidRange(
                    f"Invalid version range {self.lowest!r} to {self.highest!r}",
                    hint="version bounds must be integers",
                )
        if not (MIN_VERSION <= self.lowest <= MAX_VERSION) or not (
            MIN_VERSION <= self.highest <= MAX_VERSION
        ):
            raise InvalidRange(
                f"Invalid version range {self.lowest} to {self.highest}",
                hint=f"versions must be between {MIN_VERSION} and {MAX_VERSION}",
            )

        if self.lowest > self.highest:
            versions_warn(
                InvertedRange(
                    f"Version range {self.lowest} to {self.highest} is inverted "
                    "and contains no versions",
                    hint=f'use NONE (or "{NONE_STRING}") to denote an empty range',
                ),
                # skip the generated __init__ and report at the constructor call
                stacklevel=3,
            )
            object.__setattr__(self, "lowest", 0)
            object.__setattr__(self, "highest", -1)

    @classmethod
    def _none(cls) -> VersionRange:
        # highest=-1 is below the version domain, so skip validation
        ret = object.__new__(cls)
        object.__setattr__(ret, "lowest", 0)
        object.__setattr__(ret, "highest", -1)
        return ret

    @classmethod
    def parse(cls, text: Optional[str], default: Optional[VersionRange] = None):
        """
        Parse a version range string.

        Surrounding whitespace is ignored. ``default`` is returned for None
        or blank input; malformed input raises ParseError.
        """
        if text is None:
            return default
        if not isinstance(text, str):
            raise ParseError(f"Expected a version range string, got {type(text).__name__}")

        text = text.strip()
        if len(text) == 0:
            return default
        if text == NONE_STRING:
            return NONE

        if text.endswith("+"):
            return cls(_parse_version(text, text[:-1], 0), MAX_VERSION)

        dash_index = text.find("-")
        if dash_index < 0:
            version = _parse_version(text, text, 0)
            return cls(version, version)

        return cls(
            _parse_version(text, text[:dash_index], 0),
            _parse_version(text, text[dash_index + 1 :], dash_index + 1),
        )

    def empty(self) -> bool:
        """Check if this range contains no versions."""
        return self.lowest > self.highest

    def intersect(self, other: VersionRange) -> VersionRange:
        """Return the versions present in both ranges."""
        lowest = max(self.lowest, other.lowest)
        highest = min(self.highest, other.highest)
        if lowest > highest:
            return NONE
        return VersionRange(lowest, highest)

    def subtract(self, other: VersionRange) -> VersionRange:
        """
        Return this range with the versions in ``other`` trimmed off.

        Versions can only be trimmed from either end of the range. If
        ``other`` lies strictly inside this range the result would be two
        disjoint ranges, and NotRepresentable is raised instead.

            1-4 - 1-2 = 3-4
            3+  - 4+  = 3
            4+  - 3+  = none
            1-5 - 2-4 -> NotRepresentable
        """
        if other.lowest <= self.lowest:
            if other.highest >= self.highest:
                # other covers all of self
                return NONE
            elif other.highest < self.lowest:
                # other is disjoint and below self
                return self
            else:
                # trim the head. other.highest + 1 cannot overflow here,
                # since other.highest < self.highest <= MAX_VERSION
                return VersionRange(other.highest + 1, self.highest)
        elif other.highest >= self.highest:
            new_highest = other.lowest - 1
            if new_highest < 0:
                # other is NONE
                return self
            elif new_highest < self.highest:
                # trim the tail
                return VersionRange(self.lowest, new_highest)
            else:
                # other is disjoint and above self
                return self

        pieces = (
            VersionRange(self.lowest, other.lowest - 1),
            VersionRange(other.highest + 1, self.highest),
        )
        raise NotRepresentable(
            f"Cannot subtract {other} from {self}: "
            f"the result would be two ranges, {pieces[0]} and {pieces[1]}",
            pieces,
            hint="use `difference()` to get both ranges",
        )

    def difference(self, other: VersionRange) -> tuple[VersionRange, ...]:
        """
        Return the versions of this range that are not in ``other``, as a
        tuple of zero, one or two non-empty ranges in ascending order.
        """
        if self.empty():
            return ()
        if other.empty():
            return (self,)

        ret = []
        if other.lowest > self.lowest:
            ret.append(VersionRange(self.lowest, min(self.highest, other.lowest - 1)))
        if other.highest < self.highest:
            ret.append(VersionRange(max(self.lowest, other.highest + 1), self.highest))
        return tuple(ret)

    def contains(self, item: Union[int, VersionRange]) -> bool:
        """
        Check if a version, or every version of a range, is in this range.
        The empty range is contained in every range.
        """
        if isinstance(item, VersionRange):
            if item.empty():
                return True
            return self.lowest <= item.lowest and self.highest >= item.highest
        return self.lowest <= item <= self.highest

    def versions(self) -> Iterator[int]:
        """Iterate over every version in this range in ascending order."""
        return iter(range(self.lowest, self.highest + 1))

    def __contains__(self, item) -> bool:
        return self.contains(item)

    def __and__(self, other):
        if not isinstance(other, VersionRange):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other):
        if not isinstance(other, VersionRange):
            return NotImplemented
        return self.subtract(other)

    def __reduce__(self):
        return (VersionRange.parse, (str(self),))

    def __str__(self) -> str:
        if self.empty():
            return NONE_STRING
        if self.lowest == self.highest:
            return str(self.lowest)
        if self.highest == MAX_VERSION:
            return f"{self.lowest}+"
        return f"{self.lowest}-{self.highest}"

    def __repr__(self) -> str:
        return f"VersionRange({str(self)!r})"


ALL = VersionRange(MIN_VERSION, MAX_VERSION)

NONE = VersionRange._none()

parse = VersionRange.parse
