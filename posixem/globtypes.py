"""Flags, results and errors used by the glob() implementation."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


class GlobFlag(enum.IntFlag):
    """Flags that control a glob search, and flags reported in its result."""

    ERR = 0x00000001
    """Return on read failures."""
    MARK = 0x00000002
    """Append a slash to each directory name."""
    NOSORT = 0x00000004
    """Do not sort the names."""
    DOOFFS = 0x00000008
    """Reserve leading empty slots in the path vector."""
    NOCHECK = 0x00000010
    """If nothing matches, return the pattern."""
    APPEND = 0x00000020
    """Append to results of a previous call (not supported)."""
    NOESCAPE = 0x00000040
    """Backslashes do not quote metacharacters (escaping is not supported)."""
    PERIOD = 0x00000080
    """A leading '.' can be matched by metacharacters."""
    MAGCHAR = 0x00000100
    """Reported in the result if the pattern held metacharacters."""
    NOMAGIC = 0x00000800
    """If the pattern has no metacharacters, return the pattern."""
    TILDE = 0x00001000
    """Expand a leading '~' to the home directory."""
    ONLYDIR = 0x00002000
    """Match only directories."""
    TILDE_CHECK = 0x00004000
    """Like TILDE, but report no match even if NOCHECK is given."""
    ONLYREG = 0x00008000
    """Match only regular files."""
    NODOTSDIRS = 0x00010000
    """Elide '.' and '..' directories from wildcard searches."""
    LIMIT = 0x00020000
    """Limit the number of matches to the caller's limit."""


@dataclass(frozen=True)
class GlobResult:
    """The paths produced by a glob search."""

    paths: Tuple[str, ...] = ()
    offsets: int = 0
    flags: GlobFlag = GlobFlag(0)

    def __post_init__(self) -> None:
        if self.offsets < 0:
            raise ValueError(f"offsets must not be negative: {self.offsets}")
        object.__setattr__(self, "paths", tuple(self.paths))
        object.__setattr__(self, "flags", GlobFlag(self.flags))

    @property
    def matchc(self) -> int:
        """The number of paths that matched."""
        return len(self.paths)

    @property
    def pathv(self) -> Tuple[Optional[str], ...]:
        """The paths, preceded by ``offsets`` empty slots."""
        return (None,) * self.offsets + self.paths

    @property
    def magic(self) -> bool:
        """Whether the pattern contained metacharacters."""
        return bool(self.flags & GlobFlag.MAGCHAR)

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)


class GlobError(Exception):
    """Base class of the errors a glob search raises."""

    code = 0

    def __init__(self, pattern: str, message: Optional[str] = None) -> None:
        self.pattern = pattern
        super().__init__(message or f"glob failed for {pattern!r}")


class GlobNoSpaceError(GlobError):
    """Storage ran out, or the match limit was reached.

    When the limit was reached, ``result`` holds the matches found so far.
    """

    code = 1

    def __init__(
        self,
        pattern: str,
        message: Optional[str] = None,
        result: Optional[GlobResult] = None,
    ) -> None:
        super().__init__(pattern, message or f"match limit reached for {pattern!r}")
        self.result = result


class GlobAbortedError(GlobError):
    """The search was stopped because of an error."""

    code = 2

    def __init__(self, pattern: str, message: Optional[str] = None) -> None:
        super().__init__(pattern, message or f"glob aborted for {pattern!r}")


class GlobNoMatchError(GlobError):
    """The pattern matched no existing path."""

    code = 3

    def __init__(self, pattern: str, message: Optional[str] = None) -> None:
        super().__init__(pattern, message or f"no match for {pattern!r}")