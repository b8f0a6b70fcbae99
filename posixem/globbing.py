"""Pathname generation from shell-style patterns.

Only the last component of a pattern may hold the metacharacters ``*``
and ``?``. A trailing ``.*`` also matches names that have no extension,
so ``*.*`` matches every entry. Wildcard searches report the ``.`` and
``..`` entries of the searched directory, as well as its contents.
"""

from __future__ import annotations

import errno
import os
import random
import re
from typing import Callable, List, Optional, Tuple

from posixem.globtypes import (
    GlobAbortedError,
    GlobFlag,
    GlobNoMatchError,
    GlobNoSpaceError,
    GlobResult,
)

ErrFunc = Callable[[str, int], object]

_MAX_PATH = 260
_SEPARATORS = "\\/"
_MAGIC = "?*"


def _has_magic(text: str) -> bool:
    return any(ch in text for ch in _MAGIC)


def _leaf_matcher(leaf: str) -> "re.Pattern[str]":
    def translate(part: str) -> str:
        pieces = []
        for ch in part:
            if ch == "*":
                pieces.append(".*")
            elif ch == "?":
                pieces.append(".")
            else:
                pieces.append(re.escape(ch))
        return "".join(pieces)

    if leaf.endswith(".*"):
        regex = translate(leaf[:-2]) + r"(?:\..*)?"
    else:
        regex = translate(leaf)
    options = re.DOTALL
    if os.name == "nt":
        options |= re.IGNORECASE
    return re.compile(regex, options)


def _find(prefix: str, leaf: str) -> List[Tuple[str, bool]]:
    """Return (name, is_directory) for every entry the leaf selects."""
    if not leaf:
        return []
    if not _has_magic(leaf):
        path = prefix + leaf
        if os.path.lexists(path):
            return [(leaf, os.path.isdir(path))]
        return []

    directory = prefix or os.curdir
    names = [".", ".."] + sorted(os.listdir(directory))
    matcher = _leaf_matcher(leaf)
    return [
        (name, os.path.isdir(os.path.join(directory, name)))
        for name in names
        if matcher.fullmatch(name)
    ]


def _home_directory(pattern: str) -> str:
    home = os.path.expanduser("~")
    if not home or home == "~":
        raise GlobAbortedError(pattern, "cannot determine the home directory")
    stripped = home.rstrip(_SEPARATORS)
    return stripped or home


def glob(
    pattern: str,
    flags: GlobFlag = GlobFlag(0),
    errfunc: Optional[ErrFunc] = None,
    offsets: int = 0,
    limit: Optional[int] = None,
) -> GlobResult:
    """Return the paths that match ``pattern``.

    ``offsets`` empty slots lead the path vector when DOOFFS is given;
    ``limit`` caps the number of matches when LIMIT is given, and reaching
    it raises GlobNoSpaceError carrying the matches found. ``errfunc`` is
    called with the pattern and an errno value when nothing can be found.
    """
    flags = GlobFlag(flags)
    pattern = os.fspath(pattern)
    magic = _has_magic(pattern)
    no_magic = bool(flags & GlobFlag.NOMAGIC) and not magic
    result_flags = GlobFlag.MAGCHAR if magic else GlobFlag(0)

    max_matches: Optional[int] = None
    if flags & GlobFlag.LIMIT:
        if limit is None or limit < 1:
            raise ValueError(f"LIMIT requires a positive limit, not {limit!r}")
        max_matches = limit

    offs = offsets if flags & GlobFlag.DOOFFS else 0
    if offs < 0:
        raise ValueError(f"offsets must not be negative: {offs}")

    effective = pattern
    tilde_expanded = False
    if (
        flags & GlobFlag.TILDE
        and pattern[:1] == "~"
        and (len(pattern) == 1 or pattern[1] in _SEPARATORS)
    ):
        home = _home_directory(pattern)
        if len(pattern) + len(home) + 1 > _MAX_PATH - 1:
            raise GlobAbortedError(pattern, os.strerror(errno.EINVAL))
        effective = home + pattern[1:]
        tilde_expanded = True

    sep_index = max(effective.rfind("/"), effective.rfind("\\"))
    has_dir = sep_index >= 0
    prefix = effective[: sep_index + 1]
    leaf = effective[sep_index + 1 :]
    leaf_magic0 = leaf[:1] in ("*", "?") and leaf != ""
    leaf_is_dots = leaf in (".", "..")

    def no_match() -> GlobResult:
        if flags & GlobFlag.TILDE_CHECK and tilde_expanded:
            raise GlobNoMatchError(pattern)
        if no_magic or flags & GlobFlag.NOCHECK:
            return GlobResult((effective,), offs, result_flags)
        raise GlobNoMatchError(pattern)

    error_code = errno.ENOENT
    try:
        candidates = _find(prefix, leaf)
    except OSError as exc:
        candidates = []
        error_code = exc.errno or errno.ENOENT

    if not candidates:
        if magic and has_dir:
            return GlobResult((), offs, result_flags)
        if errfunc is not None:
            errfunc(effective, error_code)
        return no_match()

    paths: List[str] = []
    for name, is_dir in candidates:
        if leaf_magic0 and not flags & GlobFlag.PERIOD and name.startswith("."):
            continue
        if is_dir:
            if flags & GlobFlag.ONLYREG:
                continue
            if leaf_magic0 and flags & GlobFlag.NODOTSDIRS and name in (".", ".."):
                continue
            if flags & GlobFlag.MARK:
                name += "/"
        elif flags & GlobFlag.ONLYDIR:
            continue

        if leaf_is_dots:
            name = leaf + ("/" if flags & GlobFlag.MARK else "")

        paths.append(prefix + name)
        if max_matches is not None and len(paths) == max_matches:
            break

    if not paths:
        return no_match()

    if flags & GlobFlag.NOSORT:
        random.shuffle(paths)

    result = GlobResult(tuple(paths), offs, result_flags)
    if max_matches is not None and len(paths) == max_matches:
        raise GlobNoSpaceError(pattern, result=result)
    return result