"""Directory enumeration in the style of opendir()/readdir()."""

from __future__ import annotations

import errno
import itertools
import os
from dataclasses import dataclass
from typing import Iterator, Optional, Union

PathType = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class DirEntry:
    """A single entry read from a directory."""

    name: str
    mode: int
    is_dir: bool


class Directory:
    """An open directory stream.

    Entries are produced in the order the filesystem reports them, preceded
    by the "." and ".." entries.
    """

    def __init__(self, name: PathType) -> None:
        path = os.fspath(name) if name is not None else ""
        if not path:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        try:
            is_dir = os.path.isdir(path)
            exists = is_dir or os.path.lexists(path)
        except (OSError, ValueError):
            exists = False
            is_dir = False
        if not exists:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        if not is_dir:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)

        self._path = path
        self._closed = False
        self._scanner: Optional[os.ScandirIterator] = None
        self._entries: Optional[Iterator[DirEntry]] = None
        self._start()

    @property
    def path(self) -> str:
        """The path the directory was opened with."""
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def _dots(self) -> Iterator[DirEntry]:
        for dot in (".", ".."):
            st = os.stat(os.path.join(self._path, dot))
            yield DirEntry(dot, st.st_mode, True)

    def _scan(self, scanner: "os.ScandirIterator") -> Iterator[DirEntry]:
        for entry in scanner:
            try:
                mode = entry.stat(follow_symlinks=False).st_mode
            except OSError:
                mode = 0
            try:
                is_dir = entry.is_dir()
            except OSError:
                is_dir = False
            yield DirEntry(entry.name, mode, is_dir)

    def _start(self) -> None:
        self._release()
        self._scanner = os.scandir(self._path)
        self._entries = itertools.chain(self._dots(), self._scan(self._scanner))

    def _release(self) -> None:
        if self._scanner is not None:
            self._scanner.close()
        self._scanner = None
        self._entries = None

    def _check_open(self) -> None:
        if self._closed:
            raise OSError(errno.EBADF, os.strerror(errno.EBADF), self._path)

    def read(self) -> Optional[DirEntry]:
        """Return the next entry, or None once the directory is exhausted."""
        self._check_open()
        if self._entries is None:
            return None
        entry = next(self._entries, None)
        if entry is None:
            self._release()
        return entry

    def rewind(self) -> None:
        """Restart enumeration from the first entry."""
        self._check_open()
        self._start()

    def close(self) -> None:
        """Close the stream; closing it a second time raises EBADF."""
        self._check_open()
        self._release()
        self._closed = True

    def __iter__(self) -> Iterator[DirEntry]:
        while (entry := self.read()) is not None:
            yield entry

    def __enter__(self) -> "Directory":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._closed:
            self.close()

    def __del__(self) -> None:
        try:
            self._release()
        except Exception:
            pass


def opendir(name: PathType) -> Directory:
    """Open ``name`` for enumeration."""
    return Directory(name)