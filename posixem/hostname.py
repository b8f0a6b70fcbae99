"""Retrieval of the current machine's host name."""

from __future__ import annotations

import errno
import os
import socket
from typing import Optional


def gethostname(max_length: Optional[int] = None) -> str:
    """Return the host name of the current machine.

    ``max_length`` is the size of the caller's buffer. That size includes
    room for a terminating character, so the name must be strictly shorter
    than it. A name that does not fit raises ``OSError`` with ENAMETOOLONG.
    ``None`` means no limit.
    """
    if max_length is not None and max_length < 0:
        raise ValueError(f"max_length must not be negative: {max_length}")

    try:
        name = socket.gethostname()
    except OSError as exc:
        raise OSError(exc.errno or errno.EIO, exc.strerror or str(exc)) from exc

    if max_length is not None and len(name) + 1 > max_length:
        raise OSError(errno.ENAMETOOLONG, os.strerror(errno.ENAMETOOLONG), name)

    return name