"""Recursive discovery of Git working trees."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator

from .git import is_git_repo


def _walk(path: str) -> Iterator[str]:
    info = os.lstat(path)
    if not stat.S_ISDIR(info.st_mode):
        return
    if is_git_repo(path):
        yield path
        return
    for name in sorted(os.listdir(path)):
        yield from _walk(os.path.join(path, name))


def scan(root_path: str | os.PathLike[str]) -> list[str]:
    """Return every Git working tree under ``root_path`` in lexical order.

    Directories inside a working tree are not searched, and symbolic links
    are not followed. Errors reading the tree are raised as ``OSError``.
    """
    return list(_walk(os.fspath(root_path)))