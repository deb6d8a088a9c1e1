"""Inspecting Git working trees for uncommitted changes."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field

_CHANGE_KINDS = {
    "M": "modified",
    "A": "added",
    "D": "deleted",
    "R": "renamed",
    "C": "copied",
    "U": "unmerged",
    "?": "untracked",
    "!": "ignored",
    "T": "type changed",
}


@dataclass
class Repository:
    """A Git working tree and the changes found in it."""

    path: str
    changes: list[str] = field(default_factory=list)


def is_git_repo(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` holds a ``.git`` directory."""
    return os.path.isdir(os.path.join(path, ".git"))


def check_status(repo_path: str | os.PathLike[str]) -> Repository:
    """Run ``git status --porcelain`` in ``repo_path`` and collect its changes.

    Raises ``OSError`` if git cannot be started in that directory and
    ``subprocess.CalledProcessError`` if git reports a failure.
    """
    result = subprocess.run(
        ["git", "status", "--porcelain"],
        cwd=repo_path,
        capture_output=True,
        text=True,
        check=True,
    )
    return Repository(path=os.fspath(repo_path), changes=parse_git_status(result.stdout))


def parse_git_status(output: str) -> list[str]:
    """Turn porcelain status output into readable change descriptions.

    Each line has the form ``XY PATH``; the change kind is taken from the
    staged-status column ``X``.
    """
    changes = []
    for line in output.rstrip().split("\n"):
        if not line.strip():
            continue
        status, path = line[:2], line[3:].strip()
        kind = _CHANGE_KINDS.get(status[:1], "unknown")
        changes.append(f"{kind}: {path}")
    return changes