"""Rendering scan results as text or JSON."""

from __future__ import annotations

import json
import os
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from .git import Repository

VERSION = "1.0.0"


@dataclass
class FormatOptions:
    """Options that control how results are rendered."""

    json: bool = False


def format_repositories(repos: Sequence[Repository], options: FormatOptions | None = None) -> None:
    """Print the repositories to standard output in the requested format."""
    options = options or FormatOptions()
    if not repos:
        print("No Git repositories with uncommitted changes found.")
    elif options.json:
        _format_json(repos)
    else:
        _format_text(repos)


def _now() -> str:
    return datetime.now().astimezone().isoformat()


def _format_json(repos: Sequence[Repository]) -> None:
    total = len(repos)
    output = {
        "repositories": [
            {
                "path": repo.path,
                "changes": list(repo.changes),
                "scan_time": _now(),
                "total_repositories": total,
            }
            for repo in repos
        ],
        "metadata": {
            "scan_time": _now(),
            "total_repositories": total,
            "version": VERSION,
        },
    }
    print(json.dumps(output, indent=2, ensure_ascii=False))


def _display_path(path: str) -> str:
    home = os.environ.get("HOME", "")
    if home and path.startswith(home):
        return "~" + path[len(home):]
    return path


def _format_text(repos: Sequence[Repository]) -> None:
    print(f"Found {len(repos)} Git repositories with uncommitted changes:")
    print()
    for number, repo in enumerate(repos, start=1):
        print(f"{number}. {_display_path(repo.path)}")
        for change in repo.changes:
            print(f"   - {change}")
        print()