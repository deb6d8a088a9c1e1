"""The scan workflow: find repositories, check them, report the dirty ones."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass

from .formatter import FormatOptions, format_repositories
from .git import Repository, check_status
from .scanner import scan


@dataclass
class Options:
    """Settings for a scan."""

    path: str = "."
    json: bool = False
    verbose: bool = False


class Scanner:
    """Scans a directory tree and reports repositories with uncommitted changes."""

    def __init__(self, options: Options | None = None) -> None:
        self.options = options or Options()

    def run(self) -> None:
        """Perform the scan and print the report.

        Raises ``FileNotFoundError`` if the path does not exist and
        ``OSError`` if the tree cannot be read.
        """
        abs_path = os.path.abspath(self.options.path)
        if not os.path.exists(abs_path):
            raise FileNotFoundError(f"path does not exist: {abs_path}")

        try:
            git_dirs = scan(abs_path)
        except OSError as exc:
            raise OSError(f"scan error: {exc}") from exc

        if self.options.verbose:
            print(f"Found {len(git_dirs)} Git repositories")

        dirty: list[Repository] = []
        for directory in git_dirs:
            try:
                repo = check_status(directory)
            except (OSError, subprocess.SubprocessError) as exc:
                if self.options.verbose:
                    print(
                        f"Warning: failed to check status of {directory}: {exc}",
                        file=sys.stderr,
                    )
                continue
            if repo.changes:
                dirty.append(repo)

        format_repositories(dirty, FormatOptions(json=self.options.json))