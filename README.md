# gitscan

Scan a directory tree for Git repositories that have uncommitted changes.

`gitscan` walks the given directory recursively, in lexical order, without
following symbolic links. Each directory containing a `.git` directory is
treated as a repository, and its subdirectories are not searched further.
The tool runs `git status --porcelain` in every repository it finds and lists
those with modified, added, deleted, renamed, copied, unmerged, untracked,
ignored or type-changed files.

`git` must be available on your `PATH`.

## Installation

```
pip install .
```

This installs the `gus` command.

## Usage

```
gus [PATH] [--path PATH] [--json] [-v | --verbose]
```

- `PATH` / `--path`: directory to scan (default: the current directory).
  A positional path takes precedence over `--path`.
- `--json`: print the results as JSON.
- `-v`, `--verbose`: print how many repositories were found, and warn on
  standard error about repositories whose status could not be read.
  Without it, such repositories are skipped silently.

Text output example:

```
Found 2 Git repositories with uncommitted changes:

1. ~/projects/app
   - modified: main.py
   - untracked: notes.txt

2. ~/projects/lib
   - deleted: old_file.txt
```

Paths that begin with the value of `$HOME` are shown with a leading `~`.

With `--json`, the output is an object holding a `repositories` list (each
entry has `path`, `changes`, `scan_time` and `total_repositories`) and a
`metadata` object with `scan_time`, `total_repositories` and `version`.
Times are local ISO 8601 timestamps with a UTC offset.

If no repository has changes, the command prints
`No Git repositories with uncommitted changes found.` It exits with status 1
and an `Error:` message on standard error if the path does not exist or the
tree cannot be read.

The command only reports; it does not commit, stash or otherwise change any
repository.

## Library use

```python
from gitscan.core import Options, Scanner

Scanner(Options(path="/home/me/projects", json=False, verbose=True)).run()
```

`Scanner.run()` prints its report and raises `FileNotFoundError` if the path
does not exist. The path is taken as given; `~` is not expanded.

Lower-level helpers:

- `gitscan.scanner.scan(root_path)` returns the repository directories found.
- `gitscan.git.is_git_repo(path)` tells whether a directory holds `.git`.
- `gitscan.git.check_status(repo_path)` returns a `Repository` with `path`
  and `changes`; it raises `subprocess.CalledProcessError` if git fails.
- `gitscan.git.parse_git_status(output)` turns porcelain output into
  strings such as `modified: file.txt`.
- `gitscan.formatter.format_repositories(repos, options)` prints a list of
  repositories as text, or as JSON with `FormatOptions(json=True)`.

## Running the tests

```
pip install ".[test]"
pytest
```