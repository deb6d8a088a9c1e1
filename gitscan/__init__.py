"""Find Git repositories with uncommitted changes under a directory tree."""

__version__ = "1.0.0"

__all__ = ["cli", "core", "formatter", "git", "scanner"]