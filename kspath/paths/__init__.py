"""Path value objects and helpers."""

from kspath.paths.path import Path, is_same_path, path_weight

__all__ = ["Path", "is_same_path", "path_weight"]
