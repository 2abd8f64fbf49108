"""Shared helpers (merging, YAML I/O)."""
from .io import ensure_directory, read_yaml, write_text_atomic
from .merge import deep_merge

__all__ = ["deep_merge", "ensure_directory", "read_yaml", "write_text_atomic"]
