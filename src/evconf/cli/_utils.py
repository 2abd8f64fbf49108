"""Shared CLI utility functions."""
from __future__ import annotations

import argparse
from pathlib import Path


def get_repo_root(args: argparse.Namespace) -> Path:
    """Get repository root from ``--repo-root`` or fall back to the working directory."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).resolve()
    return Path.cwd().resolve()


__all__ = ["get_repo_root"]
