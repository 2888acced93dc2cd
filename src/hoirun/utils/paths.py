# src/hoirun/utils/paths.py
"""
paths – Small, centralized path helpers for hoirun.

Provides:
  • strip_leading_sep(str)      – drop exactly one leading '/'
  • hierarchy_prefix(Path)      – data dir as a hierarchy entry prefix
  • override_entry(Path)        – override file as a hierarchy entry
  • is_within_dir(path, parent) – containment check
"""

from __future__ import annotations

import os
from pathlib import Path


def strip_leading_sep(s: str) -> str:
    """Remove a single leading path separator from *s*, if present."""
    return s[1:] if s.startswith('/') else s


def hierarchy_prefix(data_dir: Path) -> str:
    """Return the absolute *data_dir* without its leading separator.

    The rewritten config declares ``:datadir: /``, so hierarchy entries
    carry the rest of the absolute path themselves.
    """
    return strip_leading_sep(os.path.abspath(str(data_dir)))


def override_entry(override_file: Path) -> str:
    """Return *override_file* as a hierarchy entry.

    Hiera appends the backend extension on lookup, so the file extension is
    removed together with one leading separator of the absolute path.
    """
    absolute = Path(os.path.abspath(str(override_file)))
    return strip_leading_sep(str(absolute.with_suffix('')))


def join_entry(prefix: str, entry: str) -> str:
    """Join a hierarchy *prefix* and *entry* with a single '/'."""
    if not prefix:
        return entry
    return f'{prefix}/{entry}'


def is_within_dir(path: Path, parent: Path) -> bool:
    """Return True if *path* is contained inside *parent*."""
    try:
        path.resolve().relative_to(Path(parent).resolve())
        return True
    except ValueError:
        return False
