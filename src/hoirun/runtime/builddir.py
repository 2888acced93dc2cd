from __future__ import annotations

"""Scoped per-run build directory.

The directory is created with :func:`tempfile.mkdtemp` and removed when the
``with`` block ends, whichever way it ends: normal return, exception or
``KeyboardInterrupt``. A removal failure never replaces an error already
propagating out of the block.
"""

import contextlib
import logging
import shutil
import tempfile
from pathlib import Path
from typing import Iterator, Optional

from hoirun.constants import BUILD_DIR_PREFIX
from hoirun.errors import RunError
from hoirun.logging.helpers import get_logger
from hoirun.utils.paths import is_within_dir


def _remove(path: Path, parent: Path, log: logging.Logger) -> Optional[OSError]:
    if not is_within_dir(path, parent):
        return OSError(f'refusing to remove {path} outside {parent}')
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return None
    except OSError as exc:
        return exc
    log.debug('🗑  build dir removed → %s', path)
    return None


@contextlib.contextmanager
def build_dir(
    *,
    parent: Optional[Path] = None,
    prefix: str = BUILD_DIR_PREFIX,
    logger: Optional[logging.Logger] = None,
) -> Iterator[Path]:
    """Yield a fresh private directory and remove it on every exit path.

    Raises:
        RunError: the directory could not be removed after a successful block.
    """
    log = logger or get_logger('builddir')
    root = Path(parent) if parent else Path(tempfile.gettempdir())
    path = Path(tempfile.mkdtemp(prefix=prefix, dir=str(root)))
    log.debug('build dir created → %s', path)
    try:
        yield path
    except BaseException:
        err = _remove(path, root, log)
        if err is not None:
            log.warning('⚠  could not delete build dir %s: %s', path, err)
        raise
    err = _remove(path, root, log)
    if err is not None:
        raise RunError(f'could not delete build dir {path}: {err}')
