from __future__ import annotations

"""Discovery of custom fact directories inside a module tree.

Custom facts live in ``<module>/lib/facter``, i.e. three levels below the
module base path; one extra level covers nested module layouts. The walk is
pruned at the maximum depth so large checkouts stay cheap to scan.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from hoirun.constants import (
    FACTER_PLUGIN_DIR_NAME,
    FACTER_PLUGIN_MAX_DEPTH,
    FACTER_PLUGIN_MIN_DEPTH,
)
from hoirun.logging.helpers import get_logger


def find_facter_dirs(
    base: Path,
    *,
    name: str = FACTER_PLUGIN_DIR_NAME,
    min_depth: int = FACTER_PLUGIN_MIN_DEPTH,
    max_depth: int = FACTER_PLUGIN_MAX_DEPTH,
    logger: Optional[logging.Logger] = None,
) -> List[Path]:
    """Return sorted directories called *name* between *min_depth* and *max_depth* below *base*."""
    log = logger or get_logger('discovery.facter')
    root = Path(base)
    found: List[Path] = []
    if not root.is_dir():
        log.warning('⚠  module base path %s does not exist', root)
        return found

    base_depth = len(root.parts)
    for dirpath, dirnames, _ in os.walk(root):
        depth = len(Path(dirpath).parts) - base_depth
        if depth + 1 >= max_depth:
            candidates, dirnames[:] = list(dirnames), []
        else:
            candidates = list(dirnames)
        if depth + 1 < min_depth:
            continue
        found.extend(Path(dirpath) / d for d in candidates if d == name)

    found.sort()
    log.debug('facter plugin dirs: %s', ', '.join(map(str, found)) or '(none)')
    return found
