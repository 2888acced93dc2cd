from __future__ import annotations

"""
manifest – Synthesis of the minimal top-level ``site.pp`` for a local run.

The generated manifest has a fixed shape::

    node default {
      $role = 'webserver'
      include base
      include nginx
    }

Variables keep override-file order, modules keep command-line order and
duplicates are passed through unchanged.
"""

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from hoirun.constants import MANIFEST_NAME
from hoirun.io.override_reader import variables_text
from hoirun.logging.helpers import get_logger
from hoirun.rendering.puppet_literals import check_token, quote_string

NODE_OPEN = 'node default {'
NODE_CLOSE = '}'
INDENT = '  '


class ManifestSynthesizer:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('manifest')

    def render(self, variables: Mapping[str, str], modules: Sequence[str]) -> str:
        lines: List[str] = [NODE_OPEN]
        for key, value in variables.items():
            lines.append(f'{INDENT}${check_token(key, "variable")} = {quote_string(value)}')
        for module in modules:
            lines.append(f'{INDENT}include {check_token(module, "module")}')
        lines.append(NODE_CLOSE)
        return '\n'.join(lines) + '\n'

    def write(self, build_dir: Path, variables: Mapping[str, str], modules: Sequence[str]) -> Path:
        """Write ``site.pp`` into *build_dir* and return its path."""
        if variables:
            self._log.info('local variables detected:')
            for line in variables_text(variables).splitlines():
                self._log.info('  %s', line)
        text = self.render(variables, modules)
        target = Path(build_dir) / MANIFEST_NAME
        target.write_text(text, encoding='utf-8')
        self._log.debug('manifest written → %s', target)
        return target
