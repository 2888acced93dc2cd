from __future__ import annotations

"""Reader for the local hiera override file (``--localhierafile``).

The override file is an ordinary hiera YAML data file. Besides being
injected as the first hierarchy level, its ``variables`` mapping is turned
into top-scope variable assignments in the synthesized manifest::

    variables:
      role: webserver
      env: dev
"""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from hoirun.constants import VARIABLES_KEY
from hoirun.errors import InputError
from hoirun.logging.helpers import get_logger


def _to_text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


class OverrideReader:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('io.override')

    def read_variables(self, path: Optional[Path]) -> Dict[str, str]:
        """Return the ``variables`` mapping of *path* in file order.

        A missing *path*, a missing key or an empty mapping all yield ``{}``.
        Existence of *path* is a caller precondition.

        Raises:
            InputError: the file cannot be read, is not valid YAML, or its
                ``variables`` entry is not a mapping.
        """
        if path is None:
            return {}
        try:
            raw = Path(path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            raise InputError(f'cannot read override file {path}: {exc}') from exc
        try:
            doc = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise InputError(f'override file {path} is not valid YAML: {exc}') from exc

        if not isinstance(doc, dict):
            self._log.debug('override file %s holds no mapping', path)
            return {}
        variables = doc.get(VARIABLES_KEY)
        if variables is None:
            return {}
        if not isinstance(variables, dict):
            raise InputError(f"'{VARIABLES_KEY}' in {path} must be a mapping")
        return {str(k): _to_text(v) for k, v in variables.items()}


def variables_text(variables: Mapping[str, str]) -> str:
    """Render *variables* as ``key=value`` lines."""
    return ''.join(f'{k}={v}\n' for k, v in variables.items())
