from __future__ import annotations

"""Location and tool settings.

Two data sources are supported:

  • developer checkouts (default): modules under ``<githoidir>/puppet/modules``
    and hiera data under ``<githoienvdir>`` (``hiera.yaml`` + ``hieradata/``);
  • system-installed locations (``--hoici``) under ``/etc/puppet``.

Checkout roots default to ``$HOIRUN_GITHOIDIR`` / ``$HOIRUN_GITHOIENVDIR`` and
fall back to ``~/git/hoi`` / ``~/git/hoienv``.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from hoirun.core.models import Locations, ToolSettings
from hoirun.errors import ConfigurationError

SYSTEM_PUPPET_DIR = Path('/etc/puppet')
DEFAULT_GITHOIDIR = '~/git/hoi'
DEFAULT_GITHOIENVDIR = '~/git/hoienv'


def default_githoidir(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    return Path(env.get('HOIRUN_GITHOIDIR') or DEFAULT_GITHOIDIR).expanduser()


def default_githoienvdir(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    return Path(env.get('HOIRUN_GITHOIENVDIR') or DEFAULT_GITHOIENVDIR).expanduser()


def system_locations(root: Path = SYSTEM_PUPPET_DIR) -> Locations:
    return Locations(
        hiera_config=root / 'hiera.yaml',
        hiera_data_dir=root / 'hieradata',
        module_base_path=root / 'modules',
    )


def checkout_locations(githoidir: Path, githoienvdir: Path) -> Locations:
    return Locations(
        hiera_config=githoienvdir / 'hiera.yaml',
        hiera_data_dir=githoienvdir / 'hieradata',
        module_base_path=githoidir / 'puppet' / 'modules',
    )


def resolve_locations(
    *,
    hoici: bool = False,
    githoidir: Optional[Path] = None,
    githoienvdir: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
    system_root: Path = SYSTEM_PUPPET_DIR,
) -> Locations:
    """Select the data source and check that its roots exist.

    Raises:
        ConfigurationError: the selected root directory does not exist.
    """
    if hoici:
        if not system_root.is_dir():
            raise ConfigurationError(f'system puppet directory not found: {system_root}')
        return system_locations(system_root)

    hoi = Path(githoidir).expanduser() if githoidir else default_githoidir(env)
    hoienv = Path(githoienvdir).expanduser() if githoienvdir else default_githoienvdir(env)
    for label, root in (('githoidir', hoi), ('githoienvdir', hoienv)):
        if not root.is_dir():
            raise ConfigurationError(f'{label} not found: {root} (use --{label}=DIR)')
    return checkout_locations(hoi.resolve(), hoienv.resolve())


def tool_settings(env: Optional[Mapping[str, str]] = None) -> ToolSettings:
    """Build tool settings from ``HOIRUN_*`` environment variables.

    ``HOIRUN_SUDO`` set to an empty string disables privilege elevation.
    """
    env = os.environ if env is None else env
    return ToolSettings(
        puppet=env.get('HOIRUN_PUPPET') or 'puppet',
        hiera=env.get('HOIRUN_HIERA') or 'hiera',
        facter=env.get('HOIRUN_FACTER') or 'facter',
        sudo=env.get('HOIRUN_SUDO', 'sudo') or None,
    )
