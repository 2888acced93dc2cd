from __future__ import annotations

"""Argument-vector builders for the external puppet, hiera and facter tools.

Every builder returns a :class:`ToolCommand` whose ``argv`` is executed
without a shell, so module names, lookup keys and paths are passed to the
tools exactly as given.
"""

import os
from pathlib import Path
from typing import Sequence

from hoirun.constants import FACTER_LIB_ENV, PUPPET_ENVIRONMENT
from hoirun.core.models import Mode, ToolCommand, ToolSettings


def _elevated(settings: ToolSettings, argv: Sequence[str]) -> tuple[str, ...]:
    if settings.sudo:
        return (settings.sudo, *argv)
    return tuple(argv)


def puppet_apply(
    settings: ToolSettings,
    *,
    mode: Mode,
    hiera_config: Path,
    module_path: Path,
    manifest: Path,
    debug: bool = False,
) -> ToolCommand:
    argv = [
        settings.puppet,
        'apply',
        '--show_diff',
        f'--hiera_config={hiera_config}',
        f'--environment={PUPPET_ENVIRONMENT}',
        f'--modulepath={module_path}',
    ]
    if debug:
        argv.append('--debug')
    if mode is Mode.NOOP:
        argv.append('--noop')
    argv.append(str(manifest))
    return ToolCommand(argv=_elevated(settings, argv))


def facter_yaml(settings: ToolSettings) -> ToolCommand:
    """Gather all facts as YAML; stdout is captured into the facts file."""
    return ToolCommand(argv=(settings.facter, '--yaml'), capture=True)


def hiera_lookup(
    settings: ToolSettings,
    *,
    hiera_config: Path,
    facts: Path,
    keys: Sequence[str],
    debug: bool = False,
) -> ToolCommand:
    argv = [settings.hiera, '-c', str(hiera_config), '-y', str(facts)]
    if debug:
        argv.append('-d')
    argv.extend(keys)
    return ToolCommand(argv=tuple(argv))


def facter_query(
    settings: ToolSettings,
    *,
    plugin_dirs: Sequence[Path],
    debug: bool = False,
) -> ToolCommand:
    argv = [settings.facter]
    if debug:
        argv.extend(['--debug', '--timing'])
    env = {FACTER_LIB_ENV: os.pathsep.join(str(p) for p in plugin_dirs)}
    return ToolCommand(argv=tuple(argv), env=env, capture=True)
