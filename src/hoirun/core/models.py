from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional, Tuple

from hoirun.constants import DEFAULT_FACT_FILTER


class Mode(str, Enum):
    APPLY = 'apply'
    NOOP = 'noop'
    HIERA = 'hiera'
    FACTER = 'facter'

    @property
    def uses_manifest(self) -> bool:
        return self in (Mode.APPLY, Mode.NOOP)


@dataclass(frozen=True)
class RunRequest:
    """Immutable description of one hoirun invocation.

    Built once by the CLI from parsed arguments and passed explicitly to
    every component.
    """
    mode: Mode
    items: Tuple[str, ...] = ()
    debug: bool = False
    hiera_config: Optional[Path] = None
    hiera_data_dir: Optional[Path] = None
    module_base_path: Optional[Path] = None
    override_file: Optional[Path] = None
    fact_filter: str = DEFAULT_FACT_FILTER


@dataclass(frozen=True)
class Locations:
    """Resolved data locations for a run (checkout or system-installed)."""
    hiera_config: Path
    hiera_data_dir: Path
    module_base_path: Path


@dataclass(frozen=True)
class ToolSettings:
    """External executables used by the orchestrator."""
    puppet: str = 'puppet'
    hiera: str = 'hiera'
    facter: str = 'facter'
    sudo: Optional[str] = 'sudo'


@dataclass(frozen=True)
class ToolResult:
    returncode: int
    stdout: str = ''

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class ToolCommand:
    """Structured argument vector plus extra environment for one tool run."""
    argv: Tuple[str, ...]
    env: Mapping[str, str] = field(default_factory=dict)
    capture: bool = False

    @property
    def program(self) -> str:
        return self.argv[0]
