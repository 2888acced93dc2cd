from __future__ import annotations

from hoirun.cli import HoiRun, main
from hoirun.core.models import Locations, Mode, RunRequest, ToolCommand, ToolResult, ToolSettings
from hoirun.errors import (
    ArgumentError,
    ConfigurationError,
    HoirunError,
    InputError,
    PreconditionError,
    RunError,
)
from hoirun.hiera.rewriter import HieraRewriter
from hoirun.io.override_reader import OverrideReader
from hoirun.rendering.manifest import ManifestSynthesizer
from hoirun.runtime.runner import Runner
from hoirun.runtime.builddir import build_dir
from hoirun.parsing.parser import _build_parser

__version__ = '0.3.0'

__all__ = [
    'HoiRun',
    'main',
    'Locations',
    'Mode',
    'RunRequest',
    'ToolCommand',
    'ToolResult',
    'ToolSettings',
    'HoirunError',
    'PreconditionError',
    'ArgumentError',
    'ConfigurationError',
    'InputError',
    'RunError',
    'HieraRewriter',
    'OverrideReader',
    'ManifestSynthesizer',
    'Runner',
    'build_dir',
    '_build_parser',
]
