from __future__ import annotations

"""Public surface for hoirun.core.

Stable import location for the run models and the protocol types:

    from hoirun.core import RunRequest, Mode, ToolExecutorProtocol
"""

from hoirun.core.interfaces import ToolExecutorProtocol
from hoirun.core.models import (
    Locations,
    Mode,
    RunRequest,
    ToolCommand,
    ToolResult,
    ToolSettings,
)

__all__ = [
    'Locations',
    'Mode',
    'RunRequest',
    'ToolCommand',
    'ToolResult',
    'ToolSettings',
    'ToolExecutorProtocol',
]
