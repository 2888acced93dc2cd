from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from hoirun.core.models import ToolCommand, ToolResult


@runtime_checkable
class ToolExecutorProtocol(Protocol):
    """Contract for running one external tool invocation to completion."""

    def run(self, command: ToolCommand) -> ToolResult:
        ...

    def which(self, program: str) -> Optional[str]:
        ...
