from __future__ import annotations

import logging
import os
import shutil
import subprocess
from typing import Optional

from hoirun.core.interfaces.tools import ToolExecutorProtocol
from hoirun.core.models import ToolCommand, ToolResult
from hoirun.errors import ConfigurationError
from hoirun.logging.helpers import get_logger, log_command


class SubprocessExecutor(ToolExecutorProtocol):
    """Run tool commands with :mod:`subprocess`, never through a shell.

    Non-captured commands inherit the terminal so puppet's diff output and
    progress reach the user directly.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('tools')

    def which(self, program: str) -> Optional[str]:
        return shutil.which(program)

    def run(self, command: ToolCommand) -> ToolResult:
        log_command(self._log, command.argv, env=command.env)
        env = {**os.environ, **command.env} if command.env else None
        try:
            cp = subprocess.run(
                list(command.argv),
                env=env,
                check=False,
                text=True,
                stdout=subprocess.PIPE if command.capture else None,
                stderr=None,
            )
        except FileNotFoundError as exc:
            raise ConfigurationError(f'executable not found: {command.program}') from exc
        return ToolResult(returncode=cp.returncode, stdout=cp.stdout or '')
