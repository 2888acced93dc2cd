from hoirun.tools import commands
from hoirun.tools.executor import SubprocessExecutor

__all__ = ["commands", "SubprocessExecutor"]
