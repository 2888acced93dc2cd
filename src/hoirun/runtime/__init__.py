from hoirun.runtime.builddir import build_dir
from hoirun.runtime.runner import Runner
from hoirun.runtime.settings import resolve_locations, tool_settings

__all__ = ["build_dir", "Runner", "resolve_locations", "tool_settings"]
