from __future__ import annotations

"""Error taxonomy for hoirun.

Every error carries the process exit code the CLI terminates with. Errors
are raised where they are detected and travel unchanged up to
:func:`hoirun.cli.main`.
"""

from hoirun.constants import (
    EXIT_ARGUMENT,
    EXIT_CONFIGURATION,
    EXIT_INPUT,
    EXIT_PRECONDITION,
    EXIT_RUN,
)


class HoirunError(Exception):
    exit_code: int = 1


class PreconditionError(HoirunError):
    """A user or logic precondition does not hold."""
    exit_code = EXIT_PRECONDITION


class ArgumentError(HoirunError):
    """Malformed or missing CLI invocation."""
    exit_code = EXIT_ARGUMENT


class ConfigurationError(HoirunError):
    """The selected data-source root or a required executable is missing."""
    exit_code = EXIT_CONFIGURATION


class InputError(HoirunError):
    """A required source file or directory is absent or unreadable."""
    exit_code = EXIT_INPUT


class RunError(HoirunError):
    """An external tool failed or its expected output was not found."""
    exit_code = EXIT_RUN
