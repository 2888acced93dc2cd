# hoirun/parsing/parser.py
from __future__ import annotations

import argparse
from typing import NoReturn

from hoirun.constants import DEFAULT_FACT_FILTER
from hoirun.errors import ArgumentError


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises :class:`ArgumentError` instead of exiting with 2."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentError(f'{message}\n{self.format_usage().strip()}')


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Exactly one mode flag is required. Data locations default to the
    developer checkouts; --hoici switches to the system-installed tree.
    """
    p = _Parser(
        prog="hoirun",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "hoirun – run puppet modules and hiera lookups locally\n"
            "Builds a throw-away hiera.yaml and site.pp for every run and hands "
            "them to puppet, hiera or facter."
        ),
    )

    g_mode = p.add_argument_group("Mode (exactly one)")
    g_loc = p.add_argument_group("Data locations")
    g_misc = p.add_argument_group("Miscellaneous")

    modes = g_mode.add_mutually_exclusive_group(required=True)
    modes.add_argument(
        "--apply",
        metavar="MODULE",
        nargs="+",
        help="Apply the given modules to this machine (puppet apply, with sudo).",
    )
    modes.add_argument(
        "--noop",
        metavar="MODULE",
        nargs="+",
        help="Like --apply but with --noop: show what would change.",
    )
    modes.add_argument(
        "--hiera",
        metavar="PARAM",
        nargs="+",
        help="Look up hiera parameters using the facts of this machine.",
    )
    modes.add_argument(
        "--facter",
        metavar="REGEX",
        nargs="?",
        const=DEFAULT_FACT_FILTER,
        help=(
            "Print facts, custom facts from the modules included. Only lines "
            "matching REGEX are shown (default: all)."
        ),
    )

    g_loc.add_argument(
        "--localhierafile",
        metavar="PATH",
        dest="localhierafile",
        help=(
            "Local hiera YAML file used as highest-priority data source. Its "
            "'variables' mapping becomes top-scope variables in site.pp."
        ),
    )
    g_loc.add_argument(
        "--hoici",
        action="store_true",
        help="Use the system-installed data under /etc/puppet instead of the git checkouts.",
    )
    g_loc.add_argument(
        "--githoidir",
        metavar="DIR",
        help="Module checkout root (default: $HOIRUN_GITHOIDIR or ~/git/hoi).",
    )
    g_loc.add_argument(
        "--githoienvdir",
        metavar="DIR",
        help="Hiera checkout root (default: $HOIRUN_GITHOIENVDIR or ~/git/hoienv).",
    )

    g_misc.add_argument(
        "--debug",
        action="store_true",
        help="Pass debug flags to the tools and log at DEBUG level.",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs in JSON format instead of plain text.",
    )

    return p
