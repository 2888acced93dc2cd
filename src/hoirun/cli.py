from __future__ import annotations

import argparse
import logging
import os
import signal
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from hoirun.constants import DEFAULT_FACT_FILTER, EXIT_INTERRUPTED, EXIT_OK
from hoirun.core.interfaces.tools import ToolExecutorProtocol
from hoirun.core.models import Mode, RunRequest
from hoirun.errors import HoirunError
from hoirun.logging.factory import DefaultLoggerFactory
from hoirun.logging.helpers import get_logger
from hoirun.parsing.parser import _build_parser
from hoirun.runtime.runner import Runner
from hoirun.runtime.settings import resolve_locations, tool_settings


logger = get_logger('hoirun')


def _configure_logging(enable_json: bool, debug: bool) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    level = logging.DEBUG if debug else logging.INFO
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('hoirun')


def _interrupt(signum, _frame) -> NoReturn:
    raise KeyboardInterrupt(f'signal {signum}')


def _install_signal_handlers() -> None:
    """Route SIGTERM/SIGHUP through KeyboardInterrupt so scoped cleanup runs."""
    for name in ('SIGTERM', 'SIGHUP'):
        sig = getattr(signal, name, None)
        if sig is not None:
            signal.signal(sig, _interrupt)


def request_from_args(ns: argparse.Namespace, env: Optional[dict] = None) -> RunRequest:
    """Translate parsed arguments into an immutable :class:`RunRequest`."""
    if ns.apply is not None:
        mode, items = Mode.APPLY, ns.apply
    elif ns.noop is not None:
        mode, items = Mode.NOOP, ns.noop
    elif ns.hiera is not None:
        mode, items = Mode.HIERA, ns.hiera
    else:
        mode, items = Mode.FACTER, []

    locations = resolve_locations(
        hoici=ns.hoici,
        githoidir=Path(ns.githoidir) if ns.githoidir else None,
        githoienvdir=Path(ns.githoienvdir) if ns.githoienvdir else None,
        env=env,
    )
    return RunRequest(
        mode=mode,
        items=tuple(items),
        debug=bool(ns.debug),
        hiera_config=locations.hiera_config,
        hiera_data_dir=locations.hiera_data_dir,
        module_base_path=locations.module_base_path,
        override_file=Path(ns.localhierafile).expanduser() if ns.localhierafile else None,
        fact_filter=ns.facter if ns.facter is not None else DEFAULT_FACT_FILTER,
    )


class HoiRun:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, executor: Optional[ToolExecutorProtocol] = None) -> None:
        """Parse *argv* and execute the requested run.

        Raises:
            HoirunError: on any failure, carrying the process exit code.
        """
        json_logs = '--json-logs' in argv or os.getenv('HOIRUN_JSON_LOGS') == '1'
        _configure_logging(json_logs, '--debug' in argv)

        ns = _build_parser().parse_args(list(argv))
        req = request_from_args(ns)
        logger.debug('run request: %s', req)
        Runner(executor=executor, settings=tool_settings(), logger=get_logger('runner')).run(req)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `hoirun` console script."""
    _install_signal_handlers()
    try:
        HoiRun.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(EXIT_OK)
    except HoirunError as exc:
        logger.error('%s', exc)
        raise SystemExit(exc.exit_code)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(EXIT_INTERRUPTED)
    except BrokenPipeError:
        raise SystemExit(EXIT_OK)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
