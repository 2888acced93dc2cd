from __future__ import annotations

"""Run orchestration for the four hoirun modes.

apply / noop:
    build dir → hiera.yaml → site.pp → ``sudo puppet apply``.
hiera:
    build dir → hiera.yaml → ``facter --yaml`` into facts.yaml → ``hiera``.
facter:
    no build dir; custom fact dirs → ``facter`` → regex filter on its output.

Any failing step aborts the rest of the pipeline. The build directory is
removed on every exit path by :func:`hoirun.runtime.builddir.build_dir`.
"""

import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from hoirun.constants import FACTS_NAME, HIERA_CONFIG_NAME
from hoirun.core.interfaces.tools import ToolExecutorProtocol
from hoirun.core.models import Mode, RunRequest, ToolCommand, ToolResult, ToolSettings
from hoirun.discovery.facter_plugins import find_facter_dirs
from hoirun.errors import ArgumentError, ConfigurationError, InputError, PreconditionError, RunError
from hoirun.hiera.rewriter import HieraRewriter
from hoirun.io.override_reader import OverrideReader
from hoirun.logging.helpers import get_logger
from hoirun.rendering.manifest import ManifestSynthesizer
from hoirun.runtime.builddir import build_dir
from hoirun.tools import commands
from hoirun.tools.executor import SubprocessExecutor


class Runner:
    def __init__(
        self,
        *,
        executor: Optional[ToolExecutorProtocol] = None,
        settings: Optional[ToolSettings] = None,
        logger: Optional[logging.Logger] = None,
        build_root: Optional[Path] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self._log = logger or get_logger('runner')
        self._exec = executor or SubprocessExecutor(logger=self._log)
        self._settings = settings or ToolSettings()
        self._build_root = build_root
        self._out = out
        self._rewriter = HieraRewriter(logger=get_logger('hiera'))
        self._manifest = ManifestSynthesizer(logger=get_logger('manifest'))
        self._overrides = OverrideReader(logger=get_logger('io.override'))

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    def run(self, req: RunRequest) -> None:
        """Execute *req*; raises a :class:`hoirun.errors.HoirunError` on failure."""
        self._check_override(req)
        if req.mode.uses_manifest:
            self._run_puppet(req)
        elif req.mode is Mode.HIERA:
            self._run_hiera(req)
        else:
            self._run_facter(req)

    # ------------------------------------------------------------------ #
    # Preconditions
    # ------------------------------------------------------------------ #
    @staticmethod
    def _check_override(req: RunRequest) -> None:
        if req.override_file is not None and not Path(req.override_file).is_file():
            raise InputError(f'local hiera file not found: {req.override_file}')

    def _require(self, program: str) -> None:
        if self._exec.which(program) is None:
            raise ConfigurationError(f'required executable not found in PATH: {program}')

    @staticmethod
    def _hiera_paths(req: RunRequest) -> tuple[Path, Path]:
        if req.hiera_config is None or req.hiera_data_dir is None:
            raise PreconditionError('hiera config and data directory must be set')
        return req.hiera_config, req.hiera_data_dir

    def _write_hiera(self, req: RunRequest, bdir: Path) -> Path:
        config, data_dir = self._hiera_paths(req)
        return self._rewriter.rewrite(
            config, data_dir, bdir / HIERA_CONFIG_NAME, override_file=req.override_file
        )

    def _execute(self, cmd: ToolCommand, what: str) -> ToolResult:
        result = self._exec.run(cmd)
        if not result.ok:
            raise RunError(f'{what} failed with exit status {result.returncode}')
        return result

    # ------------------------------------------------------------------ #
    # Modes
    # ------------------------------------------------------------------ #
    def _run_puppet(self, req: RunRequest) -> None:
        if not req.items:
            raise ArgumentError(f'--{req.mode.value} expects at least one module')
        if req.module_base_path is None:
            raise PreconditionError('module base path must be set')
        self._require(self._settings.puppet)

        with build_dir(parent=self._build_root, logger=self._log) as bdir:
            hiera_cfg = self._write_hiera(req, bdir)
            variables = self._overrides.read_variables(req.override_file)
            manifest = self._manifest.write(bdir, variables, req.items)
            cmd = commands.puppet_apply(
                self._settings,
                mode=req.mode,
                hiera_config=hiera_cfg,
                module_path=req.module_base_path,
                manifest=manifest,
                debug=req.debug,
            )
            self._execute(cmd, 'puppet apply')
        self._log.info('✔ puppet %s finished', req.mode.value)

    def _run_hiera(self, req: RunRequest) -> None:
        if not req.items:
            raise ArgumentError('--hiera expects at least one parameter')
        self._require(self._settings.facter)
        self._require(self._settings.hiera)

        with build_dir(parent=self._build_root, logger=self._log) as bdir:
            hiera_cfg = self._write_hiera(req, bdir)
            facts = bdir / FACTS_NAME
            gathered = self._execute(commands.facter_yaml(self._settings), 'facter')
            facts.write_text(gathered.stdout, encoding='utf-8')
            cmd = commands.hiera_lookup(
                self._settings,
                hiera_config=hiera_cfg,
                facts=facts,
                keys=req.items,
                debug=req.debug,
            )
            self._execute(cmd, 'hiera lookup')

    def _run_facter(self, req: RunRequest) -> None:
        try:
            pattern = re.compile(req.fact_filter)
        except re.error as exc:
            raise ArgumentError(f'invalid fact filter {req.fact_filter!r}: {exc}') from exc
        if req.module_base_path is None:
            raise PreconditionError('module base path must be set')
        self._require(self._settings.facter)

        plugin_dirs = find_facter_dirs(req.module_base_path)
        result = self._execute(
            commands.facter_query(self._settings, plugin_dirs=plugin_dirs, debug=req.debug),
            'facter',
        )
        matches: List[str] = [ln for ln in result.stdout.splitlines() if pattern.search(ln)]
        if not matches:
            raise RunError(f'fact not found: {req.fact_filter}')
        for line in matches:
            print(line, file=self.out)
