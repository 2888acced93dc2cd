#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
fixtures – Builds throw-away checkout trees and a recording tool executor
for the hoirun test-suite.

Idempotent and 100 % Python: every tree lives under a caller-provided
temporary directory.
"""
from __future__ import annotations

import os
import sys
import textwrap
from pathlib import Path
from typing import Callable, Dict, List, Optional

SRC = Path(__file__).resolve().parents[2] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from hoirun.core.models import ToolCommand, ToolResult  # noqa: E402

HIERA_YAML = """\
---
:backends:
  - yaml
:yaml:
  :datadir: /etc/puppet/hieradata
:hierarchy:
  - "nodes/%{::fqdn}"
  - "roles/%{::role}"
  - common
:logger: console
"""


# ────────────────────────── utilities ──────────────────────────
def write(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


def build_checkouts(root: Path, *, hiera_yaml: str = HIERA_YAML) -> Dict[str, Path]:
    """Create ``githoi`` and ``githoienv`` checkouts below *root*."""
    githoi = root / "githoi"
    githoienv = root / "githoienv"
    modules = githoi / "puppet" / "modules"

    for mod in ("base", "nginx"):
        write(modules / mod / "manifests" / "init.pp", f"class {mod} {{}}\n")
    (modules / "base" / "lib" / "facter").mkdir(parents=True, exist_ok=True)
    write(modules / "base" / "lib" / "facter" / "role.rb", "# custom fact\n")
    (modules / "nginx" / "lib" / "facter").mkdir(parents=True, exist_ok=True)

    write(githoienv / "hiera.yaml", hiera_yaml)
    write(githoienv / "hieradata" / "common.yaml", "ntp::servers: []\n")

    return {
        "githoi": githoi,
        "githoienv": githoienv,
        "modules": modules,
        "hiera_config": githoienv / "hiera.yaml",
        "hieradata": githoienv / "hieradata",
    }


class RecordingExecutor:
    """Tool executor double: records commands and replays canned results."""

    def __init__(
        self,
        results: Optional[Dict[str, ToolResult]] = None,
        *,
        missing: tuple = (),
        on_run: Optional[Callable[[ToolCommand], None]] = None,
    ) -> None:
        self.results = results or {}
        self.missing = set(missing)
        self.on_run = on_run
        self.commands: List[ToolCommand] = []

    def which(self, program: str) -> Optional[str]:
        return None if program in self.missing else os.path.join("/usr/bin", program)

    def run(self, command: ToolCommand) -> ToolResult:
        self.commands.append(command)
        if self.on_run is not None:
            self.on_run(command)
        key = command.argv[1] if command.argv[0] == "sudo" else command.argv[0]
        return self.results.get(key, ToolResult(returncode=0))
