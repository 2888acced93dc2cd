from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Hiera v3 markers handled by the rewriter.
DATADIR_MARKER: str = ':datadir'
HIERARCHY_MARKER: str = ':hierarchy'
ROOT_DATADIR: str = '/'

# File names inside the per-run build directory.
HIERA_CONFIG_NAME: str = 'hiera.yaml'
MANIFEST_NAME: str = 'site.pp'
FACTS_NAME: str = 'facts.yaml'
BUILD_DIR_PREFIX: str = 'hoirun-'

# Key of the override mapping inside the local hiera file.
VARIABLES_KEY: str = 'variables'

PUPPET_ENVIRONMENT: str = 'local'
FACTER_PLUGIN_DIR_NAME: str = 'facter'
FACTER_PLUGIN_MIN_DEPTH: int = 3
FACTER_PLUGIN_MAX_DEPTH: int = 4
FACTER_LIB_ENV: str = 'FACTERLIB'
DEFAULT_FACT_FILTER: str = '.'

EXIT_OK: int = 0
EXIT_PRECONDITION: int = 11
EXIT_ARGUMENT: int = 12
EXIT_CONFIGURATION: int = 13
EXIT_INPUT: int = 14
EXIT_RUN: int = 15
EXIT_INTERRUPTED: int = 130
