from __future__ import annotations

"""Hiera config rewriting for ephemeral local runs.

The rewritten config differs from its source in three ways only:

  • ``:datadir`` is set to ``/`` whatever its original value;
  • every ``:hierarchy`` entry is prefixed with the absolute source hiera
    data directory (one leading ``/`` stripped), so lookups resolve against
    the checkout and not against the build directory;
  • an optional override entry is injected ahead of the first hierarchy
    entry, making the local override file the highest-priority source.

The hierarchy block ends at the first line that is not a list entry,
including blank lines and comments. An empty block never receives the
override entry.
"""

import logging
from pathlib import Path
from typing import List, Optional

from hoirun.constants import DATADIR_MARKER, ROOT_DATADIR
from hoirun.errors import InputError
from hoirun.hiera.document import (
    DataDirLine,
    HieraDocument,
    HierarchyHeader,
    Line,
    ListEntry,
    RawLine,
    quote_scalar,
)
from hoirun.logging.helpers import get_logger
from hoirun.utils.paths import hierarchy_prefix, join_entry, override_entry


class HieraRewriter:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('hiera')

    def rewrite_document(
        self,
        doc: HieraDocument,
        data_dir: Path,
        override_file: Optional[Path] = None,
    ) -> HieraDocument:
        """Return a rewritten copy of *doc*; *doc* itself is not modified."""
        prefix = hierarchy_prefix(data_dir)
        override = override_entry(override_file) if override_file else ''

        out: List[Line] = []
        in_hierarchy = False
        first_entry = False

        for line in doc:
            if isinstance(line, DataDirLine):
                out.append(RawLine(f'{line.indent}{DATADIR_MARKER}: {ROOT_DATADIR}{line.eol}'))
                continue
            if isinstance(line, HierarchyHeader):
                out.append(line)
                in_hierarchy = True
                first_entry = True
                continue
            if isinstance(line, ListEntry) and in_hierarchy:
                if first_entry and override:
                    out.append(self._entry(line, override, eol=line.eol or '\n'))
                    self._log.debug('override entry injected → %s', override)
                first_entry = False
                out.append(
                    self._entry(line, join_entry(prefix, line.scalar), eol=line.eol, comment=line.comment)
                )
                continue
            in_hierarchy = False
            out.append(line)

        return HieraDocument(out)

    def rewrite_text(
        self,
        source: str,
        data_dir: Path,
        override_file: Optional[Path] = None,
    ) -> str:
        return self.rewrite_document(HieraDocument.parse(source), data_dir, override_file).render()

    def rewrite(
        self,
        source: Path,
        data_dir: Path,
        target: Path,
        override_file: Optional[Path] = None,
    ) -> Path:
        """Rewrite *source* into *target* and return *target*.

        Raises:
            InputError: *source* or *data_dir* does not exist, or a
                hierarchy entry is not a valid YAML scalar.
        """
        if not Path(source).is_file():
            raise InputError(f'hiera config not found: {source}')
        if not Path(data_dir).is_dir():
            raise InputError(f'hiera data directory not found: {data_dir}')

        doc = self.rewrite_document(HieraDocument.load(source), data_dir, override_file)
        target.write_text(doc.render(), encoding='utf-8')
        self._log.info('✔ hiera config written → %s', target)
        return target

    @staticmethod
    def _entry(template: ListEntry, value: str, *, eol: str, comment: str = '') -> ListEntry:
        quoted = quote_scalar(value)
        return ListEntry(
            indent=template.indent,
            value=quoted,
            text=f'{template.indent}- {quoted}{comment}{eol}',
            eol=eol,
            comment=comment,
        )
