from __future__ import annotations

"""Line-level document model for Hiera v3 configuration files.

Only two constructs are understood: the ``:datadir`` declaration and the
``:hierarchy`` list. Everything else is kept as opaque text so that a
parsed document renders back to its source byte for byte.

Classification rules:
    - ``DataDirLine``: stripped content starts with ``:datadir``.
    - ``HierarchyHeader``: the line starts with ``:hierarchy`` at column 0.
    - ``ListEntry``: first non-blank character is ``-``. Whether an entry
      belongs to the hierarchy is decided by the rewriter, not here. A
      trailing `` # ...`` comment is split off the value and kept aside.
    - ``RawLine``: anything else.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

import yaml

from hoirun.constants import DATADIR_MARKER, HIERARCHY_MARKER
from hoirun.errors import InputError

_ENTRY_RX = re.compile(r'^(?P<indent>[ \t]*)-(?![^ \t\r\n])[ \t]*(?P<value>.*?)(?P<eol>\r?\n?)$', re.S)
_DATADIR_RX = re.compile(r'^(?P<indent>[ \t]*)' + re.escape(DATADIR_MARKER) + r'.*?(?P<eol>\r?\n?)$', re.S)
_PLAIN_COMMENT_RX = re.compile(r'[ \t]+#')
_QUOTED_TAIL_RX = re.compile(r'(?:[ \t]+#.*)?', re.S)


@dataclass(frozen=True)
class RawLine:
    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class DataDirLine:
    indent: str
    text: str
    eol: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class HierarchyHeader:
    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class ListEntry:
    indent: str
    value: str
    text: str
    eol: str
    comment: str = ''

    def render(self) -> str:
        return self.text

    @property
    def scalar(self) -> str:
        """Decoded entry value, without quotes or trailing comment."""
        return unquote_scalar(self.value)


Line = Union[RawLine, DataDirLine, HierarchyHeader, ListEntry]


def _closing_quote(value: str) -> Optional[int]:
    quote = value[0]
    i = 1
    while i < len(value):
        c = value[i]
        if quote == '"' and c == '\\':
            i += 2
            continue
        if c == quote:
            if quote == "'" and value[i + 1:i + 2] == "'":
                i += 2
                continue
            return i
        i += 1
    return None


def split_comment(value: str) -> Tuple[str, str]:
    """Split an entry value into ``(scalar, comment)``.

    The comment keeps its leading whitespace so it can be re-emitted as is.
    A ``#`` inside quotes, or not preceded by whitespace, is part of the
    scalar.
    """
    v = value.strip()
    if v.startswith('#'):
        return '', v
    if v[:1] in ('"', "'"):
        end = _closing_quote(v)
        if end is not None and _QUOTED_TAIL_RX.fullmatch(v, end + 1):
            return v[:end + 1], v[end + 1:]
        return v, ''
    m = _PLAIN_COMMENT_RX.search(v)
    if m is None:
        return v, ''
    return v[:m.start()], v[m.start():]


def unquote_scalar(value: str) -> str:
    """Decode a single YAML scalar token. Plain scalars are returned as is.

    Raises:
        InputError: a quoted token is not a valid YAML scalar.
    """
    v = value.strip()
    if v[:1] not in ('"', "'"):
        return v
    try:
        decoded = yaml.safe_load(v)
    except yaml.YAMLError as exc:
        raise InputError(f'malformed hierarchy entry {v!r}: {exc}') from exc
    return str(decoded)


def quote_scalar(value: str) -> str:
    """Render *value* as a YAML double-quoted scalar."""
    escaped = value.replace('\\', '\\\\').replace('"', '\\"')
    for raw, esc in (('\n', '\\n'), ('\r', '\\r'), ('\t', '\\t')):
        escaped = escaped.replace(raw, esc)
    return f'"{escaped}"'


def classify(text: str) -> Line:
    if text.startswith(HIERARCHY_MARKER):
        return HierarchyHeader(text)
    if text.lstrip().startswith(DATADIR_MARKER):
        m = _DATADIR_RX.match(text)
        indent, eol = (m.group('indent'), m.group('eol')) if m else ('', '')
        return DataDirLine(indent=indent, text=text, eol=eol)
    m = _ENTRY_RX.match(text)
    if m is not None:
        value, comment = split_comment(m.group('value'))
        return ListEntry(
            indent=m.group('indent'),
            value=value,
            text=text,
            eol=m.group('eol'),
            comment=comment,
        )
    return RawLine(text)


class HieraDocument:
    """Ordered sequence of classified lines."""

    def __init__(self, lines: List[Line]) -> None:
        self.lines: List[Line] = list(lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    @classmethod
    def parse(cls, text: str) -> 'HieraDocument':
        return cls([classify(t) for t in text.splitlines(keepends=True)])

    @classmethod
    def load(cls, path: Path) -> 'HieraDocument':
        try:
            return cls.parse(Path(path).read_text(encoding='utf-8'))
        except (OSError, UnicodeDecodeError) as exc:
            raise InputError(f'cannot read hiera config {path}: {exc}') from exc

    def render(self) -> str:
        return ''.join(line.render() for line in self.lines)

    def entries(self) -> List[ListEntry]:
        return [ln for ln in self.lines if isinstance(ln, ListEntry)]
