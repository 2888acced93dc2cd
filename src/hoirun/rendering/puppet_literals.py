"""
puppet_literals – Escaping rules for text interpolated into ``site.pp``.

  • values      → single-quoted Puppet strings; ``\\`` and ``'`` are
                  backslash-escaped, so no ``$var`` interpolation happens
  • identifiers → variable keys and class names are emitted verbatim, but
                  must fit on one line of printable text
"""

from hoirun.errors import PreconditionError


def quote_string(value: str) -> str:
    """Return *value* as a single-quoted Puppet string literal."""
    escaped = value.replace('\\', '\\\\').replace("'", "\\'")
    return f"'{escaped}'"


def check_token(token: str, kind: str) -> str:
    """Return *token* unchanged, rejecting text that would break a manifest line."""
    if not token:
        raise PreconditionError(f'empty {kind} name')
    if not token.isprintable():
        raise PreconditionError(f'{kind} name {token!r} contains control characters')
    return token
