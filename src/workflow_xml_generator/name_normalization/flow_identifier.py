"""Flow identifier generation from free-text requirement names.

Rule table, applied in order:

=====  ==========================================================
Step   Rule
=====  ==========================================================
1      delete every character of ``& / , . : ( ) -``
2      split on runs of whitespace
3      drop whole tokens matching a stop word (case-insensitive)
4      uppercase the first character, lowercase the rest
5      concatenate without separator
=====  ==========================================================
"""

from __future__ import annotations

import re

FLOW_SYMBOLS = "&/,.:()-"
FLOW_STOP_WORDS: frozenset[str] = frozenset({"and", "or", "as", "in", "to", "of"})

_SYMBOL_TABLE = str.maketrans("", "", FLOW_SYMBOLS)
_WHITESPACE_REGEX = re.compile(r"\s+")


def generate_name_of_flow(requirement_name: str) -> str:
    """Return the PascalCase flow identifier for ``requirement_name``.

    Input that reduces to no tokens yields an empty string; callers decide
    whether that is acceptable.
    """
    stripped = requirement_name.translate(_SYMBOL_TABLE)
    tokens = [token for token in _WHITESPACE_REGEX.split(stripped) if token]
    kept = [token for token in tokens if token.lower() not in FLOW_STOP_WORDS]
    return "".join(_capitalize(token) for token in kept)


def _capitalize(token: str) -> str:
    return token[:1].upper() + token[1:].lower()
