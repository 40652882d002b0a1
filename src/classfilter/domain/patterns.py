"""Wildcard pattern translation.

Glob-like patterns for matching qualified names and locators.

Syntax:
    *    zero or more of any character (dots and slashes included)
    ?    exactly one character
    any other run of characters is matched literally

Unlike module patterns, a single * is not limited to one dotted segment.
"""

from __future__ import annotations

import re

_WILDCARD_CHARS = re.compile(r"([*?])")

_TRANSLATIONS = {"*": ".*", "?": "."}


def compile_wildcard(pattern: str) -> str:
    """Translate wildcard pattern to anchored regex source.

    Every * becomes .* and every ? becomes . regardless of position.
    Literal runs between them are escaped so metacharacters (e.g. the dot)
    match themselves. Adjacent literal runs are never merged across a *.

    Examples:
        *            -> ^.*$
        ?            -> ^.$
        .org.xenei.  -> ^\\.org\\.xenei\\.$
        *org*xenei*  -> ^.*org.*xenei.*$

    Args:
        pattern: Wildcard pattern.

    Returns:
        Regex source anchored at both ends.

    Raises:
        TypeError: If pattern is None
    """
    if pattern is None:
        raise TypeError("pattern must not be None")

    parts = [
        _TRANSLATIONS.get(piece) or re.escape(piece)
        for piece in _WILDCARD_CHARS.split(pattern)
        if piece
    ]
    return "^" + "".join(parts) + "$"


def compile_wildcard_regex(pattern: str, flags: re.RegexFlag = re.NOFLAG) -> re.Pattern[str]:
    """Compile wildcard pattern to regex object.

    Match with fullmatch() so a trailing newline is never accepted.
    """
    return re.compile(compile_wildcard(pattern), flags)
