"""String case helpers."""

from __future__ import annotations

import re

_WORD_START = re.compile(r"(^|\s)(\S)")
_WHITESPACE = re.compile(r"\s+")
_UPPER_BOUNDARY = re.compile(r"(.)(?=[A-Z])")


def snake_case(value: str, delimiter: str = "_") -> str:
    """Convert ``BlogPost`` or ``blogPost`` to ``blog_post``.

    Strings made only of lowercase letters are returned unchanged. Every
    uppercase letter that follows another character starts a new word, so
    acronyms split per letter (``HTMLPage`` becomes ``h_t_m_l_page``).
    """

    if value.isalpha() and value.islower():
        return value
    value = _WORD_START.sub(lambda match: match.group(1) + match.group(2).upper(), value)
    value = _WHITESPACE.sub("", value)
    return _UPPER_BOUNDARY.sub(rf"\1{delimiter}", value).lower()


__all__ = ["snake_case"]
