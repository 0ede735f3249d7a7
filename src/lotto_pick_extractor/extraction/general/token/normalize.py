# extraction/general/token/normalize.py
"""
normalize.

Does: Check that raw input is a plain ASCII digit string, and clean CLI-style
      input (spaces, dashes, commas between digit groups) into one.
Returns: is_digit_string(), strip_separators().
Used by: The pick selector (digit check) and the CLI (cleanup before lookup).
"""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "DIGITS",
    "is_digit_string",
    "strip_separators",
]

DIGITS = frozenset("0123456789")

# Whitespace and the separators people type between number groups
_SEPARATOR_RE = re.compile(r"[\s,;._\-]+")


def is_digit_string(s: str) -> bool:
    """
    Does: True when every character is one of 0-9.
    Returns: False for non-str input; True for "" (length is checked elsewhere).

    str.isdigit() is not enough here: it accepts superscripts and other
    Unicode digits that int() either rejects or reads differently.
    """
    if not isinstance(s, str):
        return False
    return all(ch in DIGITS for ch in s)


def strip_separators(text: str) -> str:
    """
    Does: NFKC-fold (full-width digits become ASCII) then drop separators.
    Returns: Cleaned string; non-digit characters other than separators are kept
             so that the caller can still reject them.
    """
    if not isinstance(text, str):
        return ""
    text = unicodedata.normalize("NFKC", text)
    return _SEPARATOR_RE.sub("", text)
