"""
Field-key classification for COBRA-style notes.

A notes line `"<left>: <right>"` is only kept when `<left>` looks like a
structured field name. Two tiers:

  1. a fixed allow-list of known names, matched verbatim (these may be
     mixed case and contain spaces, e.g. "EC Number");
  2. otherwise an upper-case identifier token: uppercase letters, digits,
     underscore, period and space only.

Prose ("This is an explanation: ...") fails both tiers.
"""

from __future__ import annotations

import string
from typing import Optional

from .options import FieldRules, default_rules

FIELD_KEY_ALLOW_LIST = frozenset(
    {
        "EC Number",
        "Confidence Level",
        "Gene Association",
        "Protein Association",
        "Protein Class",
        "Subsystem",
        "Formula",
        "Charge",
        "Authors",
        "References",
        "Notes",
        "KEGG Compound",
        "ChEBI",
        "PubChem",
    }
)

IDENTIFIER_EXTRA_CHARS = frozenset(string.digits + "_. ")


def looks_like_identifier(candidate: str) -> bool:
    """True when every character is an uppercase letter, digit, '_', '.' or ' '."""
    return bool(candidate) and all(
        ch.isupper() or ch in IDENTIFIER_EXTRA_CHARS for ch in candidate
    )


def is_field_key(candidate: str, rules: Optional[FieldRules] = None) -> bool:
    """Decide whether `candidate` names a structured field rather than prose."""
    if not candidate or not candidate.strip():
        return False
    if candidate in FIELD_KEY_ALLOW_LIST:
        return True
    if rules is None:
        rules = default_rules()
    if candidate in rules.extra_keys:
        return True
    if any(ch.islower() for ch in candidate):
        return False
    return looks_like_identifier(candidate)


__all__ = [
    "FIELD_KEY_ALLOW_LIST",
    "IDENTIFIER_EXTRA_CHARS",
    "is_field_key",
    "looks_like_identifier",
]
