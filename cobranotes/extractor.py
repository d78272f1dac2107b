"""
Parse COBRA-style `KEY: VALUE` paragraphs out of a notes fragment.

Pure read: the fragment is never mutated and the returned dict holds no
reference back into it. Malformed lines are skipped, never raised.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Tuple

from .classifier import is_field_key
from .domain import KEY_SEPARATOR, ROOT_TAGS, TAG_PARAGRAPH, FieldMap
from .iface import Fragment, NotesLike, resolve_container
from .options import FieldRules, default_rules

LOGGER = logging.getLogger(__name__)


def _scan_root(top: Fragment) -> Fragment:
    # body, then a bare p, then html; some models skip the body wrapper
    for tag in ROOT_TAGS:
        child = top.find_child(tag)
        if child is not None:
            return child
    return top


def _paragraph_texts(top: Fragment) -> Iterator[Optional[str]]:
    """Yield the first text of every direct paragraph of the scan root."""
    root = _scan_root(top)
    for para in root.direct_children(TAG_PARAGRAPH):
        yield para.first_child_text()


def _split_line(text: str) -> Optional[Tuple[str, str]]:
    """Split on the first colon only; None when there is no colon."""
    line = text.strip()
    idx = line.find(KEY_SEPARATOR)
    if idx < 0:
        return None
    return line[:idx].strip(), line[idx + 1 :].strip()


def extract_fields(
    notes: Optional[NotesLike], rules: Optional[FieldRules] = None
) -> FieldMap:
    """Return the structured fields found in `notes`, in document order.

    Later paragraphs overwrite earlier ones with the same key. Empty values
    are kept. Missing notes or a container without content yield an
    empty dict.
    """
    container = resolve_container(notes)
    fields: FieldMap = {}
    if container is None or not container.has_content():
        return fields
    if rules is None:
        rules = default_rules()

    for text in _paragraph_texts(container.get_content()):
        if text is None:
            continue
        pair = _split_line(text)
        if pair is None:
            LOGGER.debug("notes.fields.skip_no_colon line=%r", text)
            continue
        key, value = pair
        if not is_field_key(key, rules):
            LOGGER.debug("notes.fields.skip_key key=%r line=%r", key, text)
            continue
        fields[key] = value

    LOGGER.debug("notes.fields.extracted count=%d", len(fields))
    return fields


__all__ = ["extract_fields"]
