"""
Write `KEY: VALUE` pairs into a notes container.

Each pair becomes its own `<body xmlns=XHTML><p>KEY: VALUE</p></body>`
append, in mapping order. A pair whose markup cannot be built or appended is
logged and skipped; the remaining pairs are still written.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from lxml import etree
from lxml.builder import ElementMaker

from .domain import KEY_SEPARATOR, TAG_BODY, TAG_PARAGRAPH, XHTML_NAMESPACE
from .exceptions import NotesMarkupError
from .iface import NotesContainer, NotesLike, resolve_container

LOGGER = logging.getLogger(__name__)

_E = ElementMaker(namespace=XHTML_NAMESPACE, nsmap={None: XHTML_NAMESPACE})


def format_field_line(key: str, value: object) -> str:
    return f"{key}{KEY_SEPARATOR} {value}"


def build_field_markup(key: str, value: object) -> str:
    """Return the body/p markup for one pair; text is XML-escaped."""
    line = format_field_line(key, value)
    try:
        body = _E(TAG_BODY, _E(TAG_PARAGRAPH, line))
    except ValueError as e:
        # lxml refuses control characters and other non-XML text
        raise NotesMarkupError(f"cannot encode notes line: {e}", markup=line) from e
    return etree.tostring(body, encoding="unicode")


def _append_all(container: NotesContainer, fields: Mapping[str, object]) -> int:
    written = 0
    for key, value in fields.items():
        if not key or not key.strip():
            LOGGER.warning("notes.fields.skip_empty_key value=%r", value)
            continue
        try:
            container.append_content(build_field_markup(key, value))
        except NotesMarkupError:
            LOGGER.error("notes.fields.append_fail key=%r", key, exc_info=True)
            continue
        written += 1
    LOGGER.debug("notes.fields.appended count=%d of=%d", written, len(fields))
    return written


def write_fields(notes: Optional[NotesLike], fields: Mapping[str, object]) -> int:
    """Replace the notes content with one paragraph per pair.

    Returns the number of pairs actually written; 0 when `notes` resolves
    to no container.
    """
    container = resolve_container(notes)
    if container is None:
        LOGGER.warning("notes.fields.no_container pairs=%d", len(fields))
        return 0
    container.clear_content()
    return _append_all(container, fields)


def append_fields(notes: Optional[NotesLike], fields: Mapping[str, object]) -> int:
    """Append one paragraph per pair without touching existing content."""
    container = resolve_container(notes)
    if container is None:
        LOGGER.warning("notes.fields.no_container pairs=%d", len(fields))
        return 0
    return _append_all(container, fields)


__all__ = [
    "append_fields",
    "build_field_markup",
    "format_field_line",
    "write_fields",
]
