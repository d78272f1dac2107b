"""
lxml-backed notes tree and container.

`XhtmlNotes` keeps its content under a `<notes>` wrapper, the way SBML
stores element notes. Tags are matched on local name so both namespaced
XHTML (`{http://www.w3.org/1999/xhtml}p`) and bare `<p>` are found.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from lxml import etree

from .domain import ROOT_TAGS, TAG_BODY, TAG_NOTES
from .exceptions import NotesMarkupError

LOGGER = logging.getLogger(__name__)

_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


def _local_name(element: etree._Element) -> Optional[str]:
    # comments and processing instructions have a non-string tag
    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


_XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")
_NOTES_WRAPPER = re.compile(rf"^<{TAG_NOTES}[\s/>]")


def _parse(markup: str) -> etree._Element:
    text = _XML_DECLARATION.sub("", markup).strip()
    if not _NOTES_WRAPPER.match(text):
        text = f"<{TAG_NOTES}>{text}</{TAG_NOTES}>"
    try:
        return etree.fromstring(text, parser=_PARSER)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise NotesMarkupError(f"invalid notes markup: {e}", markup=markup) from e


def _merge_target(root: etree._Element) -> Optional[etree._Element]:
    # same body, p, html order the extractor scans
    for tag in ROOT_TAGS:
        for child in root:
            if _local_name(child) == tag:
                return child
    return None


class XhtmlFragment:
    """`Fragment` over an lxml element."""

    __slots__ = ("element",)

    def __init__(self, element: etree._Element):
        self.element = element

    @property
    def tag(self) -> Optional[str]:
        return _local_name(self.element)

    def _elements(self, tag: str):
        for child in self.element:
            if _local_name(child) == tag:
                yield child

    def find_child(self, tag: str) -> Optional["XhtmlFragment"]:
        for child in self._elements(tag):
            return XhtmlFragment(child)
        return None

    def direct_children(self, tag: str) -> List["XhtmlFragment"]:
        return [XhtmlFragment(child) for child in self._elements(tag)]

    def first_child_text(self) -> Optional[str]:
        if self.element.text is not None:
            return self.element.text
        if len(self.element):
            # first child is an element (or comment); it carries no characters
            return ""
        return None

    def __repr__(self) -> str:
        return f"XhtmlFragment(tag={self.tag!r})"


class XhtmlNotes:
    """`NotesContainer` holding an optional `<notes>` element."""

    def __init__(self, markup: Optional[str] = None):
        self._root: Optional[etree._Element] = None
        if markup:
            self.set_content(markup)

    @classmethod
    def from_string(cls, markup: str) -> "XhtmlNotes":
        return cls(markup)

    def has_content(self) -> bool:
        return self._root is not None

    def get_content(self) -> XhtmlFragment:
        if self._root is None:
            raise LookupError("notes have no content")
        return XhtmlFragment(self._root)

    def clear_content(self) -> None:
        self._root = None

    def set_content(self, markup: str) -> None:
        self._root = _parse(markup)

    def append_content(self, markup: str) -> None:
        """Append parsed `markup`.

        Paragraphs of a new `<body>` move into the existing scan root (body,
        else p, else html) so earlier and later lines stay together.
        """
        incoming = _parse(markup)
        if self._root is None:
            self._root = etree.Element(incoming.tag, nsmap=incoming.nsmap)
        target = _merge_target(self._root)
        for child in list(incoming):
            if _local_name(child) != TAG_BODY:
                self._root.append(child)
            elif target is None:
                self._root.append(child)
                target = child
            else:
                moved = list(child)
                for grandchild in moved:
                    target.append(grandchild)
                LOGGER.debug(
                    "notes.xhtml.merge_body into=%s children=%d",
                    _local_name(target),
                    len(moved),
                )

    def to_string(self, pretty_print: bool = False) -> str:
        if self._root is None:
            return ""
        return etree.tostring(self._root, encoding="unicode", pretty_print=pretty_print)

    def __repr__(self) -> str:
        return f"XhtmlNotes(has_content={self.has_content()})"


__all__ = ["XhtmlFragment", "XhtmlNotes"]
