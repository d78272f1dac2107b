"""
Tree and notes seams used by the field extractor and serializer.

The core never parses or prints markup itself; it only walks a `Fragment`
and mutates a `NotesContainer`. `cobranotes.xhtml` ships an lxml-backed
implementation, any other markup library can be plugged in behind these
protocols.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, Union


class Fragment(Protocol):
    """Read-only view of a markup element."""

    def find_child(self, tag: str) -> Optional["Fragment"]: ...

    def direct_children(self, tag: str) -> Sequence["Fragment"]: ...

    def first_child_text(self) -> Optional[str]: ...


class NotesContainer(Protocol):
    """Holder of zero or one notes fragment."""

    def has_content(self) -> bool: ...

    def get_content(self) -> Fragment: ...

    def clear_content(self) -> None: ...

    def append_content(self, markup: str) -> None: ...


class NotesOwner(Protocol):
    """Any model object exposing its notes container, e.g. an SBML element."""

    @property
    def notes(self) -> NotesContainer: ...


NotesLike = Union[NotesContainer, NotesOwner]


def resolve_container(
    target: Optional[NotesLike],
) -> Optional[NotesContainer]:
    """Return the notes container of `target`, or `target` itself.

    None when `target` is None or an owner without notes.
    """
    if target is None or hasattr(target, "has_content"):
        return target  # type: ignore[return-value]
    return getattr(target, "notes", None)
