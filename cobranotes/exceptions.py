"""Errors raised by the notes field helpers."""

from __future__ import annotations

from typing import Optional


class NotesFieldError(Exception):
    """Base notes field error."""


class NotesMarkupError(NotesFieldError):
    """Markup could not be built or parsed."""

    def __init__(self, message: str, markup: Optional[str] = None):
        super().__init__(message)
        self.markup = markup
