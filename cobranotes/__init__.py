"""Read and write COBRA-style `KEY: VALUE` annotations in XHTML notes."""

from .classifier import FIELD_KEY_ALLOW_LIST, is_field_key, looks_like_identifier
from .domain import XHTML_NAMESPACE, FieldMap
from .exceptions import NotesFieldError, NotesMarkupError
from .extractor import extract_fields
from .iface import Fragment, NotesContainer, NotesOwner
from .options import FieldRules
from .serializer import append_fields, write_fields
from .xhtml import XhtmlFragment, XhtmlNotes

__all__ = [
    "FIELD_KEY_ALLOW_LIST",
    "XHTML_NAMESPACE",
    "FieldMap",
    "FieldRules",
    "Fragment",
    "NotesContainer",
    "NotesFieldError",
    "NotesMarkupError",
    "NotesOwner",
    "XhtmlFragment",
    "XhtmlNotes",
    "append_fields",
    "extract_fields",
    "is_field_key",
    "looks_like_identifier",
    "write_fields",
]
