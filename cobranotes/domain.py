# cobranotes/domain.py
from __future__ import annotations

from typing import Dict

XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"

TAG_BODY = "body"
TAG_PARAGRAPH = "p"
TAG_HTML = "html"
TAG_NOTES = "notes"

# Scan root lookup order under the notes element.
ROOT_TAGS = (TAG_BODY, TAG_PARAGRAPH, TAG_HTML)

KEY_SEPARATOR = ":"

FieldMap = Dict[str, str]
