"""
Troubleshooting helpers for notes field extraction.

`explain_fields` walks the same paragraphs as `extract_fields` and records
why each line was kept or skipped. No I/O unless `print_decisions` is used.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .classifier import is_field_key
from .iface import NotesLike, resolve_container
from .options import FieldRules, default_rules

# Same scanning helpers as extract_fields.
from .extractor import _paragraph_texts, _split_line

ACCEPTED = "accepted"
NO_TEXT = "no_text"
NO_COLON = "no_colon"
REJECTED_KEY = "rejected_key"


@dataclass(frozen=True)
class LineDecision:
    """Outcome of one scanned notes paragraph."""

    index: int
    text: Optional[str]
    outcome: str
    key: Optional[str] = None
    value: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.outcome == ACCEPTED


def explain_fields(
    notes: Optional[NotesLike], rules: Optional[FieldRules] = None
) -> List[LineDecision]:
    """Return one `LineDecision` per paragraph scanned by `extract_fields`."""
    container = resolve_container(notes)
    if container is None or not container.has_content():
        return []
    if rules is None:
        rules = default_rules()

    out: List[LineDecision] = []
    for idx, text in enumerate(_paragraph_texts(container.get_content())):
        if text is None:
            out.append(LineDecision(idx, None, NO_TEXT))
            continue
        pair = _split_line(text)
        if pair is None:
            out.append(LineDecision(idx, text, NO_COLON))
            continue
        key, value = pair
        outcome = ACCEPTED if is_field_key(key, rules) else REJECTED_KEY
        out.append(LineDecision(idx, text, outcome, key=key, value=value))
    return out


def decisions_table(decisions: Iterable[LineDecision]) -> Table:
    """One row per decision; accepted lines highlighted."""
    table = Table("#", "Outcome", "Key", "Value", "Line", title="Notes fields")
    for d in decisions:
        style = "green" if d.accepted else "dim"
        table.add_row(
            str(d.index),
            d.outcome,
            d.key or "",
            d.value or "",
            d.text or "",
            style=style,
        )
    return table


def print_decisions(
    notes: Optional[NotesLike],
    rules: Optional[FieldRules] = None,
    console: Optional[Console] = None,
) -> None:
    """Print the decision table for `notes` to `console` (stdout by default)."""
    console = console or Console()
    decisions = explain_fields(notes, rules)
    if not decisions:
        console.print("No notes paragraphs found")
        return
    console.print(decisions_table(decisions))


def configure_logging(verbose: bool = False) -> None:
    """Route `cobranotes` logs through rich; DEBUG traces every skipped line."""
    logger = logging.getLogger("cobranotes")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(rich_tracebacks=True, show_path=False))


__all__ = [
    "ACCEPTED",
    "NO_COLON",
    "NO_TEXT",
    "REJECTED_KEY",
    "LineDecision",
    "configure_logging",
    "decisions_table",
    "explain_fields",
    "print_decisions",
]
