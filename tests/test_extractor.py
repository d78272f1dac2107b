"""Tests for COBRA notes field extraction."""

import os
import unittest
from typing import Dict, List, Optional
from unittest import mock

from cobranotes import XhtmlNotes, extract_fields
from cobranotes.options import ENV_EXTRA_KEYS, FieldRules

XHTML = "http://www.w3.org/1999/xhtml"


def body(*lines: str) -> str:
    paras = "".join(f"<p>{line}</p>" for line in lines)
    return f'<body xmlns="{XHTML}">{paras}</body>'


class FakeFragment:
    """Minimal Fragment without any markup library behind it."""

    def __init__(self, text: Optional[str] = None, **children: List["FakeFragment"]):
        self.text = text
        self.children: Dict[str, List[FakeFragment]] = children

    def find_child(self, tag):
        found = self.children.get(tag) or []
        return found[0] if found else None

    def direct_children(self, tag):
        return list(self.children.get(tag, []))

    def first_child_text(self):
        return self.text


class FakeNotes:
    def __init__(self, content: Optional[FakeFragment]):
        self.content = content

    def has_content(self):
        return self.content is not None

    def get_content(self):
        return self.content

    def clear_content(self):
        self.content = None

    def append_content(self, markup):
        raise NotImplementedError


class ExtractFieldsTest(unittest.TestCase):
    """Tests for extract_fields."""

    def setUp(self):
        patcher = mock.patch.dict(os.environ)
        patcher.start()
        os.environ.pop(ENV_EXTRA_KEYS, None)
        self.addCleanup(patcher.stop)

    def test_known_keys(self):
        notes = XhtmlNotes(body("FORMULA: H4N", "CHARGE: 1", "EC Number: 123"))
        self.assertEqual(
            extract_fields(notes),
            {"FORMULA": "H4N", "CHARGE": "1", "EC Number": "123"},
        )

    def test_generic_sentences_ignored(self):
        notes = XhtmlNotes(
            body(
                "This is an explanation: not a COBRA field.",
                "Another sentence: still not a structured key.",
            )
        )
        self.assertEqual(extract_fields(notes), {})

    def test_uppercase_identifier_not_on_allow_list(self):
        notes = XhtmlNotes(body("GENE_ASSOCIATION: 1594.1"))
        self.assertEqual(extract_fields(notes), {"GENE_ASSOCIATION": "1594.1"})

    def test_allow_list_key_with_space(self):
        notes = XhtmlNotes(body("Confidence Level: 4"))
        self.assertEqual(extract_fields(notes), {"Confidence Level": "4"})

    def test_split_on_first_colon_only(self):
        notes = XhtmlNotes(body("NOTES: pg.196, vol. 2: see ref"))
        self.assertEqual(extract_fields(notes), {"NOTES": "pg.196, vol. 2: see ref"})

    def test_empty_notes(self):
        self.assertEqual(extract_fields(XhtmlNotes()), {})

    def test_document_order_and_last_write_wins(self):
        notes = XhtmlNotes(body("CHARGE: 1", "FORMULA: H2O", "CHARGE: -1"))
        fields = extract_fields(notes)
        self.assertEqual(fields, {"CHARGE": "-1", "FORMULA": "H2O"})
        self.assertEqual(list(fields), ["CHARGE", "FORMULA"])

    def test_empty_value_is_recorded(self):
        notes = XhtmlNotes(body("SUBSYSTEM:", "CHARGE:    "))
        self.assertEqual(extract_fields(notes), {"SUBSYSTEM": "", "CHARGE": ""})

    def test_whitespace_around_colon_trimmed(self):
        notes = XhtmlNotes(body("   FORMULA  :   H2O  "))
        self.assertEqual(extract_fields(notes), {"FORMULA": "H2O"})

    def test_lines_without_colon_are_skipped(self):
        notes = XhtmlNotes(body("just a remark", "FORMULA: C6H12O6"))
        with self.assertLogs("cobranotes.extractor", level="DEBUG") as logs:
            fields = extract_fields(notes)
        self.assertEqual(fields, {"FORMULA": "C6H12O6"})
        self.assertTrue(any("skip_no_colon" in line for line in logs.output))

    def test_rejected_key_is_traced(self):
        notes = XhtmlNotes(body("Some prose: here"))
        with self.assertLogs("cobranotes.extractor", level="DEBUG") as logs:
            self.assertEqual(extract_fields(notes), {})
        self.assertTrue(any("skip_key" in line for line in logs.output))

    def test_paragraphs_without_text_are_skipped(self):
        markup = f'<body xmlns="{XHTML}"><p/><p><b>FORMULA</b>: X</p><p>CHARGE: 0</p></body>'
        self.assertEqual(extract_fields(XhtmlNotes(markup)), {"CHARGE": "0"})

    def test_escaped_text_is_decoded(self):
        notes = XhtmlNotes(body("NOTES: a &lt; b &amp; c"))
        self.assertEqual(extract_fields(notes), {"NOTES": "a < b & c"})

    def test_body_without_namespace(self):
        notes = XhtmlNotes("<body><p>FORMULA: H2O</p></body>")
        self.assertEqual(extract_fields(notes), {"FORMULA": "H2O"})

    def test_html_wrapper_fallback(self):
        notes = XhtmlNotes(f'<html xmlns="{XHTML}"><p>FORMULA: H2O</p></html>')
        self.assertEqual(extract_fields(notes), {"FORMULA": "H2O"})

    def test_bare_paragraph_becomes_scan_root(self):
        notes = XhtmlNotes("<p>intro<p>CHARGE: 2</p></p>")
        self.assertEqual(extract_fields(notes), {"CHARGE": "2"})

    def test_no_container_scans_top_level(self):
        notes = XhtmlNotes("<div><p>CHARGE: 2</p></div>")
        self.assertEqual(extract_fields(notes), {})

    def test_only_direct_paragraphs(self):
        notes = XhtmlNotes(
            f'<body xmlns="{XHTML}"><div><p>CHARGE: 2</p></div><p>FORMULA: X</p></body>'
        )
        self.assertEqual(extract_fields(notes), {"FORMULA": "X"})

    def test_comments_are_ignored(self):
        notes = XhtmlNotes(f'<body xmlns="{XHTML}"><!-- note --><p>FORMULA: X</p></body>')
        self.assertEqual(extract_fields(notes), {"FORMULA": "X"})

    def test_extraction_does_not_mutate_notes(self):
        notes = XhtmlNotes(body("FORMULA: H4N", "prose line"))
        before = notes.to_string()
        fields = extract_fields(notes)
        fields["FORMULA"] = "changed"
        self.assertEqual(notes.to_string(), before)
        self.assertEqual(extract_fields(notes), {"FORMULA": "H4N"})

    def test_rules_extend_allow_list(self):
        notes = XhtmlNotes(body("Reaction Name: glycolysis"))
        self.assertEqual(extract_fields(notes), {})
        rules = FieldRules(extra_keys={"Reaction Name"})
        self.assertEqual(extract_fields(notes, rules), {"Reaction Name": "glycolysis"})

    def test_accepts_notes_owner(self):
        class Species:
            def __init__(self, notes):
                self.notes = notes

        owner = Species(XhtmlNotes(body("CHARGE: 1")))
        self.assertEqual(extract_fields(owner), {"CHARGE": "1"})

    def test_owner_without_notes(self):
        class Compartment:
            notes = None

        self.assertEqual(extract_fields(Compartment()), {})
        self.assertEqual(extract_fields(None), {})

    def test_xml_declaration(self):
        prolog = '<?xml version="1.0" encoding="UTF-8"?>'
        notes = XhtmlNotes(prolog + body("CHARGE: 1"))
        self.assertEqual(extract_fields(notes), {"CHARGE": "1"})

    def test_any_fragment_implementation(self):
        paras = [FakeFragment("FORMULA: H2O"), FakeFragment(None), FakeFragment("oops")]
        top = FakeFragment(body=[FakeFragment(p=paras)])
        self.assertEqual(extract_fields(FakeNotes(top)), {"FORMULA": "H2O"})
        self.assertEqual(extract_fields(FakeNotes(None)), {})


if __name__ == "__main__":
    unittest.main()
