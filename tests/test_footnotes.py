import dataclasses

import pytest

from bible2md.footnotes import Footnote, infer_originating_book, parse_footnotes
from bible2md.references import VerseReference


class TestParseFootnotes:

    def test_basic_note(self, make_note):
        footnotes = parse_footnotes(make_note(1, "This is a study note.", note_id="note_1"))

        assert len(footnotes) == 1
        footnote = footnotes[0]
        assert footnote.id == "note_1"
        assert footnote.number == 1
        assert footnote.type == "sn"
        assert footnote.content == "This is a study note."
        assert footnote.references == ()

    def test_note_with_tagged_reference(self, make_note):
        html = make_note(1, 'See <data ref="Bible:Jn 1:24">1:24</data>.', note_id="note_1")

        footnote = parse_footnotes(html)[0]

        assert footnote.content == "See 1:24."
        assert footnote.references == (
            VerseReference(book="John", chapter=1, verse=24, display="1:24"),
        )

    def test_two_tagged_references(self, make_note):
        html = make_note(2, 'Compare <data ref="Bible:Mt 5:3">Mt 5:3</data> and '
                            '<data ref="Bible:Lu 6:20">Lu 6:20</data>.', note_type="tn")

        footnote = parse_footnotes(html)[0]

        assert footnote.type == "tn"
        assert [ref.book for ref in footnote.references] == ["Matthew", "Luke"]

    def test_untagged_references_come_from_content(self, make_note):
        footnote = parse_footnotes(make_note(5, "Cf. Ge 20:6 and Xy 1:2."))[0]

        assert [ref.display for ref in footnote.references] == ["Ge 20:6"]

    def test_id_defaults_to_number(self, make_note):
        assert parse_footnotes(make_note(4, "No id on the marker."))[0].id == "note_4"

    def test_content_whitespace_is_collapsed(self, make_note):
        footnote = parse_footnotes(make_note(1, "Spread\n\n   over\tlines."))[0]
        assert footnote.content == "Spread over lines."

    def test_non_numeric_marker_is_skipped(self, make_note):
        html = make_note("—", "Dropped.") + make_note(1, "Kept.")

        footnotes = parse_footnotes(html)

        assert [footnote.number for footnote in footnotes] == [1]

    def test_empty_marker_is_skipped(self, make_note):
        html = make_note("", "Dropped.") + make_note(1, "Kept.")
        assert len(parse_footnotes(html)) == 1

    def test_missing_marker_is_skipped(self):
        html = '<div class="note"><span class="notetype">sn</span> No marker.</div>'
        assert parse_footnotes(html) == []

    def test_empty_content_is_skipped(self, make_note):
        assert parse_footnotes(make_note(1, "   ")) == []

    def test_document_order(self, john_3_notes):
        footnotes = parse_footnotes(john_3_notes)

        assert [footnote.number for footnote in footnotes] == [1, 2, 3]
        assert [footnote.id for footnote in footnotes] == [
            "note_John_3_1", "note_John_3_2", "note_John_3_3",
        ]

    def test_superscripts_inside_content_are_kept(self, make_note):
        footnote = parse_footnotes(make_note(1, "x<sup>2</sup> squared"))[0]
        assert footnote.content == "x2 squared"

    def test_empty_input(self):
        assert parse_footnotes("") == []
        assert parse_footnotes(None) == []

    def test_footnotes_are_immutable(self, make_note):
        footnote = parse_footnotes(make_note(1, "Frozen."))[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            footnote.content = "changed"

    def test_to_dict(self, make_note):
        footnote = parse_footnotes(make_note(1, 'See <data ref="Bible:Jn 1:24">1:24</data>.',
                                             note_id="note_1"))[0]
        assert footnote.to_dict() == {
            "id": "note_1",
            "number": 1,
            "type": "sn",
            "content": "See 1:24.",
            "references": [
                {"book": "John", "chapter": 1, "verse": 24, "end_verse": None, "display": "1:24"},
            ],
        }


class TestInferOriginatingBook:

    def test_book_encoded_in_id(self):
        assert infer_originating_book("note_John_3_1") == "John"

    def test_plain_ids(self):
        assert infer_originating_book("note_1") is None
        assert infer_originating_book("") is None
        assert infer_originating_book(None) is None

    def test_from_parsed_footnote(self):
        footnote = Footnote(id="note_Genesis_1_2", number=2, type="tn", content="x")
        assert infer_originating_book(footnote.id) == "Genesis"
