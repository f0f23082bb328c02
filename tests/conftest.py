"""
Shared fixtures: netNotes markup in the shape netbible.org serves it.
"""
import pytest


def note_html(number, body, note_type="sn", note_id=None):
    """One ``.note`` block. ``number`` is the marker text, used verbatim."""
    id_attr = f' id="{note_id}"' if note_id else ""
    return f"""
        <div class="note">
          <sup><span class="noteNoteSuper"{id_attr}>{number}</span></sup>
          <span class="notetype">{note_type}</span>
          {body}
        </div>
    """


@pytest.fixture
def make_note():
    return note_html


@pytest.fixture
def john_3_notes() -> str:
    """A small John 3 notes page with well-formed and malformed notes."""
    return "".join([
        note_html(1, 'See reference in <data ref="Bible:Jn 1:24">1:24</data>.',
                  note_id="note_John_3_1"),
        note_html(2, 'Compare <data ref="Bible:Mt 5:3">Mt 5:3</data> and '
                     '<data ref="Bible:Lu 6:20">Lu 6:20</data>.',
                  note_type="tn", note_id="note_John_3_2"),
        note_html("—", "This note has no usable number."),
        note_html(3, "The phrase recalls 1:4 and Ge 1:1.",
                  note_id="note_John_3_3"),
    ])
