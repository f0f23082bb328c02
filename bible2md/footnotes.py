"""
Chapter footnotes from netbible.org ``netNotes`` markup.

Each note looks like::

    <div class="note">
      <sup><span class="noteNoteSuper" id="note_John_3_1">1</span></sup>
      <span class="notetype">sn</span>
      See reference in <data ref="Bible:Jn 1:24">1:24</data>.
    </div>

Notes without a usable number or without any text are skipped; the rest of
the chapter is still parsed.
"""

import copy
import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, ParserRejectedMarkup

from .references import VerseReference, collapse_whitespace, extract_verse_references

logger = logging.getLogger(__name__)

NOTE_CLASS = 'note'
MARKER_CLASS = 'noteNoteSuper'
TYPE_CLASS = 'notetype'

# note_John_3_1 -> John
ORIGIN_ID_PATTERN = re.compile(r'note_([A-Za-z]+)_\d+_\d+')


@dataclass(frozen=True)
class Footnote:
    id: str
    number: int
    type: str
    content: str
    references: Tuple[VerseReference, ...] = field(default_factory=tuple)

    def to_dict(self):
        return {
            "id": self.id,
            "number": self.number,
            "type": self.type,
            "content": self.content,
            "references": [ref.to_dict() for ref in self.references],
        }


def _parse_note_number(marker):
    if marker is None:
        return None
    text = marker.get_text().strip()
    if not text.isdecimal():
        return None
    return int(text)


def _note_content(note):
    # Work on a copy so the caller's tree keeps the marker and type label.
    note = copy.copy(note)
    for sup in note.find_all('sup'):
        if sup.find(class_=MARKER_CLASS) is not None:
            sup.decompose()
    for element in note.find_all(class_=[MARKER_CLASS, TYPE_CLASS]):
        element.decompose()
    return collapse_whitespace(note.get_text())


def parse_note(note) -> Optional[Footnote]:
    """Build a Footnote from one ``.note`` element, or None if it is unusable."""
    marker = note.find(class_=MARKER_CLASS)
    number = _parse_note_number(marker)
    if number is None:
        logger.debug("Skipping note without a numeric marker: %r",
                     marker.get_text() if marker is not None else None)
        return None

    content = _note_content(note)
    if not content:
        logger.debug("Skipping empty note %s", number)
        return None

    type_element = note.find(class_=TYPE_CLASS)
    note_type = type_element.get_text().strip() if type_element is not None else ''
    note_id = marker.get('id') or f"note_{number}"

    references = extract_verse_references(note.decode_contents(), content)

    return Footnote(
        id=note_id,
        number=number,
        type=note_type,
        content=content,
        references=tuple(references),
    )


def parse_footnotes(markup: str) -> List[Footnote]:
    """Parse every note in a chapter's notes markup, in document order."""
    try:
        soup = BeautifulSoup(markup or '', 'html.parser')
    except ParserRejectedMarkup as e:
        logger.debug("Notes markup rejected by parser: %s", e)
        return []

    footnotes = []
    notes = soup.find_all(class_=NOTE_CLASS)

    for note in notes:
        footnote = parse_note(note)
        if footnote is not None:
            footnotes.append(footnote)

    logger.debug("Parsed %d of %d notes", len(footnotes), len(notes))
    return footnotes


def infer_originating_book(footnote_id: Optional[str]) -> Optional[str]:
    """Return the book encoded in ids like ``note_John_3_1``, else None."""
    if not footnote_id:
        return None
    match = ORIGIN_ID_PATTERN.search(footnote_id)
    return match.group(1) if match else None
