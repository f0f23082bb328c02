"""
Verse citations inside a single study note.

A note cites other passages in one of two ways:

1. Explicit tags, as served by netbible.org:
   ``<data ref="Bible:Jn 1:24">1:24</data>``. These are trusted as-is.
2. Plain text such as ``cf. Gen 20:6`` or ``1 Co 7:1``. These are only
   accepted when the words in front of the numbers name a real book.

The text scan is a fallback: it only runs when a note has no usable tags,
so the same citation is never reported twice.
"""

import logging
import re
from dataclasses import dataclass, asdict
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, ParserRejectedMarkup

from .books import expand_book_code, is_canonical_book

logger = logging.getLogger(__name__)

# "Bible:Jn 1:24", "Bible:1Co 7:1", "Bible:Jn 3:16-18"
DATA_REF_PATTERN = re.compile(r'^Bible:(\w+)\s+(\d+):(\d+)(?:-(\d+))?$')

CITATION_NUMBERS_PATTERN = re.compile(r'(?<![\w:])(\d+):(\d+)(?:-(\d+))?(?![\w:])')

# Book words directly in front of a citation, longest form first.
BOOK_PREFIX_PATTERNS = (
    re.compile(r'(?<!\w)([A-Za-z]+\s+of\s+[A-Za-z]+)\s+$'),   # Song of Solomon
    re.compile(r'(?<!\w)([1-3]\s?[A-Za-z]+)\s+$'),             # 1 John, 1Co, 2 Co
    re.compile(r'(?<!\w)([A-Za-z]+)\s+$'),                     # Gen, John
)
BOOK_PREFIX_WINDOW = 40


@dataclass(frozen=True)
class VerseReference:
    """A parsed citation. ``display`` is the text exactly as the note showed it."""
    book: str
    chapter: int
    verse: Optional[int] = None
    end_verse: Optional[int] = None
    display: str = ''

    def to_dict(self):
        return asdict(self)


def collapse_whitespace(text):
    return re.sub(r'\s+', ' ', text or '').strip()


def build_reference(book, chapter, verse, end_verse, display) -> Optional[VerseReference]:
    """
    Validate the numeric parts of a citation and build the record.

    Chapter 0 is not a citation. A range whose end does not come after its
    start is kept as a single verse.
    """
    chapter = int(chapter)
    if chapter < 1:
        return None
    verse = int(verse) if verse is not None else None
    if end_verse is not None:
        end_verse = int(end_verse)
        if verse is None or end_verse <= verse:
            end_verse = None
    return VerseReference(book=book, chapter=chapter, verse=verse,
                          end_verse=end_verse, display=display)


def parse_data_ref(ref: str, display: str) -> Optional[VerseReference]:
    """Parse a ``data ref`` attribute value such as ``Bible:Jn 1:24``."""
    match = DATA_REF_PATTERN.match((ref or '').strip())
    if not match or not display:
        return None
    book_code, chapter, verse, end_verse = match.groups()
    return build_reference(expand_book_code(book_code), chapter, verse, end_verse, display)


def _resolve_book_words(words):
    words = collapse_whitespace(words)
    for candidate in (words, words.replace(' ', '')):
        book = expand_book_code(candidate)
        if is_canonical_book(book):
            return book
    return None


def book_prefix(text, end) -> Optional[Tuple[int, str]]:
    """
    Look for a book name ending just before ``end`` (separated by whitespace).

    Returns ``(start, book)`` where ``start`` is the index of the first book
    word, or None when the preceding words do not name a book.
    """
    window_start = max(0, end - BOOK_PREFIX_WINDOW)
    for prefix_pattern in BOOK_PREFIX_PATTERNS:
        prefix = prefix_pattern.search(text, window_start, end)
        if not prefix:
            continue
        book = _resolve_book_words(prefix.group(1))
        if book is not None:
            return prefix.start(1), book
    return None


def find_bible_references(text: str) -> List[VerseReference]:
    """Scan plain text for ``Book chapter:verse`` citations naming a real book."""
    text = text or ''
    references = []

    for match in CITATION_NUMBERS_PATTERN.finditer(text):
        found = book_prefix(text, match.start())
        if found is None:
            continue
        start, book = found
        chapter, verse, end_verse = match.groups()
        reference = build_reference(book, chapter, verse, end_verse, text[start:match.end()])
        if reference is not None:
            references.append(reference)

    return references


def _explicit_references(soup):
    references = []
    for tag in soup.find_all('data', attrs={'ref': True}):
        display = collapse_whitespace(tag.get_text())
        reference = parse_data_ref(tag['ref'], display)
        if reference is None:
            logger.debug("Dropping unparseable reference tag: ref=%r display=%r", tag['ref'], display)
            continue
        references.append(reference)
    return references


def extract_verse_references(markup: str, text: Optional[str] = None) -> List[VerseReference]:
    """
    Return the citations in one note, in the order they appear.

    Args:
        markup: the note's inner HTML.
        text: the note's plain text; derived from ``markup`` when omitted.
    """
    try:
        soup = BeautifulSoup(markup or '', 'html.parser')
    except ParserRejectedMarkup as e:
        logger.debug("Note markup rejected by parser: %s", e)
        return find_bible_references(text or '')

    references = _explicit_references(soup)
    if references:
        return references

    if text is None:
        text = collapse_whitespace(soup.get_text())
    return find_bible_references(text)
