"""
bible2md: NET Bible study notes to cross-linked Markdown.

    footnotes = parse_footnotes(notes_html)
    for footnote in footnotes:
        text = link_content(footnote.content, footnote.references,
                            infer_originating_book(footnote.id))
"""

from .books import BOOK_CODES, CANONICAL_BOOKS, expand_book_code, is_canonical_book
from .footnotes import Footnote, infer_originating_book, parse_footnotes
from .linking import ClaimedRanges, link_content
from .references import VerseReference, extract_verse_references
from .render import back_reference_link, render_footnote, render_footnotes_section

__version__ = "1.0.0"

__all__ = [
    "BOOK_CODES",
    "CANONICAL_BOOKS",
    "ClaimedRanges",
    "Footnote",
    "VerseReference",
    "back_reference_link",
    "expand_book_code",
    "extract_verse_references",
    "infer_originating_book",
    "is_canonical_book",
    "link_content",
    "parse_footnotes",
    "render_footnote",
    "render_footnotes_section",
]
