"""
Markdown footnote definitions for a chapter page.

Produces the ``## Footnotes`` block that sits under the verses::

    [^1]: **SN** See [[John 1#24|1:24]]. [[John 3#1|↑]]
"""

import re
from typing import Sequence

from .footnotes import Footnote, infer_originating_book
from .linking import link_content

BACK_LINK_LABEL = '↑'

# note_1 -> 1, note_John_3_16 -> 16
TRAILING_NUMBER_PATTERN = re.compile(r'(\d+)$')


def back_reference_link(footnote: Footnote, book: str, chapter: int) -> str:
    """Link from a footnote back to the verse it annotates, or '' if unknown."""
    match = TRAILING_NUMBER_PATTERN.search(footnote.id)
    if not match:
        return ''
    return f"[[{book} {chapter}#{match.group(1)}|{BACK_LINK_LABEL}]]"


def render_footnote(footnote: Footnote, book: str, chapter: int) -> str:
    content = link_content(footnote.content, footnote.references,
                           infer_originating_book(footnote.id))
    line = f"[^{footnote.number}]: **{footnote.type.upper()}** {content}"

    verse_link = back_reference_link(footnote, book, chapter)
    if verse_link:
        line += f" {verse_link}"
    return line


def render_footnotes_section(footnotes: Sequence[Footnote], book: str, chapter: int) -> str:
    if not footnotes:
        return ''

    markdown = '\n---\n\n## Footnotes\n\n'
    for footnote in footnotes:
        markdown += render_footnote(footnote, book, chapter) + '\n\n'
    return markdown
