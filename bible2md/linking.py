"""
Inline cross-reference links for footnote text.

``link_content`` turns a footnote's plain content into Obsidian-flavoured
Markdown where every citation is a wiki link, e.g.::

    See 1:24 and Mt 5:3.  ->  See [[John 1#24|1:24]] and [[Matthew 5#3|Mt 5:3]].

It runs four passes over one working string:

1. ``<data ref="Bible:...">`` tags still in the text become links.
2. Any other markup is stripped.
3. Each parsed reference is linked wherever its display text occurs,
   longest display first so ``John 3:16`` wins over a bare ``3:16``.
4. Bare ``chapter:verse`` tokens are linked against the note's own book,
   when that book is known.

Every link written is recorded in a ``ClaimedRanges`` registry. Later passes
never touch text inside a claimed span, which is what keeps links from
nesting or overlapping.
"""

import re
from typing import Optional, Sequence

from .references import VerseReference, book_prefix, parse_data_ref

# A verse value of 0 means "the chapter as a whole".
CHAPTER_SENTINEL = 0

TAG_PATTERN = re.compile(r'<data\s+ref="(Bible:[^"]*)"\s*>((?:(?!</data>)[\s\S])*)</data>|<[^>]+>')
INNER_TAG_PATTERN = re.compile(r'<[^>]+>')
SHORTHAND_PATTERN = re.compile(r'(?<![\w:])(\d+):(\d+)(?:-(\d+))?(?![\w:])')


class ClaimedRanges:
    """
    Half-open ``[start, end)`` spans of the working text that are already links.

    Spans never overlap. ``replace`` keeps them aligned with the text as it
    changes length.
    """

    def __init__(self):
        self._spans = []

    def __iter__(self):
        return iter(self._spans)

    def __len__(self):
        return len(self._spans)

    def overlaps(self, start, end):
        return any(start < span_end and span_start < end
                   for span_start, span_end in self._spans)

    def claim(self, start, end):
        self._spans.append((start, end))
        self._spans.sort()

    def shift(self, position, delta):
        """Move every span starting at or after ``position`` by ``delta``."""
        self._spans = [(start + delta, end + delta) if start >= position else (start, end)
                       for start, end in self._spans]

    def replace(self, text, start, end, replacement):
        """Replace ``text[start:end]`` with a link and claim the link's span."""
        self.shift(end, len(replacement) - (end - start))
        self.claim(start, start + len(replacement))
        return text[:start] + replacement + text[end:]


def verse_link(book, chapter, verse, label):
    if verse is None or verse == CHAPTER_SENTINEL:
        return f"[[{book} {chapter}|{label}]]"
    return f"[[{book} {chapter}#{verse}|{label}]]"


def reference_link(reference: VerseReference) -> str:
    """Wiki link for a reference; ranges point at their first verse."""
    return verse_link(reference.book, reference.chapter, reference.verse, reference.display)


def _rewrite_markup(content, claimed):
    parts = []
    position = 0
    last = 0

    for match in TAG_PATTERN.finditer(content):
        before = content[last:match.start()]
        parts.append(before)
        position += len(before)

        ref, label = match.groups()
        if label:
            label = INNER_TAG_PATTERN.sub('', label)
        if ref is None:
            replacement = ''
        else:
            reference = parse_data_ref(ref, label)
            if reference is None:
                replacement = label
            else:
                replacement = reference_link(reference)
                claimed.claim(position, position + len(replacement))

        parts.append(replacement)
        position += len(replacement)
        last = match.end()

    parts.append(content[last:])
    return ''.join(parts)


def _link_references(text, references, claimed):
    ordered = sorted((ref for ref in references if ref.display),
                     key=lambda ref: len(ref.display), reverse=True)

    for reference in ordered:
        # "1:24" must not match the head of the range "1:24-26".
        pattern = re.compile(r'(?<!\w)' + re.escape(reference.display) + r'(?!\w|-\d)')
        link = reference_link(reference)
        position = 0
        while True:
            match = pattern.search(text, position)
            if not match:
                break
            if claimed.overlaps(match.start(), match.end()):
                position = match.end()
                continue
            text = claimed.replace(text, match.start(), match.end(), link)
            position = match.start() + len(link)

    return text


def _link_shorthand(text, book, claimed):
    position = 0
    while True:
        match = SHORTHAND_PATTERN.search(text, position)
        if not match:
            break
        start, end = match.span()
        chapter, verse, _ = match.groups()

        # "Gen 20:6" left unlinked by earlier passes still names another book.
        if (claimed.overlaps(start, end) or int(chapter) < 1
                or book_prefix(text, start) is not None):
            position = end
            continue

        link = verse_link(book, int(chapter), int(verse), match.group(0))
        text = claimed.replace(text, start, end, link)
        position = start + len(link)

    return text


def link_content(content: str, references: Sequence[VerseReference] = (),
                 book_hint: Optional[str] = None) -> str:
    """
    Return ``content`` with every citation rewritten as a wiki link.

    Args:
        content: the footnote's raw text; may still hold markup.
        references: citations parsed from the same footnote.
        book_hint: the book the footnote belongs to. Bare ``chapter:verse``
            tokens are only linked when this is given.
    """
    claimed = ClaimedRanges()
    text = _rewrite_markup(content or '', claimed)
    text = _link_references(text, references or (), claimed)
    if book_hint:
        text = _link_shorthand(text, book_hint, claimed)
    return text
