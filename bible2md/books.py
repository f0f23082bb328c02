"""
Book name tables for NET Bible study notes.

The notes cite other passages with short codes (``Jn``, ``1Co``, ``Lu``).
Running text also uses the longer forms (``Gen``, ``Matt``, ``1 Cor``).
These tables turn either kind of code into the book name used for link
targets and tell whether a name is one of the 66 books.
"""

from types import MappingProxyType

BOOK_CODES = MappingProxyType({
    # Old Testament
    'Ge': 'Genesis',
    'Ex': 'Exodus',
    'Le': 'Leviticus',
    'Nu': 'Numbers',
    'De': 'Deuteronomy',
    'Jos': 'Joshua',
    'Jdg': 'Judges',
    'Ru': 'Ruth',
    '1Sa': '1 Samuel',
    '2Sa': '2 Samuel',
    '1Ki': '1 Kings',
    '2Ki': '2 Kings',
    '1Ch': '1 Chronicles',
    '2Ch': '2 Chronicles',
    'Ezr': 'Ezra',
    'Ne': 'Nehemiah',
    'Es': 'Esther',
    'Job': 'Job',
    'Ps': 'Psalms',
    'Pr': 'Proverbs',
    'Ec': 'Ecclesiastes',
    'So': 'Song of Solomon',
    'Is': 'Isaiah',
    'Jer': 'Jeremiah',
    'La': 'Lamentations',
    'Eze': 'Ezekiel',
    'Da': 'Daniel',
    'Ho': 'Hosea',
    'Joe': 'Joel',
    'Am': 'Amos',
    'Ob': 'Obadiah',
    'Jon': 'Jonah',
    'Mic': 'Micah',
    'Na': 'Nahum',
    'Hab': 'Habakkuk',
    'Zep': 'Zephaniah',
    'Hag': 'Haggai',
    'Zec': 'Zechariah',
    'Mal': 'Malachi',
    # New Testament
    'Mt': 'Matthew',
    'Mk': 'Mark',
    'Lk': 'Luke',
    'Lu': 'Luke',
    'Jn': 'John',
    'Ac': 'Acts',
    'Ro': 'Romans',
    '1Co': '1 Corinthians',
    '2Co': '2 Corinthians',
    'Ga': 'Galatians',
    'Eph': 'Ephesians',
    'Php': 'Philippians',
    'Col': 'Colossians',
    '1Th': '1 Thessalonians',
    '2Th': '2 Thessalonians',
    '1Ti': '1 Timothy',
    '2Ti': '2 Timothy',
    'Tit': 'Titus',
    'Phm': 'Philemon',
    'Heb': 'Hebrews',
    'Jas': 'James',
    '1Pe': '1 Peter',
    '2Pe': '2 Peter',
    '1Jn': '1 John',
    '2Jn': '2 John',
    '3Jn': '3 John',
    'Jud': 'Jude',
    'Re': 'Revelation',
    # Longer abbreviations common in running text
    'Gen': 'Genesis',
    'Exod': 'Exodus',
    'Lev': 'Leviticus',
    'Num': 'Numbers',
    'Deut': 'Deuteronomy',
    'Josh': 'Joshua',
    'Judg': 'Judges',
    '1Sam': '1 Samuel',
    '2Sam': '2 Samuel',
    '1Kgs': '1 Kings',
    '2Kgs': '2 Kings',
    '1Chr': '1 Chronicles',
    '2Chr': '2 Chronicles',
    'Neh': 'Nehemiah',
    'Esth': 'Esther',
    'Psa': 'Psalms',
    'Psalm': 'Psalms',
    'Prov': 'Proverbs',
    'Eccl': 'Ecclesiastes',
    'Song': 'Song of Solomon',
    'Isa': 'Isaiah',
    'Lam': 'Lamentations',
    'Ezek': 'Ezekiel',
    'Dan': 'Daniel',
    'Hos': 'Hosea',
    'Obad': 'Obadiah',
    'Nah': 'Nahum',
    'Zeph': 'Zephaniah',
    'Zech': 'Zechariah',
    'Matt': 'Matthew',
    'Rom': 'Romans',
    '1Cor': '1 Corinthians',
    '2Cor': '2 Corinthians',
    'Gal': 'Galatians',
    'Phil': 'Philippians',
    '1Thess': '1 Thessalonians',
    '2Thess': '2 Thessalonians',
    '1Tim': '1 Timothy',
    '2Tim': '2 Timothy',
    'Phlm': 'Philemon',
    '1Pet': '1 Peter',
    '2Pet': '2 Peter',
    'Rev': 'Revelation',
})

CANONICAL_BOOKS = frozenset([
    'Genesis', 'Exodus', 'Leviticus', 'Numbers', 'Deuteronomy',
    'Joshua', 'Judges', 'Ruth', '1 Samuel', '2 Samuel',
    '1 Kings', '2 Kings', '1 Chronicles', '2 Chronicles',
    'Ezra', 'Nehemiah', 'Esther', 'Job', 'Psalms',
    'Proverbs', 'Ecclesiastes', 'Song of Solomon',
    'Isaiah', 'Jeremiah', 'Lamentations', 'Ezekiel', 'Daniel',
    'Hosea', 'Joel', 'Amos', 'Obadiah', 'Jonah', 'Micah',
    'Nahum', 'Habakkuk', 'Zephaniah', 'Haggai', 'Zechariah', 'Malachi',
    'Matthew', 'Mark', 'Luke', 'John', 'Acts',
    'Romans', '1 Corinthians', '2 Corinthians', 'Galatians',
    'Ephesians', 'Philippians', 'Colossians',
    '1 Thessalonians', '2 Thessalonians', '1 Timothy', '2 Timothy',
    'Titus', 'Philemon', 'Hebrews', 'James',
    '1 Peter', '2 Peter', '1 John', '2 John', '3 John',
    'Jude', 'Revelation',
])


def expand_book_code(code: str) -> str:
    """Return the book name for an abbreviation, or the code itself if unknown."""
    return BOOK_CODES.get(code, code)


def is_canonical_book(name: str) -> bool:
    return name in CANONICAL_BOOKS
