#!/usr/bin/env python3
"""
Run the footnote engine over a saved netNotes HTML page.

Usage:
    python -m bible2md notes.html --book John --chapter 3 [--json footnotes.json]
"""

import argparse
import json
import logging
import os
import sys

from .footnotes import infer_originating_book, parse_footnotes
from .linking import link_content
from .render import render_footnotes_section


def process_notes_file(html_file, book, chapter, json_file=None):
    with open(html_file, 'r', encoding='utf-8') as f:
        footnotes = parse_footnotes(f.read())

    print(f"Parsed {len(footnotes)} footnotes from {html_file}")

    if json_file:
        data = []
        for footnote in footnotes:
            entry = footnote.to_dict()
            entry["linked"] = link_content(footnote.content, footnote.references,
                                           infer_originating_book(footnote.id))
            data.append(entry)
        with open(json_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        print(f"Saved {len(data)} footnotes to: {json_file}")

    print(render_footnotes_section(footnotes, book, chapter))
    return footnotes


def main(argv=None):
    parser = argparse.ArgumentParser(description="Parse NET Bible study notes and link their cross-references.")
    parser.add_argument("html_file", help="Path to a saved netNotes HTML file.")
    parser.add_argument("--book", required=True, help="Book the notes belong to, e.g. John.")
    parser.add_argument("--chapter", required=True, type=int, help="Chapter number the notes belong to.")
    parser.add_argument("--json", dest="json_file", help="Also write the parsed footnotes to this JSON file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped notes and rejected references.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    if not os.path.isfile(args.html_file):
        print(f"Error: Input file not found at {args.html_file}")
        sys.exit(1)

    try:
        process_notes_file(args.html_file, args.book, args.chapter, args.json_file)
    except Exception as e:
        print(f"ERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
