"""Markdown layer extraction.

Pattern-level extractors for the progressive-summarization layers of a
note: citation blocks, bold and highlighted spans, and the body paragraphs
that count as comments. Every extractor returns matched substrings in
document order and an empty list when nothing matches.
"""

from __future__ import annotations

import re


# A run of consecutive lines starting with ">", line terminators included.
CITE_BLOCK_RE = re.compile(r'(?:^>.*$\n?)+', re.MULTILINE)

# "**text**" and "==text==" within a single line, delimiters included.
BOLD_RE = re.compile(r'\*\*(.*?)\*\*', re.MULTILINE)
HIGHLIGHT_RE = re.compile(r'==(.*?)==', re.MULTILINE)

# A run of consecutive lines starting with an ASCII letter or digit.
PARAGRAPH_RE = re.compile(r'(?:^[A-Za-z0-9].*$\n?)+', re.MULTILINE)

# Leading YAML header: "---\n...\n---\n"
FRONT_MATTER_RE = re.compile(r'\A---\n([\s\S]*?)\n---\n')


def _matches(pattern: re.Pattern[str], text: str) -> list[str]:
    return [m.group(0) for m in pattern.finditer(text)]


def extract_citation_blocks(text: str) -> list[str]:
    """Return each maximal run of ``>`` lines as one block.

    Non-``>`` lines separate blocks and are never part of one.
    """
    return _matches(CITE_BLOCK_RE, text)


def extract_bold_spans(text: str) -> list[str]:
    """Return ``**…**`` spans, shortest match first, delimiters included."""
    return _matches(BOLD_RE, text)


def extract_highlighted_spans(text: str) -> list[str]:
    """Return ``==…==`` spans, shortest match first, delimiters included."""
    return _matches(HIGHLIGHT_RE, text)


def extract_paragraph_blocks(text: str) -> list[str]:
    """Return runs of lines that start with an ASCII letter or digit.

    Blank, indented, quoted and list lines break a run.
    """
    return _matches(PARAGRAPH_RE, text)


def strip_front_matter(text: str) -> str:
    """Drop a leading ``---`` delimited header, if any.

    The header must open on the first line and close on the first later line
    that is exactly ``---`` followed by a newline. Text without a header is
    returned unchanged.
    """
    m = FRONT_MATTER_RE.match(text)
    if not m:
        return text
    return text[m.end():]
