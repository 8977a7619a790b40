"""Page statistics: aggregate layer counts for one document.

Entry point: :func:`compute_stats` builds a :class:`PageStats` from raw
document text. :func:`resolve_layer_symbol` and :func:`format_layer_value`
turn a record into the strings shown for Layer 2 and Layer 3.

The layers nest strictly: document ⊇ citations ⊇ emphasis. Bold and
highlighted spans are only searched inside the joined citation text, so
emphasis outside a citation block is never counted.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from pagestats.parse import (
    extract_bold_spans,
    extract_citation_blocks,
    extract_highlighted_spans,
    extract_paragraph_blocks,
    strip_front_matter,
)
from pagestats.tokenize import tokenize


BOLD = "**"
HIGHLIGHT = "=="

ORDERS = ("default", "reverse")


@dataclass(frozen=True)
class Settings:
    """Display settings. ``order`` picks which symbol is Layer 2."""

    order: str = "default"


@dataclass(frozen=True)
class PageStats:
    """Word and block counts for one document.

    ``num_words``, ``num_words_note``, ``num_blocks_bold`` and
    ``num_blocks_hightlighted`` are reserved and always 0.
    """

    num_words: int = 0
    num_words_cite: int = 0
    num_words_note: int = 0
    num_words_bold: int = 0
    num_words_highlighted: int = 0
    num_blocks_cite: int = 0
    num_blocks_bold: int = 0
    num_blocks_hightlighted: int = 0
    num_comments: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def _count_words(parts: list[str]) -> int:
    return len(tokenize(" ".join(parts)))


def compute_stats(text: str) -> PageStats:
    """Compute a fresh :class:`PageStats` for ``text``."""
    blocks_cite = extract_citation_blocks(text)
    joined_cite = " ".join(blocks_cite)

    return PageStats(
        num_blocks_cite=len(blocks_cite),
        num_words_cite=len(tokenize(joined_cite)),
        num_words_bold=_count_words(extract_bold_spans(joined_cite)),
        num_words_highlighted=_count_words(extract_highlighted_spans(joined_cite)),
        num_comments=len(extract_paragraph_blocks(strip_front_matter(text))),
    )


def resolve_layer_symbol(level: int, settings: Settings) -> str:
    """Map summarization level 2 or 3 to its markup symbol.

    Default order is bold then highlight; ``reverse`` swaps them. Any other
    level returns ``""``.
    """
    if level not in (2, 3):
        return ""
    symbols = [BOLD, HIGHLIGHT]
    if settings.order != "default":
        symbols.reverse()
    return symbols[level - 2]


def _percent(value: int, total: int) -> int:
    # Integer round-half-up of value / total * 100.
    if total <= 0:
        return 0
    return (value * 200 + total) // (2 * total)


def format_layer_value(stats: PageStats, symbol: str) -> str:
    """Render a layer's word count with its share of the citation words.

    >>> format_layer_value(PageStats(num_words_cite=3, num_words_bold=1), "**")
    '1 (33%)'
    """
    if symbol == HIGHLIGHT:
        value = stats.num_words_highlighted
    elif symbol == BOLD:
        value = stats.num_words_bold
    else:
        value = 0

    if value <= 0:
        return "0 (0%)"
    return f"{value} ({_percent(value, stats.num_words_cite)}%)"
