"""Safe keyword highlighting for the resume preview.

The text is HTML-escaped before any marker is inserted, and markers are
fixed strings, so the output can be rendered verbatim as markup.
"""

import html
import re
from collections.abc import Sequence

from services.keyword_extractor import keyword_pattern, normalize_keyword

HIGHLIGHT_OPEN = '<mark class="jd-match-highlight">'
HIGHLIGHT_CLOSE = "</mark>"
LINE_BREAK = "<br>"

# Character references produced by escaping (&amp; &lt; &#x27; ...) are never
# split by a marker, so a keyword like "amp" or "quot" cannot match inside one.
_ENTITY = re.compile(r"&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")
_NEWLINE = re.compile(r"\r\n|\r|\n")


def escape_html(text: str) -> str:
    """Escape & < > " and '."""
    return html.escape(text, quote=True)


def _ordered_terms(keywords: Sequence[str]) -> list[str]:
    """Escaped, de-duplicated keywords, longest first (stable)."""
    seen: dict[str, str] = {}
    for kw in keywords:
        norm = normalize_keyword(kw)
        if norm and norm not in seen:
            seen[norm] = escape_html(" ".join(kw.split()))
    ordered = sorted(seen, key=len, reverse=True)
    return [seen[norm] for norm in ordered]


def _splits_entity(start: int, end: int, entities: list[tuple[int, int]]) -> bool:
    return any(e_start < pos < e_end for e_start, e_end in entities for pos in (start, end))


def _overlaps(start: int, end: int, claimed: list[tuple[int, int]]) -> bool:
    return any(start < c_end and c_start < end for c_start, c_end in claimed)


def _claim_spans(escaped: str, terms: list[str]) -> list[tuple[int, int]]:
    """Spans to mark, claimed term by term so longer keywords win everywhere."""
    entities = [m.span() for m in _ENTITY.finditer(escaped)]
    claimed: list[tuple[int, int]] = []
    for term in terms:
        pattern = keyword_pattern(term)
        pos = 0
        while (match := pattern.search(escaped, pos)) is not None:
            start, end = match.span()
            if _splits_entity(start, end, entities) or _overlaps(start, end, claimed):
                pos = start + 1
                continue
            claimed.append((start, end))
            pos = end
    return sorted(claimed)


def highlight_keywords(text: str, keywords: Sequence[str]) -> str:
    """Mark every whole-word occurrence of any keyword in text.

    Matching is case-insensitive and the original casing of each matched span
    is kept. Keywords claim spans longest first, so a longer keyword wins over
    any shorter one it overlaps, wherever the shorter one starts. Claimed spans
    never overlap and markers are inserted in one final pass, so nothing is
    wrapped twice. Line breaks become ``<br>``.
    """
    if not text:
        return ""
    escaped = escape_html(text)
    terms = _ordered_terms(keywords)
    if not terms:
        return escaped

    parts: list[str] = []
    last = 0
    for start, end in _claim_spans(escaped, terms):
        parts.append(escaped[last:start])
        parts.append(f"{HIGHLIGHT_OPEN}{escaped[start:end]}{HIGHLIGHT_CLOSE}")
        last = end
    parts.append(escaped[last:])
    return _NEWLINE.sub(LINE_BREAK, "".join(parts))
