"""
extractor.py — Best-effort field extraction from catalog page HTML.

Two stages, both pure functions over plain text:
1. Marker search: lenient regex lookup for a known block (name div, <h1>, price).
2. Normalization: strip markup tags and trim.

Catalog markup is outside our control, so every miss falls back to a fixed
default instead of raising.
"""

from __future__ import annotations

import re


UNKNOWN_NAME = "Unknown Part"
PRICE_NOT_AVAILABLE = "not available"

_TAG_RE = re.compile(r'<[^>]*>')

# Name markers, tried in order
_NAME_PATTERNS = [
    # <div id="partName">...</div>
    r'''<div[^>]*id=['"]partName['"][^>]*>(.*?)</div>''',
    # First <h1>
    r'<h1[^>]*>(.*?)</h1>',
]

# $1,234.56  $12  $ 9.99
_PRICE_RE = re.compile(r'\$\s*[0-9]{1,3}(?:,[0-9]{3})*(?:\.[0-9]{2})?')


def strip_tags(text: str, replacement: str = "") -> str:
    """Remove every <...> tag from text."""
    return _TAG_RE.sub(replacement, text)


def find_block(pattern: str | re.Pattern, html: str) -> str | None:
    """Return the first capture group of a case-insensitive match, or None."""
    try:
        m = re.search(pattern, html, re.IGNORECASE) if isinstance(pattern, str) else pattern.search(html)
    except (re.error, TypeError):
        return None
    if not m or not m.groups():
        return None
    return m.group(1)


def extract_name(html: str) -> str:
    """
    Part name from the partName block, else the first <h1>, else UNKNOWN_NAME.

    The first marker that matches wins even if its text turns out empty.
    """
    for pattern in _NAME_PATTERNS:
        block = find_block(pattern, html)
        if block is not None:
            return strip_tags(block).strip() or UNKNOWN_NAME
    return UNKNOWN_NAME


def extract_price(html: str) -> str:
    """First dollar amount on the page with inner whitespace removed."""
    try:
        m = _PRICE_RE.search(html)
    except TypeError:
        return PRICE_NOT_AVAILABLE
    if not m:
        return PRICE_NOT_AVAILABLE
    return re.sub(r'\s+', '', m.group(0))
