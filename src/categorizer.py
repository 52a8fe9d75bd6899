"""
categorizer.py — Assign a part to one category bucket.

Precedence (highest to lowest):
  1. Keyword match on the part name    (first bucket in BUCKETS order wins)
  2. Last word of the page breadcrumb  (only if longer than 2 characters)
  3. DEFAULT_CATEGORY
"""

from __future__ import annotations

import re

from src.extractor import find_block, strip_tags


DEFAULT_CATEGORY = "general"

# ── Bucket table ──────────────────────────────────────────
# Order matters: "Oil Pump Gear" is engine, not transmission.

BUCKETS: list[tuple[str, tuple[str, ...]]] = [
    ("engine",       ("engine", "gasket", "cylinder", "oil")),
    ("interior",     ("seat", "console", "dashboard", "trim")),
    ("exterior",     ("bumper", "door", "mirror", "grille", "fender")),
    ("electrical",   ("switch", "sensor", "wiring", "harness", "electrical")),
    ("suspension",   ("suspension", "shock", "strut", "spring")),
    ("transmission", ("transmission", "clutch", "gear")),
    ("brakes",       ("brake", "rotor", "pad", "caliper")),
]

BUCKET_LABELS: list[str] = [label for label, _ in BUCKETS]

_BREADCRUMB_RE = re.compile(r'breadcrumb[^>]*>(.*?)</(?:nav|div)>', re.IGNORECASE)


def keyword_category(name: str) -> str | None:
    lower = name.lower()
    for label, keywords in BUCKETS:
        if any(kw in lower for kw in keywords):
            return label
    return None


def breadcrumb_guess(html: str) -> str | None:
    """Last word of the breadcrumb block, lowercased, if it is longer than 2 chars."""
    block = find_block(_BREADCRUMB_RE, html)
    if not block:
        return None
    cleaned = re.sub(r'\s+', ' ', strip_tags(block, " ")).strip().lower()
    words = [w for w in cleaned.split(" ") if w]
    if not words or len(words[-1]) <= 2:
        return None
    return words[-1]


def categorize(name: str, html: str) -> str:
    return keyword_category(name) or breadcrumb_guess(html) or DEFAULT_CATEGORY
