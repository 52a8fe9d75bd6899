"""
parts.py — Build inventory records from a catalog lookup plus manual entries.

fetch_part_data() never fails: network problems are logged and replaced with
default values so adding a part always completes.
"""

from __future__ import annotations

import base64
import logging
import time
from dataclasses import dataclass

import requests

from src.categorizer import DEFAULT_CATEGORY, categorize
from src.config import CatalogConfig
from src.extractor import PRICE_NOT_AVAILABLE, UNKNOWN_NAME, extract_name, extract_price
from src.fetcher import FetchError, fetch_html


logger = logging.getLogger(__name__)

CONDITIONS = ("new", "used")


@dataclass(frozen=True)
class FetchResult:
    part_number: str
    name: str = UNKNOWN_NAME
    category: str = DEFAULT_CATEGORY
    price: str = PRICE_NOT_AVAILABLE


@dataclass(frozen=True)
class PartRecord:
    id: int
    part_number: str
    name: str
    condition: str        # "new" or "used"
    category: str
    price: str            # "$1,234.56" or PRICE_NOT_AVAILABLE
    image: str | None = None   # base64 data URI


# ── Ids ───────────────────────────────────────────────────

_last_id = 0


def next_part_id() -> int:
    """Millisecond timestamp, bumped when needed so ids always increase."""
    global _last_id
    _last_id = max(int(time.time() * 1000), _last_id + 1)
    return _last_id


# ── Lookup ────────────────────────────────────────────────

def parse_part_page(part_number: str, html: str) -> FetchResult:
    name = extract_name(html)
    return FetchResult(
        part_number=part_number,
        name=name,
        category=categorize(name, html),
        price=extract_price(html),
    )


def fetch_part_data(
    part_number: str,
    config: CatalogConfig | None = None,
    session: requests.Session | None = None,
) -> FetchResult:
    """Look up a part in the catalog. Falls back to defaults on any fetch failure."""
    try:
        html = fetch_html(part_number, config=config, session=session)
    except FetchError as e:
        logger.warning("Catalog lookup for %s failed: %s", part_number, e)
        return FetchResult(part_number=part_number)

    result = parse_part_page(part_number, html)
    logger.debug("Scraped %s: %s / %s / %s", part_number, result.name, result.category, result.price)
    return result


# ── Assembly ──────────────────────────────────────────────

def assemble_part(
    fetched: FetchResult,
    manual_name: str = "",
    manual_price: str = "",
    condition: str = "new",
    image: str | None = None,
) -> PartRecord:
    """
    Merge a lookup result with the user's entries.

    A manual name always wins. A manual price is only used when the catalog
    page had no price.
    """
    if condition not in CONDITIONS:
        raise ValueError(f"Unknown condition: {condition!r}")

    name = manual_name.strip() or fetched.name
    if fetched.price != PRICE_NOT_AVAILABLE:
        price = fetched.price
    else:
        price = manual_price.strip() or PRICE_NOT_AVAILABLE

    return PartRecord(
        id=next_part_id(),
        part_number=fetched.part_number,
        name=name,
        condition=condition,
        category=fetched.category,
        price=price,
        image=image,
    )


def encode_image(data: bytes, mime_type: str = "application/octet-stream") -> str:
    """Encode raw file bytes as a data URI for display."""
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type or 'application/octet-stream'};base64,{payload}"


