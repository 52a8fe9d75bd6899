"""
fetcher.py — Fetch a catalog page through the CORS proxy.

One GET per call, no retries. Every failure (transport error, bad status,
malformed JSON envelope) is raised as FetchError so callers only handle one type.
"""

from __future__ import annotations

from urllib.parse import quote, urlencode

import requests

from src.config import CatalogConfig, load_config


class FetchError(RuntimeError):
    """The proxy request failed or returned something unusable."""


def build_target_url(part_number: str, config: CatalogConfig | None = None) -> str:
    config = config or load_config()
    return config.catalog_url.format(part_number=quote(part_number.strip(), safe=""))


def build_proxy_url(part_number: str, config: CatalogConfig | None = None) -> str:
    """Proxy URL with the catalog page URL-encoded as a query parameter."""
    config = config or load_config()
    target = build_target_url(part_number, config)
    return f"{config.proxy_url}?{urlencode({config.proxy_param: target})}"


def fetch_html(
    part_number: str,
    config: CatalogConfig | None = None,
    session: requests.Session | None = None,
) -> str:
    """
    Return the raw HTML of the catalog page for a part number.

    Raises ValueError for an empty part number and FetchError for anything
    that goes wrong on the wire.
    """
    if not part_number or not part_number.strip():
        raise ValueError("part_number must not be empty")

    config = config or load_config()
    url = build_proxy_url(part_number, config)
    http = session or requests

    try:
        resp = http.get(url)
    except requests.RequestException as e:
        raise FetchError(f"Request to {url} failed: {e}") from e

    if not resp.ok:
        raise FetchError(f"HTTP {resp.status_code} from {url}")

    try:
        envelope = resp.json()
    except ValueError as e:
        raise FetchError(f"Malformed JSON from {url}: {e}") from e

    if not isinstance(envelope, dict):
        raise FetchError(f"Unexpected envelope type from {url}: {type(envelope).__name__}")

    contents = envelope.get(config.contents_field)
    return str(contents) if contents is not None else ""
