from urllib.parse import parse_qs, urlparse

import pytest
import requests

from src.config import CatalogConfig
from src.fetcher import FetchError, build_proxy_url, build_target_url, fetch_html

from tests.conftest import FakeResponse, FakeSession


CFG = CatalogConfig()


def test_target_url():
    assert build_target_url(" 12345 ", CFG) == "https://parts.subaru.com/p/12345"


def test_proxy_url_embeds_encoded_target():
    url = build_proxy_url("A/B 1", CFG)
    parsed = urlparse(url)
    assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == CFG.proxy_url
    assert parse_qs(parsed.query)["url"] == ["https://parts.subaru.com/p/A%2FB%201"]


def test_returns_contents(page_session):
    session = page_session("<h1>Oil Filter</h1>")
    assert fetch_html("12345", CFG, session) == "<h1>Oil Filter</h1>"
    assert len(session.urls) == 1


def test_missing_contents_is_empty_text():
    session = FakeSession(FakeResponse({"status": {}}))
    assert fetch_html("1", CFG, session) == ""


def test_empty_part_number_rejected():
    with pytest.raises(ValueError):
        fetch_html("   ", CFG, FakeSession())


def test_transport_error(failing_session):
    with pytest.raises(FetchError) as exc:
        fetch_html("1", CFG, failing_session)
    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_bad_status():
    session = FakeSession(FakeResponse({"contents": "x"}, status_code=503))
    with pytest.raises(FetchError, match="HTTP 503"):
        fetch_html("1", CFG, session)


def test_malformed_json():
    session = FakeSession(FakeResponse(json_error=True))
    with pytest.raises(FetchError, match="Malformed JSON"):
        fetch_html("1", CFG, session)


def test_non_object_envelope():
    session = FakeSession(FakeResponse(["not", "a", "dict"]))
    with pytest.raises(FetchError):
        fetch_html("1", CFG, session)
