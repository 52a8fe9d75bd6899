import pytest
import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=False):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self.json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Stands in for requests.Session; records every URL requested."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.urls = []

    def get(self, url, **kwargs):
        self.urls.append(url)
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def page_session():
    def make(html, **kwargs):
        return FakeSession(FakeResponse({"contents": html}, **kwargs))
    return make


@pytest.fixture
def failing_session():
    return FakeSession(error=requests.ConnectionError("connection refused"))
