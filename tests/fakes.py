import json

import requests

from domain_search.domain_dataclasses import PropertyListing, SearchResult
from domain_search.errors import FetchError, StatusError
from domain_search.fetchers import PageFetcher


def make_results(count, start=0):
    return [SearchResult(type="PropertyListing", listing=PropertyListing(id=n)) for n in range(start, start + count)]


class FakeFetcher(PageFetcher):
    """Serves `total` listings in pages of `page_size`, optionally forever."""

    def __init__(self, total=None, always=None, fail_on_page=None, offset_limit=None):
        self.total = total
        self.always = always
        self.fail_on_page = fail_on_page
        self.offset_limit = offset_limit
        self.pages_requested = []
        self.page_sizes = []

    def fetch(self, query):
        self.pages_requested.append(query.page_number)
        self.page_sizes.append(query.page_size)
        if self.fail_on_page == query.page_number:
            raise FetchError("boom")
        if self.offset_limit is not None and (query.page_number + 1) * query.page_size > self.offset_limit:
            raise StatusError(400, "Bad Request", "Cannot page beyond 1000 records")
        start = query.page_number * query.page_size
        if self.always is not None:
            return make_results(self.always, start)
        count = max(0, min(query.page_size, self.total - start))
        return make_results(count, start)


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self.text = text if text is not None else json.dumps(body)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    def __init__(self, *responses, error=None):
        self.responses = list(responses)
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


CONNECTION_ERROR = requests.ConnectionError("connection refused")
