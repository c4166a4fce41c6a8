from domain_search.config import ClientConfig
from domain_search.listing_search import DomainClient, ResidentialSearchRequestBuilder, TerminationPolicy

from fakes import FakeResponse, FakeSession


def _page(start, count):
    return [{"type": "PropertyListing", "listing": {"id": n}} for n in range(start, start + count)]


def _query():
    return ResidentialSearchRequestBuilder().listing_type("Rent").location("NSW", suburb="Pyrmont").build()


def test_search_residential_walks_pages():
    session = FakeSession(FakeResponse(body=_page(0, 2)), FakeResponse(body=_page(2, 1)))
    client = DomainClient("secret", session=session, page_size=2)

    listings = client.search_residential(_query())

    assert [r.listing.id for r in listings] == [0, 1, 2]
    assert [kwargs["json"]["pageNumber"] for _, kwargs in session.calls] == [0, 1]
    assert {kwargs["json"]["pageSize"] for _, kwargs in session.calls} == {2}


def test_search_residential_page_sends_one_request():
    session = FakeSession(FakeResponse(body=_page(0, 2)))
    client = DomainClient("secret", session=session)

    assert len(client.search_residential_page(_query())) == 2
    assert len(session.calls) == 1


def test_from_config():
    session = FakeSession(*(FakeResponse(body=_page(n * 3, 3)) for n in range(4)))
    config = ClientConfig(
        api_key="secret",
        page_size=3,
        max_results=6,
        termination_policy=TerminationPolicy.CEILING_FIRST,
        http_timeout_seconds=1.5,
    )

    listings = DomainClient.from_config(config, session=session).search_residential(_query())

    assert len(listings) == 6
    assert len(session.calls) == 2
    assert session.calls[0][1]["timeout"] == 1.5
    assert session.calls[0][1]["headers"]["X-Api-Key"] == "secret"
