from domain_search.domain_dataclasses import (
    Advertiser,
    LocationFilter,
    PriceDetails,
    PropertyDetails,
    PropertyListing,
    ResidentialSearchRequest,
    SearchResult
)
from domain_search.errors import DecodeError, FetchError, StatusError, TransportError
from domain_search.fetchers import SEARCH_URL, DomainPageFetcher, PageFetcher
from domain_search.listing_search import (
    DomainClient,
    ResidentialSearchRequestBuilder,
    SearchAccumulator,
    TerminationPolicy
)
