from __future__ import annotations

from dataclasses import replace
from enum import Enum
import logging
from typing import TYPE_CHECKING
import requests

from domain_search.domain_dataclasses import LocationFilter, ResidentialSearchRequest, SearchResult
from domain_search.fetchers import DomainPageFetcher, PageFetcher

if TYPE_CHECKING:
    from domain_search.config import ClientConfig


LOGGER = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 200
# Domain returns "Cannot page beyond 1000 records" past this offset.
DEFAULT_CEILING = 1000


class TerminationPolicy(Enum):
    CEILING_FIRST = 'ceiling_first'
    SHORT_PAGE = 'short_page'


class ResidentialSearchRequestBuilder:
    __listing_types = ('Sale', 'Rent', 'Share', 'Sold', 'NewHomes')

    def __init__(self):
        self.__request = ResidentialSearchRequest()

    def listing_type(self, listing_type: str):
        if listing_type not in self.__listing_types:
            raise ValueError(f'listing type must be one of {", ".join(self.__listing_types)}, got {listing_type!r}')
        self.__request.listing_type = listing_type
        return self

    def property_types(self, *property_types):
        self.__request.property_types = list(property_types)
        return self

    def location(
        self,
        state: str,
        suburb: str = '',
        post_code: str = '',
        region: str = '',
        area: str = '',
        include_surrounding_suburbs: bool = False
    ):
        self.__request.locations.append(
            LocationFilter(
                state=state,
                region=region,
                area=area,
                suburb=suburb,
                post_code=post_code,
                include_surrounding_suburbs=include_surrounding_suburbs
            )
        )
        return self

    @staticmethod
    def __validate_range(name: str, min, max):
        if min is not None and max is not None and min > max:
            raise ValueError(f'{name}: min ({min}) is greater than max ({max})')

    def bedrooms(self, min: float | None = None, max: float | None = None):
        self.__validate_range('bedrooms', min, max)
        self.__request.min_bedrooms, self.__request.max_bedrooms = min, max
        return self

    def bathrooms(self, min: float | None = None, max: float | None = None):
        self.__validate_range('bathrooms', min, max)
        self.__request.min_bathrooms, self.__request.max_bathrooms = min, max
        return self

    def carspaces(self, min: int | None = None, max: int | None = None):
        self.__validate_range('carspaces', min, max)
        self.__request.min_carspaces, self.__request.max_carspaces = min, max
        return self

    def price_range(self, min: int | None = None, max: int | None = None):
        self.__validate_range('price', min, max)
        self.__request.min_price, self.__request.max_price = min, max
        return self

    def land_area(self, min: int | None = None, max: int | None = None):
        self.__validate_range('land area', min, max)
        self.__request.min_land_area, self.__request.max_land_area = min, max
        return self

    def build(self) -> ResidentialSearchRequest:
        if not self.__request.locations:
            raise RuntimeError('location must be called at least once before build')
        request = self.__request
        return replace(
            request,
            locations=list(request.locations),
            property_types=list(request.property_types) if request.property_types is not None else None
        )


class SearchAccumulator:
    '''
    Walks the result pages of a single search, starting at page 0, and
    concatenates them in order. Stops on an empty page, a short page, or (with
    `TerminationPolicy.CEILING_FIRST`) before requesting any page that would
    reach past `ceiling` listings. Any `FetchError` aborts the whole search.
    '''

    def __init__(
        self,
        fetcher: PageFetcher,
        page_size: int = DEFAULT_PAGE_SIZE,
        ceiling: int = DEFAULT_CEILING,
        policy: TerminationPolicy = TerminationPolicy.CEILING_FIRST
    ):
        if page_size <= 0:
            raise ValueError(f'page_size must be positive, got {page_size}')
        if ceiling <= 0:
            raise ValueError(f'ceiling must be positive, got {ceiling}')
        self.__fetcher = fetcher
        self.__page_size = page_size
        self.__ceiling = ceiling
        self.__policy = policy


    def search(self, query: ResidentialSearchRequest) -> list[SearchResult]:
        query = replace(query, page_size=self.__page_size, page_number=0)
        listings: list[SearchResult] = []
        pages = 0

        while not self.__ceiling_reached(query):
            listings_page = self.__fetcher.fetch(query)
            pages += 1
            if not listings_page:
                break
            listings.extend(listings_page)
            if len(listings_page) < self.__page_size:
                break
            query.page_number += 1

        if self.__policy is TerminationPolicy.CEILING_FIRST:
            del listings[self.__ceiling:]
        LOGGER.info(
            'search finished with %s listings',
            len(listings),
            extra={'pages': pages, 'policy': self.__policy.value}
        )
        return listings


    def __ceiling_reached(self, query: ResidentialSearchRequest) -> bool:
        # page 0 is always fetched; later pages must end within the ceiling
        if self.__policy is not TerminationPolicy.CEILING_FIRST or query.page_number == 0:
            return False
        return (query.page_number + 1) * self.__page_size > self.__ceiling


class DomainClient:

    def __init__(
        self,
        api_key: str,
        session: requests.Session | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        ceiling: int = DEFAULT_CEILING,
        policy: TerminationPolicy = TerminationPolicy.CEILING_FIRST,
        timeout: float | None = None
    ):
        self.__fetcher = DomainPageFetcher(api_key, session=session, timeout=timeout)
        self.__accumulator = SearchAccumulator(self.__fetcher, page_size=page_size, ceiling=ceiling, policy=policy)

    @classmethod
    def from_config(cls, config: ClientConfig, session: requests.Session | None = None) -> DomainClient:
        return cls(
            config.api_key,
            session=session,
            page_size=config.page_size,
            ceiling=config.max_results,
            policy=config.termination_policy,
            timeout=config.http_timeout_seconds
        )

    def search_residential_page(self, query: ResidentialSearchRequest) -> list[SearchResult]:
        return self.__fetcher.fetch(query)

    def search_residential(self, query: ResidentialSearchRequest) -> list[SearchResult]:
        return self.__accumulator.search(query)
