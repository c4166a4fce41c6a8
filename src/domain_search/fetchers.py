from abc import ABC, abstractmethod
import logging
import requests

from domain_search.domain_dataclasses import ResidentialSearchRequest, SearchResult
from domain_search.errors import DecodeError, StatusError, TransportError


LOGGER = logging.getLogger(__name__)

SEARCH_URL = 'https://api.domain.com.au/v1/listings/residential/_search'


class PageFetcher(ABC):
    @abstractmethod
    def fetch(self, query: ResidentialSearchRequest) -> list[SearchResult]:
        ...


class DomainPageFetcher(PageFetcher):

    def __init__(
        self,
        api_key: str,
        session: requests.Session | None = None,
        url: str = SEARCH_URL,
        timeout: float | None = None
    ):
        self.__api_key = api_key
        self.__session = session or requests.Session()
        self.__url = url
        self.__timeout = timeout


    def fetch(self, query: ResidentialSearchRequest) -> list[SearchResult]:
        payload = query.to_dict()
        LOGGER.info(
            'making request for page #%s: %s',
            query.page_number,
            self.__url,
            extra={'page_number': query.page_number, 'payload': payload}
        )
        try:
            res = self.__session.post(
                self.__url,
                json=payload,
                headers=self.__headers(),
                timeout=self.__timeout
            )
        except requests.RequestException as e:
            raise TransportError(f'request to {self.__url} failed: {e}') from e

        if res.status_code != 200:
            LOGGER.error(
                'search request rejected',
                extra={'status_code': res.status_code, 'body': res.text}
            )
            raise StatusError(res.status_code, res.reason, res.text)

        listings_page = self.__decode(res)
        LOGGER.info('got %s listings', len(listings_page), extra={'page_number': query.page_number})
        return listings_page


    def __headers(self) -> dict[str, str]:
        return {
            'X-Api-Key': self.__api_key,
            'accept': 'application/json',
            'Content-Type': 'application/json',
        }


    def __decode(self, res: requests.Response) -> list[SearchResult]:
        try:
            data = res.json()
        except ValueError as e:
            raise DecodeError(f"couldn't parse json: {e}") from e

        if not isinstance(data, list):
            raise DecodeError(f'expected a json array of listings, got {type(data).__name__}')

        results: list[SearchResult] = []
        for n, item in enumerate(data):
            if not isinstance(item, dict):
                raise DecodeError(f'listing #{n} is not a json object')
            try:
                results.append(SearchResult.from_dict(item))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise DecodeError(f"couldn't decode listing #{n}: {e}") from e
        return results
