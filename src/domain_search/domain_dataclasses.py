from dataclasses import dataclass, field
from dataclasses_json import LetterCase, Undefined, config, dataclass_json


def _is_none(value) -> bool:
    return value is None


def _optional(default=None):
    '''
    Field that is left out of the request body entirely while unset, so the API
    applies no filter instead of filtering on null.
    '''
    return field(default=default, metadata=config(exclude=_is_none))


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class LocationFilter:
    state: str = ''
    region: str = ''
    area: str = ''
    suburb: str = ''
    post_code: str = ''
    include_surrounding_suburbs: bool = False


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class ResidentialSearchRequest:
    listing_type: str = 'Sale'
    property_types: list[str] | None = _optional()
    locations: list[LocationFilter] = field(default_factory=list)
    min_bedrooms: float | None = _optional()
    max_bedrooms: float | None = _optional()
    min_bathrooms: float | None = _optional()
    max_bathrooms: float | None = _optional()
    min_carspaces: int | None = _optional()
    max_carspaces: int | None = _optional()
    min_price: int | None = _optional()
    max_price: int | None = _optional()
    min_land_area: int | None = _optional()
    max_land_area: int | None = _optional()
    page_size: int | None = _optional()
    page_number: int = 0


# https://developer.domain.com.au/docs/latest/apis/pkg_agents_listings/references/listings_detailedresidentialsearch
@dataclass_json(letter_case=LetterCase.CAMEL, undefined=Undefined.EXCLUDE)
@dataclass
class PriceDetails:
    display_price: str | None = None
    price: int | None = None
    price_from: int | None = None
    price_to: int | None = None


@dataclass_json(letter_case=LetterCase.CAMEL, undefined=Undefined.EXCLUDE)
@dataclass
class Advertiser:
    type: str | None = None
    id: int | None = None
    name: str | None = None


@dataclass_json(letter_case=LetterCase.CAMEL, undefined=Undefined.EXCLUDE)
@dataclass
class PropertyDetails:
    state: str | None = None
    property_type: str | None = None
    bathrooms: float | None = None
    bedrooms: float | None = None
    carspaces: int | None = None
    suburb: str | None = None
    postcode: str | None = None
    display_address: str | None = None
    land_area: float | None = None
    latitude: float | None = None
    longitude: float | None = None


@dataclass_json(letter_case=LetterCase.CAMEL, undefined=Undefined.EXCLUDE)
@dataclass
class PropertyListing:
    id: int | None = None
    listing_type: str | None = None
    headline: str | None = None
    summary_description: str | None = None
    listing_slug: str | None = None
    price_details: PriceDetails | None = None
    property_details: PropertyDetails | None = None
    advertiser: Advertiser | None = None


@dataclass_json(letter_case=LetterCase.CAMEL, undefined=Undefined.EXCLUDE)
@dataclass
class SearchResult:
    type: str | None = None
    listing: PropertyListing | None = None
