import argparse
import logging
import sys

from domain_search.config import load_config
from domain_search.errors import FetchError
from domain_search.listing_search import DomainClient, ResidentialSearchRequestBuilder
from domain_search.logging_config import configure_logging


LOGGER = logging.getLogger('domain_search')


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Search Domain rental listings in Pyrmont, NSW and print their ids',
    )
    parser.add_argument(
        '--api-key',
        default=None,
        help='Domain API key (defaults to DOMAIN_API_KEY)',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level (DEBUG, INFO, etc.)',
    )
    parser.add_argument(
        '--log-json',
        action='store_true',
        help='Emit logs as JSON lines',
    )
    args = parser.parse_args(argv)

    config = load_config()
    if args.api_key:
        config.api_key = args.api_key
    configure_logging(args.log_level or config.log_level, json_output=args.log_json)

    if not config.api_key:
        LOGGER.error('no API key given; pass --api-key or set DOMAIN_API_KEY')
        return 1

    client = DomainClient.from_config(config)
    query = ResidentialSearchRequestBuilder() \
        .listing_type('Rent') \
        .location('NSW', suburb='Pyrmont', include_surrounding_suburbs=False) \
        .build()

    try:
        listings = client.search_residential(query)
    except FetchError as e:
        LOGGER.error('error searching: %s', e)
        return 1

    for result in listings:
        if result.listing is not None:
            print(result.listing.id)
    return 0


if __name__ == '__main__':
    sys.exit(main())
