from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

from dotenv import load_dotenv

from domain_search.listing_search import TerminationPolicy


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f'Invalid integer for {name}: {value}')


def _get_optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    try:
        return float(value)
    except ValueError:
        raise ValueError(f'Invalid float for {name}: {value}')


def _get_policy(name: str, default: TerminationPolicy) -> TerminationPolicy:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return TerminationPolicy(value.strip().lower())
    except ValueError:
        choices = ', '.join(p.value for p in TerminationPolicy)
        raise ValueError(f'Invalid termination policy for {name}: {value} (expected one of {choices})')


@dataclass(slots=True)
class ClientConfig:
    api_key: str
    page_size: int = 200
    max_results: int = 1000
    termination_policy: TerminationPolicy = TerminationPolicy.CEILING_FIRST
    http_timeout_seconds: Optional[float] = None
    log_level: str = 'INFO'


def load_config() -> ClientConfig:
    load_dotenv()
    return ClientConfig(
        api_key=os.getenv('DOMAIN_API_KEY', ''),
        page_size=_get_int('DOMAIN_PAGE_SIZE', 200),
        max_results=_get_int('DOMAIN_MAX_RESULTS', 1000),
        termination_policy=_get_policy('DOMAIN_TERMINATION_POLICY', TerminationPolicy.CEILING_FIRST),
        http_timeout_seconds=_get_optional_float('DOMAIN_HTTP_TIMEOUT'),
        log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    )
