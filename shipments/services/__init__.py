# Shipment search services
from .query_parser import (
    QueryParser,
    ParsedQuery,
    NumericConstraint,
    query_parser,
    format_parsed_search,
    get_search_examples,
)
from .listing_query import ManualFilters, build_listing_params

__all__ = [
    'QueryParser',
    'ParsedQuery',
    'NumericConstraint',
    'query_parser',
    'format_parsed_search',
    'get_search_examples',
    'ManualFilters',
    'build_listing_params',
]
