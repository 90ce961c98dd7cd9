# Finance search services
from .finance_parser import (
    FinanceSearchParser,
    ParsedFinanceSearch,
    finance_parser,
    get_finance_search_examples,
)

__all__ = [
    'FinanceSearchParser',
    'ParsedFinanceSearch',
    'finance_parser',
    'get_finance_search_examples',
]
