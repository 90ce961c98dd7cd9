"""
Listing Query Builder

Merges a ParsedQuery with the filter widgets the user set by hand and
produces the query parameters of the shipments listing endpoint
(``GET /api/shipments?pol=…&totalValueOp=<&totalValue=50000&sortBy=eta``).

Precedence:
- a manual numeric operator or value beats the parsed one, per part
- manual date pickers beat a parsed date range
- month/year are only forwarded (as etaMonth/etaYear) with no range at all
- parsed origins/destinations/products beat the quick filters
- a parsed sort beats the manual sort until the user clicks a column again
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .query_parser import ParsedQuery, NUMERIC_FIELDS

logger = logging.getLogger(__name__)

DEFAULT_SORT_COLUMN = "eta"
DEFAULT_SORT_DIRECTION = "asc"

# ParsedQuery numeric field → listing API parameter
NUMERIC_PARAMS = {
    "total_value": "totalValue",
    "container_count": "containerCount",
    "weight": "weight",
    "balance": "balance",
}


@dataclass(frozen=True)
class ManualFilters:
    """Filter widgets set explicitly in the listing UI."""

    # Numeric widgets: operator and value per quantity
    total_value_op: Optional[str] = None
    total_value: Optional[float] = None
    container_count_op: Optional[str] = None
    container_count: Optional[float] = None
    weight_op: Optional[str] = None
    weight: Optional[float] = None
    balance_op: Optional[str] = None
    balance: Optional[float] = None

    # Date pickers
    date_from: Optional[str] = None
    date_to: Optional[str] = None

    # Quick filters
    origin: Optional[str] = None
    destination: Optional[str] = None
    product: Optional[str] = None
    status: Optional[str] = None

    # Column-header sort; sort_touched means it was clicked after the last parse
    sort_column: Optional[str] = None
    sort_direction: Optional[str] = None
    sort_touched: bool = False

    page: int = 1
    limit: int = 20

    @property
    def has_date_range(self) -> bool:
        return bool(self.date_from or self.date_to)


def _join(values) -> Optional[str]:
    return ",".join(values) if values else None


def _number(value: float):
    return int(value) if float(value).is_integer() else value


def build_listing_params(parsed: ParsedQuery, manual: Optional[ManualFilters] = None,
                         max_page_size: int = 100) -> Dict[str, object]:
    """
    Build listing API parameters. Absent values are left out.

    Example:
        parsed = query_parser.parse("rice from India value less than 50000")
        build_listing_params(parsed, ManualFilters(total_value=20000))
        → {"page": 1, "limit": 20, "search": "رز", "pol": "الهند",
           "totalValueOp": "<", "totalValue": 20000,
           "sortBy": "eta", "sortDir": "asc"}
    """
    manual = manual or ManualFilters()

    params: Dict[str, object] = {
        "page": max(1, manual.page),
        "limit": min(max(1, manual.limit), max_page_size),
        "search": parsed.general_term,
        "pol": _join(parsed.origins) or manual.origin,
        "pod": _join(parsed.destinations) or manual.destination,
        "product": _join(parsed.products) or manual.product,
        "excludeProduct": _join(parsed.excluded_products),
        "status": manual.status,
    }

    # ── Dates ─────────────────────────────────────
    if manual.has_date_range:
        params["etaFrom"] = manual.date_from
        params["etaTo"] = manual.date_to
    elif parsed.has_date_range:
        params["etaFrom"] = parsed.date_from
        params["etaTo"] = parsed.date_to
    else:
        params["etaMonth"] = parsed.month
        params["etaYear"] = parsed.year

    # ── Numeric filters ───────────────────────────
    for field_name in NUMERIC_FIELDS:
        name = NUMERIC_PARAMS[field_name]
        constraint = getattr(parsed, field_name)
        manual_op = getattr(manual, f"{field_name}_op")
        manual_value = getattr(manual, field_name)

        operator = manual_op or (constraint.operator if constraint else None)
        value = manual_value if manual_value is not None else (constraint.value if constraint else None)
        if operator and value is not None:
            params[f"{name}Op"] = operator
            params[name] = _number(value)

    # ── Sort ──────────────────────────────────────
    if parsed.sort_column and not manual.sort_touched:
        params["sortBy"] = parsed.sort_column
        params["sortDir"] = parsed.sort_direction or DEFAULT_SORT_DIRECTION
    else:
        params["sortBy"] = manual.sort_column or DEFAULT_SORT_COLUMN
        params["sortDir"] = manual.sort_direction or DEFAULT_SORT_DIRECTION

    result = {key: value for key, value in params.items() if value is not None and value != ""}
    logger.debug(f"Listing params: {sorted(result)}")
    return result
