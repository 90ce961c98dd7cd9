"""
Shipment Query Parser

Turns one free-text search-bar sentence, Arabic, English or both mixed,
into a structured filter/sort request for the shipments listing:

1. Relative dates ("last 30 days", "الأسبوع الماضي", "Q3", "fiscal year")
2. Month ranges ("from January to March 2025", "بين يناير ومارس")
3. Single month / year ("March", "2025")
4. Superlative sorts ("lowest price per ton", "أعلى رصيد")
5. Exclusions ("except basmati", "عدا القرفة")
6. Numeric filters on value, containers, weight and balance
   ("value less than 50000", "أكثر من 10 حاويات")
7. Origins ("from India and China", "من الهند والصين")
8. Destinations ("to Iraq and UAE", "إلى العراق والإمارات")
9. Generic-noun removal ("shipments", "بضائع")
10. Residue → one general term or a product list, translated so either
    language matches the stored data

Each stage claims a span of the remaining text and removes it before the
next stage runs, so a number consumed as a year can never come back as a
monetary threshold. The pipeline is a left fold over ``PIPELINE``; every
stage is ``(buffer, parsed, context) -> (buffer, parsed)``.

The parser is total: any string, including empty or garbage, yields a
ParsedQuery (possibly with every field unset).
"""

import logging
import math
import re
from dataclasses import dataclass, replace
from datetime import date
from functools import reduce
from typing import Callable, Dict, List, Optional, Tuple

from loyal.config import config
from core.exceptions import ConfigurationError

from .relative_dates import find_relative_date, month_bounds
from .trade_gazetteers import (
    ARABIC_CONJUNCTION,
    COMPARISON_PHRASES,
    CONJUNCTIONS_EN,
    DESTINATION_KEYWORDS,
    EXCLUSION_KEYWORDS,
    FILLER_WORDS,
    MAX_MODIFIERS,
    META_WORDS,
    MIN_MODIFIERS,
    MONTH_ALTERNATION,
    NUMERIC_KEYWORDS,
    ORIGIN_KEYWORDS,
    QUESTION_PREFIXES,
    SORT_COLUMNS,
    WAW_WORDS,
    get_month_name,
    get_month_number,
    leading_location,
    longest_first,
    phrase_alternation,
    translate_location,
    translate_product,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PARSED QUERY
# =============================================================================

def _number(value: float):
    """Render whole floats as ints (50000.0 → 50000)."""
    return int(value) if float(value).is_integer() else value


@dataclass(frozen=True)
class NumericConstraint:
    """A comparison against one listing quantity, e.g. ``< 50000``."""
    operator: str
    value: float

    def to_dict(self) -> dict:
        return {"operator": self.operator, "value": _number(self.value)}


@dataclass(frozen=True)
class ParsedQuery:
    """
    Structured representation of a parsed shipment search.

    Every field is optional; ``None`` means nothing was extracted for it.
    List-valued fields are tuples and never empty.

    Example:
        Input: "rice and pepper from India to Iraq except basmati"
        Output:
            products: ("رز", "فلفل")
            excluded_products: ("بسمتي",)
            origins: ("الهند",)
            destinations: ("العراق",)
    """
    general_term: Optional[str] = None
    products: Optional[Tuple[str, ...]] = None
    excluded_products: Optional[Tuple[str, ...]] = None
    origins: Optional[Tuple[str, ...]] = None
    destinations: Optional[Tuple[str, ...]] = None

    # A single month/year and a date range are mutually exclusive
    month: Optional[int] = None
    year: Optional[int] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None

    total_value: Optional[NumericConstraint] = None
    container_count: Optional[NumericConstraint] = None
    weight: Optional[NumericConstraint] = None
    balance: Optional[NumericConstraint] = None

    sort_column: Optional[str] = None
    sort_direction: Optional[str] = None

    @property
    def has_date_range(self) -> bool:
        return self.date_from is not None or self.date_to is not None

    @property
    def is_empty(self) -> bool:
        return not self.to_dict()

    def to_dict(self) -> dict:
        """Convert to dictionary for API response (present fields only)."""
        result = {}
        for field_name, wire_name in WIRE_NAMES.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            if isinstance(value, NumericConstraint):
                value = value.to_dict()
            elif isinstance(value, tuple):
                value = list(value)
            result[wire_name] = value
        return result


# Attribute → JSON key, in response order
WIRE_NAMES = {
    "general_term": "generalTerm",
    "products": "products",
    "excluded_products": "excludedProducts",
    "origins": "origins",
    "destinations": "destinations",
    "month": "month",
    "year": "year",
    "date_from": "dateFrom",
    "date_to": "dateTo",
    "total_value": "totalValue",
    "container_count": "containerCount",
    "weight": "weight",
    "balance": "balance",
    "sort_column": "sortColumn",
    "sort_direction": "sortDirection",
}

NUMERIC_FIELDS = ("total_value", "container_count", "weight", "balance")


@dataclass(frozen=True)
class ParseContext:
    """Read-only inputs shared by every stage of one parse."""
    today: date
    window_before: int = 30
    window_after: int = 50
    fiscal_year_start_month: int = 10


Stage = Callable[[str, ParsedQuery, ParseContext], Tuple[str, ParsedQuery]]


# =============================================================================
# TEXT HELPERS
# =============================================================================

def _collapse(text: str) -> str:
    return " ".join(text.split())


def _cut(text: str, spans: List[Tuple[int, int]]) -> str:
    """Remove the given (start, end) spans, merging overlaps."""
    merged: List[List[int]] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])

    pieces, cursor = [], 0
    for start, end in merged:
        pieces.append(text[cursor:start])
        cursor = end
    pieces.append(text[cursor:])
    return _collapse(" ".join(pieces))


def _is_noise(token: str) -> bool:
    word = token.strip(",،.").lower()
    return word in META_WORDS or word in FILLER_WORDS


def drop_meta_words(text: str) -> str:
    """Drop generic nouns and filler tokens ("shipments", "بضائع", "for")."""
    return " ".join(token for token in text.split() if not _is_noise(token))


_EDGE_PUNCTUATION = re.compile(r"^[,،\s]+|[,،\s]+$")

_CONJUNCTION_PATTERNS = {
    phrase: re.compile(rf"\s+{phrase_alternation([phrase])}\s+", re.IGNORECASE)
    for phrase in CONJUNCTIONS_EN
}


def _split_on_waw(clause: str) -> List[str]:
    groups: List[List[str]] = [[]]
    for token in clause.split():
        if token == ARABIC_CONJUNCTION:
            groups.append([])
        elif token.startswith(ARABIC_CONJUNCTION) and token not in WAW_WORDS:
            groups.append([token[len(ARABIC_CONJUNCTION):]])
        else:
            groups[-1].append(token)
    return [" ".join(group) for group in groups if group]


def _split_on_conjunction(clause: str) -> List[str]:
    clause = clause.strip()
    if not clause:
        return []

    if ARABIC_CONJUNCTION in clause:
        parts = _split_on_waw(clause)
        if len(parts) > 1:
            return parts

    for pattern in _CONJUNCTION_PATTERNS.values():
        if pattern.search(clause):
            return [part.strip() for part in pattern.split(clause) if part.strip()]

    return [clause]


# "،" always separates; "," only when it is not a thousands separator
_LIST_SEPARATOR = re.compile(r"\s*(?:،|(?<!\d),|,(?!\d))\s*")


def split_conjunctions(clause: str) -> List[str]:
    """
    Split a clause into items on commas and one level of conjunction.

    Within each comma-separated piece, Arabic "و" (standalone or prefixed
    to a word) wins when it yields more than one item; otherwise the first
    English phrase present ("and", "also", "plus", "as well as") splits on
    all its occurrences.

        "الهند والصين"          → ["الهند", "الصين"]
        "India and China"        → ["India", "China"]
        "rice, pepper and sugar" → ["rice", "pepper", "sugar"]
    """
    items = []
    for piece in _LIST_SEPARATOR.split(clause):
        items.extend(_split_on_conjunction(piece))
    return items


# =============================================================================
# STAGE 1-3: DATES
# =============================================================================

def detect_relative_date(buffer: str, parsed: ParsedQuery, ctx: ParseContext):
    found = find_relative_date(buffer, ctx.today, ctx.fiscal_year_start_month)
    if found is None:
        return buffer, parsed
    parsed = replace(
        parsed,
        date_from=found.date_from.isoformat(),
        date_to=found.date_to.isoformat(),
    )
    return _cut(buffer, [(found.start, found.end)]), parsed


def _month_phrase(month_group: str, year_group: str) -> str:
    return rf"(?P<{month_group}>{MONTH_ALTERNATION})(?!\w)(?:\s+(?P<{year_group}>20\d{{2}})(?!\d))?"


_RANGE_PATTERNS = (
    re.compile(
        r"(?<!\w)(?:from|من)\s+" + _month_phrase("m1", "y1")
        + r"\s+(?:to|until|till|إلى|الى|حتى)\s+" + _month_phrase("m2", "y2"),
        re.IGNORECASE,
    ),
    re.compile(
        r"(?<!\w)(?:between|بين)\s+" + _month_phrase("m1", "y1")
        + r"\s+(?:and\s+|و\s*)" + _month_phrase("m2", "y2"),
        re.IGNORECASE,
    ),
)


def detect_date_range(buffer: str, parsed: ParsedQuery, ctx: ParseContext):
    """
    "from <month> [year] to <month> [year]" / "between <month> and <month>".

    A year given on only one side applies to both. A range that would run
    backwards wraps across the new year instead ("from November to
    February 2025" → 2024-11-01 .. 2025-02-28).
    """
    if parsed.has_date_range:
        return buffer, parsed

    for pattern in _RANGE_PATTERNS:
        match = pattern.search(buffer)
        if not match:
            continue

        start_month = get_month_number(match.group("m1"))
        end_month = get_month_number(match.group("m2"))
        start_year_text, end_year_text = match.group("y1"), match.group("y2")

        if start_year_text and end_year_text:
            start_year, end_year = int(start_year_text), int(end_year_text)
        else:
            start_year = end_year = int(start_year_text or end_year_text or ctx.today.year)

        if (end_year, end_month) < (start_year, start_month):
            if start_year_text and end_year_text:
                start_year, start_month, end_year, end_month = end_year, end_month, start_year, start_month
            elif start_year_text:
                end_year += 1
            else:
                start_year -= 1

        parsed = replace(
            parsed,
            date_from=date(start_year, start_month, 1).isoformat(),
            date_to=month_bounds(end_year, end_month)[1].isoformat(),
        )
        return _cut(buffer, [match.span()]), parsed

    return buffer, parsed


_YEAR = re.compile(r"(?<![\d.,])20\d{2}(?!\d|[.,]\d)")
_MONTH = re.compile(rf"(?<!\w)({MONTH_ALTERNATION})(?!\w)", re.IGNORECASE)

# A year-looking number right after "less than" / "<" or before "tons" is a threshold
_COMPARISON_TAIL = re.compile(
    r"(?:" + "|".join(phrase for phrase, _ in COMPARISON_PHRASES) + r"|<|>|=)\s*\$?\s*$",
    re.IGNORECASE,
)
_UNIT_HEAD = re.compile(
    r"^\s*(?:" + phrase_alternation(["tons", "ton", "containers", "container", "usd", "$",
                                     "طن", "حاويات", "حاوية", "دولار"]) + r")(?!\w)",
    re.IGNORECASE,
)


def detect_month_year(buffer: str, parsed: ParsedQuery, ctx: ParseContext):
    if parsed.has_date_range:
        return buffer, parsed

    for match in _YEAR.finditer(buffer):
        if _COMPARISON_TAIL.search(buffer[:match.start()]) or _UNIT_HEAD.match(buffer[match.end():]):
            continue
        parsed = replace(parsed, year=int(match.group(0)))
        buffer = _cut(buffer, [match.span()])
        break

    match = _MONTH.search(buffer)
    if match:
        parsed = replace(parsed, month=get_month_number(match.group(1)))
        buffer = _cut(buffer, [match.span()])

    return buffer, parsed


# =============================================================================
# STAGE 4: SUPERLATIVE SORT
# =============================================================================

def _build_sort_patterns():
    """(pattern, column, direction) in scan order: ar-min, ar-max, en-min, en-max."""
    patterns = []
    for language in ("ar", "en"):
        prefix = rf"(?:(?:{phrase_alternation(QUESTION_PREFIXES[language])})\s+(?:the\s+)?)?"
        for modifiers, direction in ((MIN_MODIFIERS, "asc"), (MAX_MODIFIERS, "desc")):
            for modifier in modifiers[language]:
                for column, keywords in SORT_COLUMNS:
                    pattern = re.compile(
                        rf"(?<!\w){prefix}{phrase_alternation([modifier])}\s+"
                        rf"(?:{phrase_alternation(keywords[language])})(?!\w)",
                        re.IGNORECASE,
                    )
                    patterns.append((pattern, column, direction))
    return tuple(patterns)


_SORT_PATTERNS = _build_sort_patterns()


def detect_sort(buffer: str, parsed: ParsedQuery, ctx: ParseContext):
    for pattern, column, direction in _SORT_PATTERNS:
        match = pattern.search(buffer)
        if match:
            parsed = replace(parsed, sort_column=column, sort_direction=direction)
            return _cut(buffer, [match.span()]), parsed
    return buffer, parsed


# =============================================================================
# STAGE 5: EXCLUSIONS
# =============================================================================

_EXCLUSION = re.compile(
    r"(?:^|\s)(?:" + phrase_alternation(EXCLUSION_KEYWORDS["ar"] + EXCLUSION_KEYWORDS["en"]) + r")\s+",
    re.IGNORECASE,
)


def extract_exclusions(buffer: str, parsed: ParsedQuery, ctx: ParseContext):
    """
    Everything after the first exclusion keyword is excluded.

        "rice except basmati"        → remaining "rice", excluded ["بسمتي"]
        "من الهند والصين عدا القرفة" → remaining "من الهند والصين", excluded ["cinnamon"]
    """
    match = _EXCLUSION.search(buffer)
    if not match:
        return buffer, parsed

    excluded = []
    for part in split_conjunctions(buffer[match.end():]):
        item = drop_meta_words(part)
        if item:
            excluded.append(translate_product(item))

    if excluded:
        parsed = replace(parsed, excluded_products=tuple(excluded))
    return _collapse(buffer[:match.start()]), parsed


# =============================================================================
# STAGE 6: NUMERIC FILTERS
# =============================================================================

_NUMBER = r"(?P<num>\d+(?:,\d{3})*(?:\.\d+)?)"

_COMPARISONS = tuple(
    (re.compile(rf"(?<!\w)(?:{phrase})\s*\$?\s*{_NUMBER}", re.IGNORECASE), operator)
    for phrase, operator in COMPARISON_PHRASES
) + (
    (re.compile(rf"(?P<op><=|>=|<|>|=)\s*\$?\s*{_NUMBER}"), None),
)


def _keyword_pattern(keyword: str) -> "re.Pattern":
    # Latin keywords are whole words; Arabic and "$" match as substrings
    if re.fullmatch(r"[a-z ]+", keyword):
        return re.compile(rf"(?<!\w){phrase_alternation([keyword])}(?!\w)", re.IGNORECASE)
    return re.compile(re.escape(keyword))


_NUMERIC_FINDERS = tuple(
    (field_name, tuple(_keyword_pattern(keyword) for keyword in keywords))
    for field_name, keywords in NUMERIC_KEYWORDS
)


def _nearest_comparison(buffer: str, keyword: "re.Match", ctx: ParseContext):
    """Comparison starting inside the keyword window, closest to the keyword."""
    low = max(0, keyword.start() - ctx.window_before)
    high = keyword.end() + ctx.window_after

    best, best_rank = None, None
    for pattern, operator in _COMPARISONS:
        for match in pattern.finditer(buffer):
            if not low <= match.start() < high:
                continue
            if match.end() <= keyword.start():
                distance, after = keyword.start() - match.end(), 1
            elif match.start() >= keyword.end():
                distance, after = match.start() - keyword.end(), 0
            else:
                distance, after = 0, 0
            rank = (distance, after, match.start())
            if best_rank is None or rank < best_rank:
                best, best_rank = (match, operator or match.group("op")), rank
    return best


def extract_numeric_filters(buffer: str, parsed: ParsedQuery, ctx: ParseContext):
    """
    Value, containers, weight, balance, in that order.

    A keyword with no comparison nearby stays in the text so it can still
    be searched for as a plain word.
    """
    for field_name, finders in _NUMERIC_FINDERS:
        for finder in finders:
            keyword = finder.search(buffer)
            if not keyword:
                continue

            found = _nearest_comparison(buffer, keyword, ctx)
            if found is None:
                continue

            comparison, operator = found
            try:
                value = float(comparison.group("num").replace(",", ""))
            except ValueError:
                continue
            if not math.isfinite(value):
                continue

            parsed = replace(parsed, **{field_name: NumericConstraint(operator, value)})
            buffer = _cut(buffer, [comparison.span(), keyword.span()])
            break

    return buffer, parsed


# =============================================================================
# STAGE 7-8: ORIGINS AND DESTINATIONS
# =============================================================================

def _clause_keyword_finders(keywords: Dict[str, List[str]]):
    """Whitespace-bounded keyword patterns, Arabic list first, longest first."""
    return tuple(
        re.compile(rf"(?<!\S){phrase_alternation([keyword])}(?!\S)", re.IGNORECASE)
        for language in ("ar", "en")
        for keyword in longest_first(keywords[language])
    )


_ORIGIN_FINDERS = _clause_keyword_finders(ORIGIN_KEYWORDS)
_DESTINATION_FINDERS = _clause_keyword_finders(DESTINATION_KEYWORDS)
_ANY_DESTINATION = re.compile(
    r"(?<!\S)(?:" + phrase_alternation(DESTINATION_KEYWORDS["ar"] + DESTINATION_KEYWORDS["en"]) + r")(?!\S)",
    re.IGNORECASE,
)


# "من" closing "أقل من" / "أكثر من" belongs to the comparison, not an origin clause
_COMPARISON_END = re.compile(
    r"(?:" + "|".join(phrase for phrase, _ in COMPARISON_PHRASES) + r")$",
    re.IGNORECASE,
)


def _first_keyword(buffer: str, finders):
    for finder in finders:
        for match in finder.finditer(buffer):
            if not _COMPARISON_END.search(buffer[:match.end()]):
                return match
    return None


def extract_origins(buffer: str, parsed: ParsedQuery, ctx: ParseContext):
    """
    "from India and China to Iraq" → origins ["الهند", "الصين"].

    The origin clause ends where the next destination keyword starts.
    """
    keyword = _first_keyword(buffer, _ORIGIN_FINDERS)
    if not keyword:
        return buffer, parsed

    after = buffer[keyword.end():]
    stop = _ANY_DESTINATION.search(after)
    clause, rest = (after[:stop.start()], after[stop.start():]) if stop else (after, "")

    origins = []
    for part in split_conjunctions(clause):
        name = drop_meta_words(part)
        if name:
            origins.append(translate_location(name))

    if origins:
        parsed = replace(parsed, origins=tuple(origins))
    return _collapse(buffer[:keyword.start()] + " " + rest), parsed


def _destination_head(part: str) -> Tuple[Optional[str], str]:
    """Split a destination part into its location and the words after it."""
    tokens = part.split()
    while tokens and _is_noise(tokens[0]):
        tokens.pop(0)
    if not tokens:
        return None, ""

    text = " ".join(tokens)
    location = leading_location(text) or tokens[0]
    return location, text[len(location):].strip()


def extract_destinations(buffer: str, parsed: ParsedQuery, ctx: ParseContext):
    """
    "to Iraq and UAE" → destinations ["العراق", "الإمارات"].

    Each part keeps only its leading location; trailing words go back to
    the buffer ("to Mersin pepper" → destination "مرسين", residue "pepper").
    """
    keyword = _first_keyword(buffer, _DESTINATION_FINDERS)
    if not keyword:
        return buffer, parsed

    destinations, leftovers = [], []
    for part in split_conjunctions(buffer[keyword.end():]):
        location, leftover = _destination_head(part)
        if location:
            destinations.append(translate_location(location))
        if leftover:
            leftovers.append(leftover)

    if destinations:
        parsed = replace(parsed, destinations=tuple(destinations))
    return _collapse(" ".join([buffer[:keyword.start()]] + leftovers)), parsed


# =============================================================================
# STAGE 9-10: RESIDUE
# =============================================================================

def strip_meta_words(buffer: str, parsed: ParsedQuery, ctx: ParseContext):
    return drop_meta_words(buffer), parsed


def classify_residue(buffer: str, parsed: ParsedQuery, ctx: ParseContext):
    """One surviving term → general_term, two or more → products."""
    text = _EDGE_PUNCTUATION.sub("", buffer)
    if not text:
        return "", parsed

    excluded = {term.lower() for term in parsed.excluded_products or ()}
    terms = []
    for part in split_conjunctions(text):
        part = _EDGE_PUNCTUATION.sub("", part)
        if not part:
            continue
        term = translate_product(part)
        if term.lower() not in excluded:
            terms.append(term)

    if len(terms) > 1:
        parsed = replace(parsed, products=tuple(terms))
    elif terms:
        parsed = replace(parsed, general_term=terms[0])
    return "", parsed


PIPELINE: Tuple[Stage, ...] = (
    detect_relative_date,
    detect_date_range,
    detect_month_year,
    detect_sort,
    extract_exclusions,
    extract_numeric_filters,
    extract_origins,
    extract_destinations,
    strip_meta_words,
    classify_residue,
)


# =============================================================================
# QUERY PARSER
# =============================================================================

class QueryParser:
    """
    Bilingual shipment search parser.

    Stateless apart from its options; one instance is shared process-wide.

    Example:
        >>> parser = QueryParser()
        >>> parser.parse("spices from Egypt to Iraq").to_dict()
        {'generalTerm': 'بهار', 'origins': ['مصر'], 'destinations': ['العراق']}
    """

    STAGES = PIPELINE

    def __init__(
        self,
        window_before: Optional[int] = None,
        window_after: Optional[int] = None,
        fiscal_year_start_month: Optional[int] = None,
    ):
        """
        Args:
            window_before: Characters before a numeric keyword searched for a comparison
            window_after: Characters after a numeric keyword searched for a comparison
            fiscal_year_start_month: First month (1-12) of the fiscal year
        """
        search = config.search
        self.window_before = search.numeric_window_before if window_before is None else window_before
        self.window_after = search.numeric_window_after if window_after is None else window_after
        self.fiscal_year_start_month = (
            search.fiscal_year_start_month if fiscal_year_start_month is None else fiscal_year_start_month
        )

        if self.window_before < 0:
            raise ConfigurationError("Numeric window must not be negative", setting="window_before")
        if self.window_after < 0:
            raise ConfigurationError("Numeric window must not be negative", setting="window_after")
        if not 1 <= self.fiscal_year_start_month <= 12:
            raise ConfigurationError(
                "Fiscal year start month must be between 1 and 12",
                setting="fiscal_year_start_month",
            )

    def parse(self, query: Optional[str], today: Optional[date] = None) -> ParsedQuery:
        """
        Parse a search sentence.

        Args:
            query: Raw search-bar text; None and blank strings give an empty result
            today: Anchor for relative dates (defaults to the local date)
        """
        text = _collapse(query or "")
        if not text:
            return ParsedQuery()

        ctx = ParseContext(
            today=today or date.today(),
            window_before=self.window_before,
            window_after=self.window_after,
            fiscal_year_start_month=self.fiscal_year_start_month,
        )
        _, parsed = reduce(
            lambda state, stage: stage(state[0], state[1], ctx),
            self.STAGES,
            (text, ParsedQuery()),
        )

        logger.debug(f"Parsed search {text!r} → {', '.join(parsed.to_dict()) or 'nothing'}")
        return parsed


# =============================================================================
# DISPLAY HELPERS
# =============================================================================

def format_parsed_search(parsed: ParsedQuery, language: str = "ar") -> str:
    """
    Render a parse back into a readable phrase for the "searching for…" hint.

        ParsedQuery(general_term="rice", origins=("الهند",)), "en"
            → "rice from الهند"
    """
    arabic = language == "ar"
    joiner = " و " if arabic else " and "
    parts = []

    if parsed.general_term:
        parts.append(parsed.general_term)
    if parsed.products:
        parts.append(joiner.join(parsed.products))
    if parsed.origins:
        parts.append(("من " if arabic else "from ") + joiner.join(parsed.origins))
    if parsed.destinations:
        parts.append(("إلى " if arabic else "to ") + joiner.join(parsed.destinations))
    if parsed.excluded_products:
        parts.append(("عدا " if arabic else "except ") + joiner.join(parsed.excluded_products))
    if parsed.month:
        parts.append(get_month_name(parsed.month, language))
    if parsed.year:
        parts.append(str(parsed.year))
    if parsed.has_date_range:
        parts.append(f"{parsed.date_from or '…'} → {parsed.date_to or '…'}")

    return " ".join(parts)


SEARCH_EXAMPLES = {
    "ar": [
        "بهار من الهند والصين عدا القرفة",
        "رز وفلفل من مصر",
        "أدنى سعر تثبيت فلفل",
        "شحنات إلى العراق والإمارات",
        "شحنات إلى مرسين القيمة أقل من 50000",
        "أعلى رصيد متبقي",
    ],
    "en": [
        "spices from India and China except cinnamon",
        "rice and pepper from Egypt",
        "lowest price per ton for pepper",
        "shipments to Iraq and UAE",
        "shipments to Mersin value less than 50000",
        "highest remaining balance",
    ],
}


def get_search_examples(language: str = "ar") -> List[str]:
    """Example queries shown under the search bar."""
    return list(SEARCH_EXAMPLES.get(language, SEARCH_EXAMPLES["ar"]))


# Singleton instance
query_parser = QueryParser()
