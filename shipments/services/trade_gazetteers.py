"""
Trade Gazetteers

Bilingual (Arabic / English) lexicons for the shipment search bar.
Every table here is static and loaded once at import; lookups never fail,
a miss just returns the input unchanged.

Entity Types:
- ARABIC_MONTHS / ENGLISH_MONTHS: month names and synonyms → 1..12
- SORT_COLUMNS: listing column → keywords used after "lowest"/"أعلى"
- NUMERIC_KEYWORDS: filterable quantity → keywords that anchor a comparison
- COMPARISON_PHRASES: operator phrases ("less than", "أقل من", "<=")
- ORIGIN / DESTINATION / EXCLUSION / CONJUNCTION keyword lists
- META_WORDS: generic nouns ("shipments", "بضائع") dropped from the residue
- PRODUCTS_AR_EN / PRODUCTS_EN_AR: product names in both directions
- LOCATIONS_EN_AR: countries and ports, English → Arabic
"""

import re
from typing import Dict, Iterable, List, Optional, Tuple


# =============================================================================
# MONTHS
# =============================================================================
ARABIC_MONTHS = {
    # Egyptian / Gulf names, Levantine names, "month N"
    "يناير": 1, "كانون الثاني": 1, "شهر 1": 1,
    "فبراير": 2, "شباط": 2, "شهر 2": 2,
    "مارس": 3, "آذار": 3, "اذار": 3, "شهر 3": 3,
    "أبريل": 4, "ابريل": 4, "نيسان": 4, "شهر 4": 4,
    "مايو": 5, "أيار": 5, "ايار": 5, "شهر 5": 5,
    "يونيو": 6, "حزيران": 6, "شهر 6": 6,
    "يوليو": 7, "تموز": 7, "شهر 7": 7,
    "أغسطس": 8, "اغسطس": 8, "آب": 8, "شهر 8": 8,
    "سبتمبر": 9, "أيلول": 9, "ايلول": 9, "شهر 9": 9,
    "أكتوبر": 10, "اكتوبر": 10, "تشرين الأول": 10, "تشرين الاول": 10, "شهر 10": 10,
    "نوفمبر": 11, "تشرين الثاني": 11, "شهر 11": 11,
    "ديسمبر": 12, "كانون الأول": 12, "كانون الاول": 12, "شهر 12": 12,
}

ENGLISH_MONTHS = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sep": 9, "sept": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}


# =============================================================================
# SORT COLUMNS — "أدنى سعر تثبيت", "earliest ETA"
# =============================================================================
# Order matters: the first column whose keyword follows the modifier wins.
SORT_COLUMNS = (
    ("fixed_price_usd_per_ton", {
        "ar": ["سعر تثبيت", "سعر الطن", "ثمن الطن", "سعر", "ثمن"],
        "en": ["price per ton", "price", "cost per ton", "cost", "unit price"],
    }),
    ("total_value_usd", {
        "ar": ["القيمة الإجمالية", "القيمة", "المبلغ الإجمالي", "الإجمالي"],
        "en": ["total value", "total amount", "total cost", "value"],
    }),
    ("weight_ton", {
        "ar": ["الوزن", "وزن", "طن"],
        "en": ["weight", "tons", "tonnage"],
    }),
    ("container_count", {
        "ar": ["عدد الحاويات", "حاويات", "عدد حاويات"],
        "en": ["container count", "containers", "number of containers"],
    }),
    ("balance_value_usd", {
        "ar": ["الرصيد المتبقي", "الرصيد", "المتبقي", "الباقي", "رصيد متبقي", "رصيد"],
        "en": ["remaining balance", "outstanding balance", "balance", "remaining", "outstanding", "due"],
    }),
    ("eta", {
        "ar": ["تاريخ الوصول", "موعد الوصول", "وصول", "تاريخ"],
        "en": ["eta", "arrival date", "arrival", "date"],
    }),
)

MIN_MODIFIERS = {
    "ar": ["أدنى", "ادنى", "أقل", "اقل", "أرخص", "ارخص", "أصغر", "اصغر", "أقرب", "اقرب"],
    "en": ["lowest", "minimum", "min", "cheapest", "smallest", "earliest", "nearest", "least"],
}

MAX_MODIFIERS = {
    "ar": ["أعلى", "اعلى", "أكثر", "اكثر", "أغلى", "اغلى", "أكبر", "اكبر", "أبعد", "ابعد"],
    "en": ["highest", "maximum", "max", "most expensive", "largest", "latest", "furthest", "most"],
}

QUESTION_PREFIXES = {
    "ar": ["ما هو", "ماهو"],
    "en": ["what is", "what's"],
}


# =============================================================================
# NUMERIC FILTERS — "value less than 50000", "أكثر من 10 حاويات"
# =============================================================================
# Quantities are tried in this order; ETA is sortable but not filterable.
NUMERIC_KEYWORDS = (
    ("total_value", [
        "total value", "total amount", "value", "total", "price", "cost", "amount",
        "القيمة", "الإجمالي", "المبلغ", "السعر", "$", "دولار",
    ]),
    ("container_count", ["containers", "container", "حاويات", "حاوية"]),
    ("weight", ["tons", "ton", "weight", "طن", "الوزن"]),
    ("balance", ["balance", "remaining", "due", "الرصيد", "المتبقي"]),
)

# (phrase pattern, operator). Arabic phrases accept hamza and bare alif.
COMPARISON_PHRASES = (
    (r"less\s+than|under|below", "<"),
    (r"greater\s+than|more\s+than|over|above", ">"),
    (r"at\s+least|minimum|min", ">="),
    (r"at\s+most|maximum|max", "<="),
    (r"exactly|equal\s+to|equals", "="),
    (r"[أا]قل\s+من", "<"),
    (r"[أا]كثر\s+من|[أا]كبر\s+من", ">"),
    (r"(?:على|علي)\s+ال[أا]قل", ">="),
    (r"(?:على|علي)\s+ال[أا]كثر", "<="),
    (r"يساوي", "="),
)

# Raw symbols; two-character operators first
COMPARISON_SYMBOLS = ("<=", ">=", "<", ">", "=")


# =============================================================================
# CLAUSE KEYWORDS
# =============================================================================
ORIGIN_KEYWORDS = {
    "ar": ["من", "قادم من", "قادمة من", "مصدره", "منشأ"],
    "en": ["from", "coming from", "origin", "shipped from", "departing"],
}

DESTINATION_KEYWORDS = {
    "ar": ["إلى", "الى", "إلي", "متجه", "متجهة", "وجهة", "ذاهب", "ذاهبة"],
    "en": ["to", "going to", "headed to", "destination", "arriving", "bound for"],
}

EXCLUSION_KEYWORDS = {
    "ar": ["عدا", "ما عدا", "باستثناء", "غير", "ماعدا", "ليس", "بدون"],
    "en": ["except", "excluding", "not", "without", "but not", "exclude"],
}

# Arabic uses the prefix "و" instead of a word list
CONJUNCTIONS_EN = ["and", "also", "plus", "as well as"]
ARABIC_CONJUNCTION = "و"


# =============================================================================
# META WORDS — generic nouns that never narrow a search
# =============================================================================
META_WORDS = frozenset({
    # Arabic
    "شحنات", "شحنة", "منتجات", "منتج", "بضائع", "بضاعة", "سلع", "سلعة",
    "عقود", "عقد", "طلبات", "طلب",
    # English
    "shipments", "shipment", "products", "product", "goods", "cargo",
    "containers", "container", "orders", "order", "items", "item",
})

# Conversational filler left behind once keywords are consumed
FILLER_WORDS = frozenset({
    "for", "of", "the", "in", "on", "at", "with", "by", "all", "show", "me",
    "find", "list", "get", "please",
    "في", "عن", "كل", "لي", "اعرض", "أعرض", "ابحث", "أظهر", "اظهر",
})


# =============================================================================
# PRODUCTS
# =============================================================================
PRODUCTS_EN_AR = {
    # Spices
    "spices": "بهار", "spice": "بهار", "pepper": "فلفل",
    "black pepper": "فلفل أسود", "white pepper": "فلفل أبيض",
    "cumin": "كمون", "coriander": "كزبرة", "turmeric": "كركم", "cardamom": "هيل",
    "cinnamon": "قرفة", "cloves": "قرنفل", "nutmeg": "جوزة الطيب", "ginger": "زنجبيل",
    "saffron": "زعفران", "paprika": "فلفل حلو", "chili": "فلفل حار", "fennel": "شمر",
    "anise": "ينسون", "bay leaf": "ورق غار", "thyme": "زعتر", "oregano": "أوريجانو",
    "basil": "ريحان", "mint": "نعناع", "parsley": "بقدونس",
    # Grains & legumes
    "rice": "رز", "basmati": "بسمتي", "jasmine rice": "رز ياسمين", "wheat": "قمح",
    "flour": "طحين", "lentils": "عدس", "chickpeas": "حمص", "beans": "فاصوليا",
    "corn": "ذرة", "barley": "شعير", "oats": "شوفان", "quinoa": "كينوا",
    # Wood & timber
    "merbau": "ميرباو", "teak": "خشب الساج", "oak": "خشب البلوط",
    "pine": "خشب الصنوبر", "timber": "أخشاب", "wood": "خشب",
    # Other
    "sugar": "سكر", "salt": "ملح", "oil": "زيت", "olive oil": "زيت زيتون",
    "vegetable oil": "زيت نباتي", "tea": "شاي", "coffee": "قهوة", "dates": "تمر",
    "nuts": "مكسرات", "almonds": "لوز", "cashews": "كاجو", "pistachios": "فستق",
    "walnuts": "جوز", "sesame": "سمسم", "tahini": "طحينة", "honey": "عسل",
}

PRODUCTS_AR_EN = {
    # Spices
    "بهار": "spice", "بهارات": "spices", "فلفل": "pepper",
    "فلفل أسود": "black pepper", "فلفل اسود": "black pepper",
    "فلفل أبيض": "white pepper", "فلفل ابيض": "white pepper",
    "كمون": "cumin", "كزبرة": "coriander", "كركم": "turmeric", "هيل": "cardamom",
    "قرفة": "cinnamon", "قرنفل": "cloves", "زنجبيل": "ginger", "زعفران": "saffron",
    "شمر": "fennel", "ينسون": "anise", "زعتر": "thyme", "ريحان": "basil", "نعناع": "mint",
    # Grains & seeds
    "أرز": "rice", "ارز": "rice", "رز": "rice", "بسمتي": "basmati", "قمح": "wheat",
    "طحين": "flour", "عدس": "lentils", "حمص": "chickpeas", "فاصوليا": "beans",
    "فاصولياء": "beans", "ذرة": "corn", "شعير": "barley", "شوفان": "oats",
    "سمسم": "sesame", "بذور سمسم": "sesame seeds",
    "بذور سمسم أبيض": "white sesame seeds", "بذور سمسم ابيض": "white sesame seeds",
    "بذور دوار الشمس": "sunflower seeds", "بذور اليقطين": "pumpkin seeds",
    "بذور الكناري": "canary seed",
    # Sugar & sweeteners
    "سكر": "sugar", "سكر أبيض": "white sugar", "سكر ابيض": "white sugar",
    "سكر بني": "brown sugar", "سكر مكعبات": "lump sugar", "سكر حبيبي": "granulated sugar",
    "عسل": "honey",
    # Oils
    "زيت": "oil", "زيت زيتون": "olive oil", "زيت نباتي": "vegetable oil",
    "زيت دوار الشمس": "sunflower oil", "زيت ذرة": "corn oil", "زيت نخيل": "palm oil",
    "زيت جوز الهند": "coconut oil", "زيت فول الصويا": "soybean oil",
    # Nuts & legumes
    "مكسرات": "nuts", "لوز": "almonds", "كاجو": "cashews", "فستق": "pistachios",
    "جوز": "walnuts", "فول سوداني": "peanuts", "حبات فول سوداني": "peanut kernels",
    "حبات فول سوداني مقشرة": "blanched peanut kernels", "مكاديميا": "macadamia",
    # Beverages
    "شاي": "tea", "شاي أخضر": "green tea", "شاي اخضر": "green tea",
    "شاي أسود": "black tea", "شاي اسود": "black tea", "شاي سيلاني": "ceylon tea",
    "قهوة": "coffee",
    # Dairy
    "حليب": "milk", "حليب مجفف": "milk powder",
    "حليب مجفف خالي الدسم": "skimmed milk powder",
    "حليب مجفف كامل الدسم": "full cream milk powder",
    "زبدة": "butter", "جبنة": "cheese",
    # Other
    "جوز هند": "coconut", "جوز هند مبشور": "desiccated coconut",
    "مرقة": "bouillon", "مرقة دجاج": "chicken bouillon", "ملح": "salt", "تمر": "dates",
    "طحينة": "tahini", "ذرة فشار": "popcorn",
    "دواء": "medicine", "أدوية": "medicine", "ادوية": "medicine",
}


# =============================================================================
# LOCATIONS — countries and ports (English → Arabic)
# =============================================================================
LOCATIONS_EN_AR = {
    # Countries
    "egypt": "مصر", "india": "الهند", "iraq": "العراق", "turkey": "تركيا",
    "iran": "إيران", "syria": "سوريا", "jordan": "الأردن", "lebanon": "لبنان",
    "uae": "الإمارات", "united arab emirates": "الإمارات", "saudi": "السعودية",
    "saudi arabia": "السعودية", "kuwait": "الكويت", "qatar": "قطر",
    "bahrain": "البحرين", "oman": "عمان", "yemen": "اليمن", "palestine": "فلسطين",
    "china": "الصين", "pakistan": "باكستان", "afghanistan": "أفغانستان",
    "vietnam": "فيتنام", "indonesia": "إندونيسيا", "sri lanka": "سريلانكا",
    "brazil": "البرازيل", "thailand": "تايلاند",
    # Major ports
    "mersin": "مرسين", "alexandria": "الإسكندرية", "mumbai": "مومباي",
    "karachi": "كراتشي", "dubai": "دبي", "jebel ali": "جبل علي", "jeddah": "جدة",
    "beirut": "بيروت", "aqaba": "العقبة", "basra": "البصرة", "umm qasr": "أم قصر",
    "bandar abbas": "بندر عباس", "istanbul": "اسطنبول", "port said": "بورسعيد",
    "latakia": "اللاذقية", "tartus": "طرطوس",
}


# =============================================================================
# PHRASE MATCHING
# =============================================================================

def normalize_phrase(text: str) -> str:
    """Lowercase and collapse inner whitespace, used as a table key."""
    return " ".join(text.lower().split())


def longest_first(phrases: Iterable[str]) -> List[str]:
    """Sort phrases so multi-word entries beat their single-word prefixes."""
    return sorted(set(phrases), key=lambda p: (-len(p), p))


def phrase_alternation(phrases: Iterable[str]) -> str:
    """Regex alternation of phrases, longest first, whitespace-tolerant."""
    return "|".join(
        r"\s+".join(re.escape(word) for word in phrase.split())
        for phrase in longest_first(phrases)
    )


class PhraseTranslator:
    """
    Single-pass, longest-match-first phrase replacement.

    English keys match on word boundaries, case-insensitively. Arabic keys
    also match when glued to the definite article ("الفلفل" → "pepper").
    Text with no known phrase comes back unchanged.
    """

    def __init__(self, table: Dict[str, str], arabic_keys: bool = False):
        self._table = {normalize_phrase(k): v for k, v in table.items()}
        article = r"(?:ال)?" if arabic_keys else ""
        self._pattern = re.compile(
            rf"(?<!\w){article}({phrase_alternation(self._table)})(?!\w)",
            re.IGNORECASE,
        )

    def translate(self, text: str) -> str:
        if not text:
            return text
        return self._pattern.sub(lambda m: self._table[normalize_phrase(m.group(1))], text)

    def __contains__(self, phrase: str) -> bool:
        return normalize_phrase(phrase) in self._table

ARABIC_TO_ENGLISH = PhraseTranslator(PRODUCTS_AR_EN, arabic_keys=True)
ENGLISH_TO_ARABIC = PhraseTranslator(PRODUCTS_EN_AR)


def translate_product(term: str) -> str:
    """
    Translate a product term so it can match data stored in either language.

    Arabic → English is tried first; English → Arabic only when the first
    pass changed nothing.
    """
    forward = ARABIC_TO_ENGLISH.translate(term)
    if forward != term:
        return forward
    return ENGLISH_TO_ARABIC.translate(term)


def translate_location(location: str) -> str:
    """Canonical Arabic name for an English location, else unchanged."""
    return LOCATIONS_EN_AR.get(normalize_phrase(location), location)

# Known location names in either language, for multi-word destinations
_LOCATION_NAMES = list(LOCATIONS_EN_AR) + list(LOCATIONS_EN_AR.values())
_LEADING_LOCATION = re.compile(
    rf"^({phrase_alternation(_LOCATION_NAMES)})(?!\w)",
    re.IGNORECASE,
)


def leading_location(text: str) -> Optional[str]:
    """Return the known location name that starts `text`, if any."""
    match = _LEADING_LOCATION.match(text)
    return match.group(1) if match else None


# =============================================================================
# MONTH LOOKUP
# =============================================================================

_ALL_MONTHS = {normalize_phrase(k): v for k, v in {**ARABIC_MONTHS, **ENGLISH_MONTHS}.items()}

# Bare alternation (no groups) so it can be embedded in larger patterns
MONTH_ALTERNATION = phrase_alternation(_ALL_MONTHS)


def get_month_number(name: str) -> Optional[int]:
    """Month number for a name from either language table."""
    return _ALL_MONTHS.get(normalize_phrase(name))


def get_month_name(month: int, language: str = "ar") -> Optional[str]:
    """First listed name of a month in the given language."""
    table = ARABIC_MONTHS if language == "ar" else ENGLISH_MONTHS
    for name, number in table.items():
        if number == month:
            return name
    return None


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _arabic_phrases() -> Iterable[str]:
    yield from PRODUCTS_AR_EN
    yield from PRODUCTS_EN_AR.values()
    yield from LOCATIONS_EN_AR.values()
    yield from ARABIC_MONTHS
    yield from META_WORDS
    for _, keywords in SORT_COLUMNS:
        yield from keywords["ar"]
    for keywords in (ORIGIN_KEYWORDS, DESTINATION_KEYWORDS, EXCLUSION_KEYWORDS,
                     MIN_MODIFIERS, MAX_MODIFIERS):
        yield from keywords["ar"]


# Vocabulary words that merely start with "و" and must not be split on it
WAW_WORDS = frozenset(
    token
    for phrase in _arabic_phrases()
    for token in phrase.split()
    if token.startswith(ARABIC_CONJUNCTION) and len(token) > 1
)


def get_all_keywords() -> Dict[str, Tuple[str, ...]]:
    """Every clause keyword, grouped by role, for documentation endpoints."""
    return {
        "origin": tuple(ORIGIN_KEYWORDS["ar"] + ORIGIN_KEYWORDS["en"]),
        "destination": tuple(DESTINATION_KEYWORDS["ar"] + DESTINATION_KEYWORDS["en"]),
        "exclusion": tuple(EXCLUSION_KEYWORDS["ar"] + EXCLUSION_KEYWORDS["en"]),
        "conjunction": tuple([ARABIC_CONJUNCTION] + CONJUNCTIONS_EN),
    }
