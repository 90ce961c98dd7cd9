"""
Tests for the trade gazetteers: translation tables and month lookup.
"""

from shipments.services.trade_gazetteers import (
    ARABIC_TO_ENGLISH,
    WAW_WORDS,
    get_all_keywords,
    get_month_name,
    get_month_number,
    leading_location,
    translate_location,
    translate_product,
)


class TestProductTranslation:

    def test_arabic_to_english(self):
        assert translate_product("فلفل") == "pepper"

    def test_definite_article(self):
        """Arabic keys match with a leading 'ال'."""
        assert translate_product("الفلفل") == "pepper"

    def test_english_to_arabic(self):
        assert translate_product("cinnamon") == "قرفة"

    def test_case_insensitive(self):
        assert translate_product("Rice") == "رز"

    def test_longest_phrase_wins(self):
        """'black pepper' is one product, not 'black' + pepper."""
        assert translate_product("black pepper") == "فلفل أسود"
        assert translate_product("فلفل اسود") == "black pepper"

    def test_unknown_term_unchanged(self):
        assert translate_product("widgets") == "widgets"

    def test_contains(self):
        assert "فلفل" in ARABIC_TO_ENGLISH
        assert "widgets" not in ARABIC_TO_ENGLISH


class TestLocations:

    def test_english_country(self):
        assert translate_location("India") == "الهند"

    def test_multi_word_location(self):
        assert translate_location("United  Arab Emirates") == "الإمارات"

    def test_arabic_location_unchanged(self):
        assert translate_location("العراق") == "العراق"

    def test_leading_location(self):
        assert leading_location("jebel ali port") == "jebel ali"
        assert leading_location("مرسين فلفل") == "مرسين"
        assert leading_location("nowhere") is None


class TestMonths:

    def test_english_names(self):
        assert get_month_number("January") == 1
        assert get_month_number("sept") == 9

    def test_arabic_synonyms(self):
        assert get_month_number("آذار") == 3
        assert get_month_number("مارس") == 3
        assert get_month_number("شهر 10") == 10

    def test_unknown_month(self):
        assert get_month_number("smarch") is None

    def test_month_name(self):
        assert get_month_name(3, "ar") == "مارس"
        assert get_month_name(3, "en") == "march"
        assert get_month_name(13, "en") is None


class TestVocabulary:

    def test_waw_words(self):
        """Vocabulary tokens starting with waw are protected from splitting."""
        assert "ورق" in WAW_WORDS
        assert "وزن" in WAW_WORDS
        assert "و" not in WAW_WORDS

    def test_all_keywords(self):
        keywords = get_all_keywords()
        assert "from" in keywords["origin"]
        assert "إلى" in keywords["destination"]
        assert "except" in keywords["exclusion"]
        assert keywords["conjunction"][0] == "و"
