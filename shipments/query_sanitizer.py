"""
Query Sanitization — shared by the shipments and finance search views.

Strips markup and control characters, normalises whitespace and enforces
the configured length limit before a query reaches a parser.
"""

import re
import html
import logging

from loyal.config import config
from core.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Only real tags: "<5000" and "< 5000" are comparison operators
_TAG = re.compile(r"<[a-zA-Z/!][^>]*>")
_CONTROL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

SUPPORTED_LANGUAGES = ("ar", "en")


def sanitize_query(raw: str, max_length: int = None) -> str:
    """
    Sanitise a search-bar query.

    1. HTML-unescape (`&lt;` → `<`, `&amp;` → `&`)
    2. Remove HTML tags
    3. Remove control characters and null bytes
    4. Collapse whitespace
    5. Truncate to the configured maximum length
    """
    if not raw:
        return ""

    max_length = max_length or config.search.max_query_length

    q = html.unescape(raw)
    q = _TAG.sub(" ", q)
    q = _CONTROL.sub("", q)
    q = re.sub(r"\s+", " ", q).strip()

    if len(q) > max_length:
        logger.warning(f"Search query truncated from {len(q)} to {max_length} characters")
        q = q[:max_length].rstrip()

    return q


def get_language(request) -> str:
    """Read ?lang=ar|en (default ar)."""
    language = request.query_params.get("lang", "ar").lower()
    if language not in SUPPORTED_LANGUAGES:
        raise ValidationError(
            f"Unsupported language '{language}'",
            field="lang",
            supported=list(SUPPORTED_LANGUAGES),
        )
    return language
