"""
Shipment Search Views

API endpoints behind the shipments smart search bar.
"""

from django.utils import timezone
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from core.exceptions import ValidationError
from loyal.config import config
from .query_sanitizer import sanitize_query, get_language
from .serializers import ManualFiltersSerializer
from .services import (
    query_parser,
    format_parsed_search,
    get_search_examples,
    build_listing_params,
)
from .services.trade_gazetteers import get_all_keywords


class SearchParseView(APIView):
    """
    Parse a free-text shipment search.

    GET /api/v1/shipments/search/parse/?q=<query>&lang=ar

    Query params:
        q    - Search sentence (Arabic, English or mixed); empty gives an empty parse
        lang - Language of the summary line (ar | en, default ar)
    """
    permission_classes = [AllowAny]

    def get(self, request):
        query = sanitize_query(request.query_params.get('q', ''))
        language = get_language(request)

        parsed = query_parser.parse(query, today=timezone.localdate())

        return Response({
            "query": query,
            "parsed": parsed.to_dict(),
            "summary": format_parsed_search(parsed, language),
        })


class ListingQueryView(APIView):
    """
    Build the shipments listing request for a search plus manual filters.

    GET /api/v1/shipments/search/listing/?q=<query>&weightOp=>&weight=100&page=2

    Manual numeric filters and date pickers win over parsed ones; a parsed
    sort wins unless sortTouched=true.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        query = sanitize_query(request.query_params.get('q', ''))

        serializer = ManualFiltersSerializer(data=request.query_params)
        if not serializer.is_valid():
            field_name = next(iter(serializer.errors))
            raise ValidationError(
                "Invalid listing filters",
                field=field_name,
                errors=serializer.errors,
            )

        parsed = query_parser.parse(query, today=timezone.localdate())
        params = build_listing_params(
            parsed,
            serializer.to_manual_filters(),
            max_page_size=config.search.max_page_size,
        )

        return Response({
            "query": query,
            "parsed": parsed.to_dict(),
            "params": params,
        })


class SearchExamplesView(APIView):
    """
    Example queries shown under the search bar.

    GET /api/v1/shipments/search/examples/?lang=en
    """
    permission_classes = [AllowAny]

    def get(self, request):
        language = get_language(request)
        return Response({
            "language": language,
            "examples": get_search_examples(language),
            "keywords": get_all_keywords(),
        })


class HealthView(APIView):
    """
    Health check endpoint.

    GET /api/v1/health/
    """
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({
            "status": "healthy",
            "service": "Loyal Search API",
            "version": "1.0.0",
        })
