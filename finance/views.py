"""
Finance Search Views

API endpoints behind the transactions smart search bar.
"""

from django.utils import timezone
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from shipments.query_sanitizer import sanitize_query, get_language
from .services import finance_parser, get_finance_search_examples


class FinanceSearchParseView(APIView):
    """
    Parse a free-text transactions search.

    GET /api/v1/finance/search/parse/?q=<query>
    """
    permission_classes = [AllowAny]

    def get(self, request):
        query = sanitize_query(request.query_params.get('q', ''))
        parsed = finance_parser.parse(query, today=timezone.localdate())

        return Response({
            "query": query,
            "parsed": parsed.to_dict(),
        })


class FinanceSearchExamplesView(APIView):
    """
    GET /api/v1/finance/search/examples/?lang=ar
    """
    permission_classes = [AllowAny]

    def get(self, request):
        language = get_language(request)
        return Response({
            "language": language,
            "examples": get_finance_search_examples(language),
        })
