"""
Finance URLs

URL routing for the transactions search endpoints.
"""

from django.urls import path
from .views import FinanceSearchParseView, FinanceSearchExamplesView

urlpatterns = [
    path('search/parse/', FinanceSearchParseView.as_view(), name='finance-search-parse'),
    path('search/examples/', FinanceSearchExamplesView.as_view(), name='finance-search-examples'),
]
