"""
Shipment URLs

URL routing for the shipments search endpoints.
"""

from django.urls import path
from .views import SearchParseView, ListingQueryView, SearchExamplesView

urlpatterns = [
    path('search/parse/', SearchParseView.as_view(), name='shipments-search-parse'),
    path('search/listing/', ListingQueryView.as_view(), name='shipments-search-listing'),
    path('search/examples/', SearchExamplesView.as_view(), name='shipments-search-examples'),
]
