"""
Loyal URL Configuration
"""

from django.urls import path, include
from django.http import JsonResponse

from shipments.views import HealthView


def api_root(request):
    """
    API root — lists the smart search endpoints.
    """
    return JsonResponse({
        "service": "Loyal Supply Chain Search API",
        "version": "1.0.0",
        "endpoints": {
            "shipments": {
                "parse": "/api/v1/shipments/search/parse/?q=<query>",
                "listing": "/api/v1/shipments/search/listing/?q=<query>",
                "examples": "/api/v1/shipments/search/examples/?lang=ar",
            },
            "finance": {
                "parse": "/api/v1/finance/search/parse/?q=<query>",
                "examples": "/api/v1/finance/search/examples/?lang=ar",
            },
            "health": "/api/v1/health/",
        },
        "example": "/api/v1/shipments/search/parse/?q=rice+from+india+to+iraq+value+less+than+50000",
    })


urlpatterns = [
    path('api/', api_root, name='api-root'),
    path('api/v1/health/', HealthView.as_view(), name='health'),
    path('api/v1/shipments/', include('shipments.urls')),
    path('api/v1/finance/', include('finance.urls')),
]
