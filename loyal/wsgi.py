"""
WSGI config for the Loyal search API.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "loyal.settings")

application = get_wsgi_application()
