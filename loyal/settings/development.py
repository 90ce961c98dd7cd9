"""
Development Settings
"""

from .base import *
from dotenv import load_dotenv

load_dotenv()

DEBUG = True
SECRET_KEY = os.getenv("SECRET_KEY", "django-insecure-dev-key-change-in-production")
ALLOWED_HOSTS = ["*"]

# SQLite keeps `manage.py check` and the test runner happy; no models yet
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# CORS - Allow all for local development
CORS_ALLOW_ALL_ORIGINS = True

# Disable rate limiting in development (search bars parse per keystroke)
REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {
    "anon": "100000/hour",
}
