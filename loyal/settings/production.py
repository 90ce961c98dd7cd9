"""
Production Settings - Security Hardened
"""

from .base import *
from loyal.config import config

DEBUG = False
SECRET_KEY = config.security.secret_key
ALLOWED_HOSTS = config.security.allowed_hosts

# The search API owns no tables
DATABASES = {}

# =============================================================================
# SECURITY SETTINGS - PRODUCTION
# =============================================================================

# HTTPS/SSL Security
SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

# HSTS (HTTP Strict Transport Security)
SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True

SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"
SECURE_REFERRER_POLICY = "strict-origin-when-cross-origin"

# =============================================================================
# CORS - Strict Production Settings (from config)
# =============================================================================
CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = config.security.cors_origins

# =============================================================================
# RATE LIMITING - Stricter for Production
# =============================================================================
REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {
    "anon": "120/minute",  # debounced keystrokes from one browser tab
}

# =============================================================================
# LOGGING - Production (Console-only for Docker)
# =============================================================================
LOGGING["root"]["level"] = "WARNING"
LOGGING["loggers"]["shipments"]["level"] = "INFO"
LOGGING["loggers"]["finance"]["level"] = "INFO"
