"""Django settings for the cinema tickets API."""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-local-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "tickets",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "ticketing.urls"

WSGI_APPLICATION = "ticketing.wsgi.application"

# Purchases are not persisted; the database only backs Django's own apps.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "UNAUTHENTICATED_USER": None,
}

TICKETS = {
    "MAX_TICKETS_PER_PURCHASE": int(os.environ.get("TICKETS_MAX_PER_PURCHASE", "25")),
    "PRICES": {"ADULT": 25, "CHILD": 15, "INFANT": 0},
    "PAYMENT_SERVICE": os.environ.get(
        "TICKETS_PAYMENT_SERVICE", "tickets.gateways.LoggingTicketPaymentService"
    ),
    "SEAT_RESERVATION_SERVICE": os.environ.get(
        "TICKETS_SEAT_RESERVATION_SERVICE", "tickets.gateways.LoggingSeatReservationService"
    ),
}

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_JSON = os.environ.get("LOG_JSON", "false").lower() == "true"

# tickets.logging_config owns the handlers.
LOGGING_CONFIG = None
