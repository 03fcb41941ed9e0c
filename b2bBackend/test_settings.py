import os

# Mock SECRET_KEY for tests BEFORE importing settings to bypass validation
os.environ.setdefault("SECRET_KEY", "django-insecure-test-key-for-unit-tests-only")

from .settings import *  # noqa: F403

# Override Database to use SQLite for tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",  # noqa: F405
    }
}

# Disable external services
EMAIL_SERVICE_BACKEND = "mock"
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
OTEL_ENABLED = False

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

B2B_MARKETPLACE = {**B2B_MARKETPLACE, "TEST_COMPATIBILITY_MODE": False}  # noqa: F405

LOGGING["root"]["level"] = "WARNING"  # noqa: F405
