from .base import *  # noqa

DEBUG = False
SECRET_KEY = "test-only-not-secure"
ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

TIME_ZONE = "America/Sao_Paulo"

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# Never reach Google from the test suite
GOOGLE_ADS = {
    "DEVELOPER_TOKEN": "",
    "CLIENT_ID": "",
    "CLIENT_SECRET": "",
    "REFRESH_TOKEN": "",
    "API_VERSION": "v16",
    "TIMEOUT": 5.0,
}

REPORTS_METRICS_SOURCE = "apps.reports.metrics.StaticMetricsSource"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "null": {"class": "logging.NullHandler"},
    },
    "root": {"handlers": ["null"]},
}
