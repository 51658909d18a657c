import os

import structlog
from django.core.management.utils import get_random_secret_key

# Build paths inside the project like this: os.path.join(SITE_ROOT_DIR, ...)
ASSETPATH_APP_DIR = os.path.abspath(os.path.dirname(__file__))
SITE_ROOT_DIR = os.path.dirname(ASSETPATH_APP_DIR)

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", get_random_secret_key())

DEBUG = False
ALLOWED_HOSTS = ["*"]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# The tag only reads the in-memory site model
DATABASES = {}

INSTALLED_APPS = [
    "assetpath.apps.AssetPathAppConfig",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [
            os.path.join(SITE_ROOT_DIR, "templates"),
        ],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "assetpath.context_processors.site_model",
            ],
        },
    }
]

################################################################################
# Asset path settings
################################################################################

# Prefix of every asset URL, e.g. "/blog" for a site served below /blog/
ASSET_PATH_BASEURL = os.environ.get("ASSET_PATH_BASEURL", "")

# Directory segment between the baseurl and the post or page path
ASSET_PATH_DIRECTORY = os.environ.get("ASSET_PATH_DIRECTORY", "assets")

# Version of the generator that built the default site; picks where slugs are read
ASSET_PATH_GENERATOR_VERSION = os.environ.get("ASSET_PATH_GENERATOR_VERSION") or None

# Dotted path to a callable returning the Site used when a template has none
ASSET_PATH_SITE_FACTORY = os.environ.get("ASSET_PATH_SITE_FACTORY") or None

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "long": {
            "format": "[{asctime} {levelname} {name}:{lineno}] {message}",
            "datefmt": "%Y-%m-%dT%H:%M:%S",
            "style": "{",
        },
        "structlog_json": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.processors.JSONRenderer(),
        },
        "structlog_console": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.dev.ConsoleRenderer(),
        },
    },
    "handlers": {
        "stream": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "long",
        },
        "null": {"level": "INFO", "class": "logging.NullHandler"},
        "structlog_console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": os.environ.get("ASSET_PATH_LOG_FORMAT", "structlog_console"),
        },
    },
    "loggers": {
        "django": {"handlers": ["stream"], "level": "INFO"},
        "structlog": {
            "handlers": ["structlog_console"],
            "level": "DEBUG",
            "propagate": False,
        },
    },
}

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)
