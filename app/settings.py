"""Django settings for the project.

Runtime values come from `AppSettings` (environment variables and `.env`).
Startup fails with `SettingsLoadError` when configuration is invalid.
"""

from pathlib import Path

from app.config import (
    config_build_installed_apps,
    config_build_logging,
    config_build_middleware,
    config_configure_structlog,
    config_load_settings,
)
from app.db import db_build_django_database

BASE_DIR = Path(__file__).resolve().parent.parent

RUNTIME_SETTINGS = config_load_settings()

SECRET_KEY = RUNTIME_SETTINGS.secret_key
DEBUG = RUNTIME_SETTINGS.debug
ALLOWED_HOSTS = RUNTIME_SETTINGS.allowed_hosts

APP_NAME = RUNTIME_SETTINGS.app_name
ENVIRONMENT_NAME = RUNTIME_SETTINGS.environment_name
DATABASE_URL = RUNTIME_SETTINGS.database_url

INSTALLED_APPS = config_build_installed_apps(RUNTIME_SETTINGS)
MIDDLEWARE = config_build_middleware(RUNTIME_SETTINGS)

ROOT_URLCONF = "app.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "core.context_processors.app_metadata",
            ],
        },
    },
]

WSGI_APPLICATION = "app.wsgi.application"
ASGI_APPLICATION = "app.asgi.application"

DATABASES = {"default": db_build_django_database(DATABASE_URL, base_dir=BASE_DIR)}

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# django-tailwind
TAILWIND_APP_NAME = "theme"
INTERNAL_IPS = ["127.0.0.1"]
NPM_BIN_PATH = RUNTIME_SETTINGS.npm_bin_path

config_configure_structlog()
LOGGING = config_build_logging(RUNTIME_SETTINGS.log_level, RUNTIME_SETTINGS.log_json)
