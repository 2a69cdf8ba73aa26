"""Builders for Django settings values that depend on runtime configuration.

The Django settings module stays declarative; anything that branches on
`AppSettings` is computed here so it can be tested without reloading settings.
"""

from .settings import AppSettings

BASE_INSTALLED_APPS = (
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "tailwind",
    "theme",
    "core",
)

BASE_MIDDLEWARE = (
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
)

BROWSER_RELOAD_APP = "django_browser_reload"
BROWSER_RELOAD_MIDDLEWARE = "django_browser_reload.middleware.BrowserReloadMiddleware"


def config_build_installed_apps(settings: AppSettings) -> list[str]:
    """Build the Django installed application list.

    Args:
        settings: Validated runtime settings.

    Returns:
        list[str]: Installed apps, with the browser reload app only in debug mode.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    installed_apps = list(BASE_INSTALLED_APPS)
    if settings.debug:
        installed_apps.append(BROWSER_RELOAD_APP)
    return installed_apps


def config_build_middleware(settings: AppSettings) -> list[str]:
    """Build the Django middleware stack.

    The browser reload middleware must come after any middleware that encodes
    the response, so it is appended last.

    Args:
        settings: Validated runtime settings.

    Returns:
        list[str]: Middleware dotted paths in execution order.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    middleware = list(BASE_MIDDLEWARE)
    if settings.debug:
        middleware.append(BROWSER_RELOAD_MIDDLEWARE)
    return middleware
