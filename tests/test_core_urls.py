"""Tests for URL routing of the public pages."""

import importlib

import pytest
from django.urls import clear_url_caches, resolve, reverse

from app import urls as root_urls
from core import views


@pytest.mark.parametrize(
    ("route_name", "path", "view"),
    [
        ("home", "/", views.home),
        ("about", "/about/", views.about),
        ("contact", "/contact/", views.contact),
        ("health", "/health/", views.health),
    ],
)
def test_core_urls_named_routes_resolve_to_views(route_name: str, path: str, view) -> None:
    """Reverse each named route and resolve it back to its view.

    Args:
        route_name: URL pattern name.
        path: Expected URL path.
        view: Expected view callable.

    Returns:
        None: Assertions validate routing table.

    Raises:
        AssertionError: Raised when routing does not match.
    """

    assert reverse(route_name) == path
    assert resolve(path).func == view


def _reload_root_url_prefixes() -> list[str]:
    """Re-import the root URLconf and return its mounted route prefixes.

    Returns:
        list[str]: String form of each top-level URL pattern.

    Raises:
        ImportError: Raised when the URLconf cannot be re-imported.
    """

    importlib.reload(root_urls)
    clear_url_caches()
    return [str(pattern.pattern) for pattern in root_urls.urlpatterns]


@pytest.fixture
def restore_root_urls(settings):
    """Reload the root URLconf under the original DEBUG value after the test.

    Args:
        settings: pytest-django settings fixture.

    Yields:
        None: Control returns to the test body.
    """

    original_debug = settings.DEBUG
    yield
    settings.DEBUG = original_debug
    _reload_root_url_prefixes()


def test_core_urls_debug_mounts_static_and_browser_reload_routes(settings, restore_root_urls) -> None:
    """Mount static serving and the browser reload route only when debug is enabled.

    Args:
        settings: pytest-django settings fixture.
        restore_root_urls: Fixture restoring the URLconf after reloads.

    Returns:
        None: Assertions validate conditional route registration.

    Raises:
        AssertionError: Raised when debug-only routes do not follow DEBUG.
    """

    settings.DEBUG = True
    debug_prefixes = _reload_root_url_prefixes()

    assert "__reload__/" in debug_prefixes
    assert any(prefix.startswith("^static/") for prefix in debug_prefixes)
    assert reverse("django-browser-reload:events") == "/__reload__/events/"

    settings.DEBUG = False
    release_prefixes = _reload_root_url_prefixes()

    assert "__reload__/" not in release_prefixes
    assert not any(prefix.startswith("^static/") for prefix in release_prefixes)
    assert release_prefixes == ["admin/", ""]
