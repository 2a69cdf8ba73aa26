"""Views for the public pages and the health endpoint."""

import structlog
from django.conf import settings
from django.db import connections
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET

from app.db import DatabaseHealthPort, DjangoDatabaseHealthService

logger = structlog.get_logger(__name__)


def core_create_health_service() -> DatabaseHealthPort:
    """Create the health service bound to the default database connection.

    Returns:
        DatabaseHealthPort: Health service for the configured database.

    Raises:
        ValueError: Raised when the default connection is unavailable.
    """

    return DjangoDatabaseHealthService(connection=connections["default"], database_url=settings.DATABASE_URL)


def home(request: HttpRequest) -> HttpResponse:
    """Render the home page with the welcome headline.

    Args:
        request: Incoming page request.

    Returns:
        HttpResponse: Rendered `core/home.html` markup.

    Raises:
        TemplateDoesNotExist: Raised when the page template is missing.
    """

    return render(request, "core/home.html")


def about(request: HttpRequest) -> HttpResponse:
    """Render the about page.

    Args:
        request: Incoming page request.

    Returns:
        HttpResponse: Rendered `core/about.html` markup.

    Raises:
        TemplateDoesNotExist: Raised when the page template is missing.
    """

    return render(request, "core/about.html")


def contact(request: HttpRequest) -> HttpResponse:
    """Render the contact page.

    Args:
        request: Incoming page request.

    Returns:
        HttpResponse: Rendered `core/contact.html` markup.

    Raises:
        TemplateDoesNotExist: Raised when the page template is missing.
    """

    return render(request, "core/contact.html")


@require_GET
def health(request: HttpRequest) -> JsonResponse:
    """Return application and database health state.

    Args:
        request: Incoming health-check request.

    Returns:
        JsonResponse: 200 with healthy payload, or 503 when the database is down.

    Raises:
        ValueError: Raised when the configured database URL cannot be rendered.
    """

    _ = request
    db_health_service = core_create_health_service()
    try:
        db_health = db_health_service.db_check_health()
        payload = {
            "status": "ok",
            "app": "up",
            "database": db_health.status,
            "detail": db_health.detail,
            "target": db_health_service.db_connection_label(),
        }
        return JsonResponse(payload, status=200)
    except ConnectionError as error:
        logger.warning("health_check_degraded", detail=str(error))
        payload = {
            "status": "degraded",
            "app": "up",
            "database": "down",
            "detail": str(error),
            "target": db_health_service.db_connection_label(),
        }
        return JsonResponse(payload, status=503)
