"""Template context processors for the `core` app."""

from django.conf import settings
from django.http import HttpRequest

from app.domain import AppMetadata


def app_metadata(request: HttpRequest) -> dict[str, AppMetadata]:
    """Expose application metadata to every template as `app_metadata`.

    Args:
        request: Current request; unused.

    Returns:
        dict[str, AppMetadata]: Template context entries.

    Raises:
        RuntimeError: This processor does not raise runtime errors.
    """

    _ = request
    return {
        "app_metadata": AppMetadata(
            application_name=settings.APP_NAME,
            environment_name=settings.ENVIRONMENT_NAME,
        )
    }
