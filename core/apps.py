"""AppConfig for the `core` app.

Holds the public pages (home, about, contact) and the health endpoint.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Standard Django AppConfig; keep defaults lightweight."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
