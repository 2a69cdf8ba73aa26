"""AppConfig for the `theme` app that owns the Tailwind CSS sources."""

from django.apps import AppConfig


class ThemeConfig(AppConfig):
    name = "theme"
