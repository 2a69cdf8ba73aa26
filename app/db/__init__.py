"""Database layer package for connection settings and health boundaries."""

from .health import DjangoDatabaseHealthService
from .interfaces import DatabaseHealthPort
from .url import db_build_django_database, db_render_database_label

__all__ = [
	"DatabaseHealthPort",
	"DjangoDatabaseHealthService",
	"db_build_django_database",
	"db_render_database_label",
]
