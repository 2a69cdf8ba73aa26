"""Root URL configuration."""

from django.conf import settings
from django.contrib import admin
from django.contrib.staticfiles.urls import staticfiles_urlpatterns
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("core.urls")),
]

if settings.DEBUG:
    # uvicorn does not serve static files the way runserver does.
    urlpatterns += staticfiles_urlpatterns()
    urlpatterns.append(path("__reload__/", include("django_browser_reload.urls")))
