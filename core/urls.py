"""URL routes for the public pages and health endpoint."""

from django.urls import path

from . import views

urlpatterns = [
    path("", views.home, name="home"),
    path("about/", views.about, name="about"),
    path("contact/", views.contact, name="contact"),
    path("health/", views.health, name="health"),
]
