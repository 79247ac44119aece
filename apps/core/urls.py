"""
URL configuration for core app.
"""

from django.urls import path

from .health import health_check, readiness_probe

app_name = "core"

urlpatterns = [
    path("health/", health_check, name="health"),
    path("health/ready/", readiness_probe, name="readiness"),
]
