"""
URL configuration for the cafe POS backend.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("apps.core.urls")),
    path("", include("apps.catalog.urls")),
    path("", include("apps.sales.urls")),
    path("", include("apps.reporting.urls")),
]
