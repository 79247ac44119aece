"""
URL patterns for the reporting app.
"""

from django.urls import path

from . import views

app_name = "reporting"

urlpatterns = [
    path("api/reports/", views.report_summary, name="report_summary"),
    path("api/reports/today/", views.report_today, name="report_today"),
    path("api/reports/range/", views.report_range, name="report_range"),
]
