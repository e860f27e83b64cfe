"""
URL configuration for LicenseVault project.
"""
from django.urls import include, path

from core.views import HealthView, ReadyView

urlpatterns = [
    # Health check endpoints
    path("health/", HealthView.as_view(), name="health"),
    path("ready/", ReadyView.as_view(), name="ready"),
    # API endpoints
    path("api/v1/teams/<uuid:team_id>/licenses/", include("api.v1.licenses.urls")),
]
