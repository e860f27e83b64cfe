"""
URL configuration for license API endpoints.
"""

from django.urls import path

from api.v1.licenses import views

app_name = "licenses"

urlpatterns = [
    path(
        "",
        views.IssueLicenseView.as_view(),
        name="issue-license",
    ),
    path(
        "search",
        views.FindLicenseByKeyView.as_view(),
        name="find-license",
    ),
    path(
        "<uuid:license_id>/key",
        views.RevealLicenseKeyView.as_view(),
        name="reveal-license-key",
    ),
]
