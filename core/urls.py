"""
URL configuration for the dashboard API.

Every resource app mounts under ``/api/v1/``; tenant-scoped routes carry the
client slug as their first path segment after the resource name.
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView


def home_view(request):
    return JsonResponse({
        "message": "Marketing Dashboard API",
        "status": "running",
        "endpoints": {
            "admin": "/admin/",
            "api": "/api/v1/",
            "docs": "/api/docs/",
            "schema": "/api/schema/"
        }
    })


urlpatterns = [
    path("", home_view, name="home"),
    path("admin/", admin.site.urls),
    path("api/v1/auth/", include("apps.authentication.urls")),
    path("api/v1/", include("apps.tags.urls")),
    path("api/v1/", include("apps.charts.urls")),
    path("api/v1/", include("apps.reports.urls")),
    path("api/v1/", include("apps.account_settings.urls")),
    path("api/v1/", include("apps.integrations.urls")),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]
