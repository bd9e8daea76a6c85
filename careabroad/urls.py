"""
URL configuration for the careabroad project.

The `urlpatterns` list routes URLs to views.  This module includes
both the Django admin and the API routes provided by the facilities app.
OpenAPI documentation is exposed at ``/swagger/`` and ``/redoc/``.
"""
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

# API metadata for Swagger/OpenAPI documentation
api_info = openapi.Info(
    title="Trusted Care Abroad API",
    default_version='v1',
    description="Read-only directory of medical facilities abroad.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    # Operators maintain facilities, treatments and doctors here
    path('admin/', admin.site.urls),
    path('', include('facilities.routers')),
    # Swagger and ReDoc
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]
