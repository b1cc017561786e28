"""URL configuration for HikeBook project.

The `urlpatterns` list routes URLs to views. The HTML site (catalog pages,
booking wizard, account pages) is served from the root, while the
token-guarded JSON API lives under `/api/`.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    # JSON API
    path('api/auth/', include(('apps.users.auth_urls', 'auth'), namespace='auth')),
    path('api/', include('apps.bookings.api_urls')),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    # HTML site
    path('', include('apps.users.urls')),
    path('', include('apps.bookings.urls')),
    path('', include('apps.pages.urls')),
]
