"""Catalog pages, debug routes and the health check."""

from __future__ import annotations

from functools import wraps

import structlog
from asgiref.sync import sync_to_async
from django.conf import settings
from django.db import DatabaseError, connection
from django.http import Http404, HttpResponseNotFound, JsonResponse
from django.shortcuts import render
from django.utils.translation import gettext as _
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from apps.catalog.models import Basecamp, Package
from apps.users.session_auth import get_session_user, session_login_required

from .apps import get_slot_registry
from .sidebar import SIDEBAR_SLOT

logger = structlog.get_logger(__name__)

MOUNTAIN_NAME = "Gunung Gede Pangrango"


@require_GET
def home(request):
    return render(
        request,
        "pages/home.html",
        {
            "title": "Booking Pendakian Gunung Gede Pangrango",
            "mountain_name": MOUNTAIN_NAME,
            "packages": Package.objects.all(),
            "sidebar": get_slot_registry().render(SIDEBAR_SLOT),
        },
    )


@require_GET
def about(request):
    return render(request, "pages/about.html", {"title": "Tentang Kami", "mountain_name": MOUNTAIN_NAME})


@require_GET
async def trail_info(request):
    sidebar = await get_slot_registry().arender(SIDEBAR_SLOT)
    return await sync_to_async(render)(
        request,
        "pages/trail_info.html",
        {"title": "Informasi Jalur", "mountain_name": MOUNTAIN_NAME, "sidebar": sidebar},
    )


@require_GET
def basecamps(request):
    return render(
        request,
        "pages/basecamps.html",
        {"title": "Basecamp", "basecamps": Basecamp.objects.all()},
    )


@require_GET
def package_detail(request, package_id):
    package = Package.objects.filter(pk=package_id).first()
    if package is None:
        return HttpResponseNotFound(_("Paket tidak ditemukan"))
    return render(request, "pages/package_detail.html", {"title": f"{package.name} - Detail Paket", "package": package})


def debug_endpoint(view_func):
    """Expose the view only when ``DEBUG_ENDPOINTS`` is on; 404 otherwise."""

    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not settings.DEBUG_ENDPOINTS:
            raise Http404
        return view_func(request, *args, **kwargs)

    return _wrapped


@require_GET
@debug_endpoint
def debug_session(request):
    session = request.session
    return JsonResponse(
        {
            "hasSession": session.session_key is not None,
            "sessionKey": session.session_key,
            "user": get_session_user(request),
            "cookie": {
                "maxAge": session.get_expiry_age(),
                "expires": session.get_expiry_date().isoformat(),
                "httpOnly": settings.SESSION_COOKIE_HTTPONLY,
                "secure": settings.SESSION_COOKIE_SECURE,
            },
        }
    )


@require_GET
@debug_endpoint
def debug_check_auth(request):
    user = get_session_user(request)
    return JsonResponse(
        {
            "isAuthenticated": user is not None,
            "user": user,
            "message": "User is logged in" if user else "User is not logged in",
        }
    )


@require_GET
@debug_endpoint
@session_login_required
def test_protected(request):
    return JsonResponse({"message": "Access granted! You are logged in.", "user": get_session_user(request)})


@require_GET
@debug_endpoint
def test_public(request):
    user = get_session_user(request)
    return JsonResponse(
        {
            "message": "This is a public route. Anyone can access.",
            "isLoggedIn": user is not None,
            "user": user,
        }
    )


@csrf_exempt
@require_http_methods(["GET"])
def healthz(request):
    """Health check endpoint for container probes."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as exc:
        logger.error("healthz.fail", error=str(exc))
        return JsonResponse({"status": "unhealthy", "database": "unavailable"}, status=503)
    return JsonResponse({"status": "healthy", "database": "connected"})
