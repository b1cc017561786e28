"""HTML login, registration and logout views backed by the cookie session."""

from __future__ import annotations

from urllib.parse import urlencode

import structlog
from django.shortcuts import redirect, render  # type: ignore
from django.urls import reverse  # type: ignore
from django.utils.translation import gettext as _  # type: ignore
from django.views.decorators.http import require_http_methods  # type: ignore

from .services import RegistrationData, RegistrationError, register_user, verify_credentials
from .session_auth import guest_only, login_session, logout_session, pop_redirect_target

logger = structlog.get_logger(__name__)


def _redirect_with(name: str, **params: str):
    return redirect(f"{reverse(name)}?{urlencode(params)}")


@require_http_methods(["GET", "POST"])
@guest_only
def login_view(request):
    if request.method == "GET":
        return render(
            request,
            "users/login.html",
            {
                "title": "Login - HikeBook",
                "error": request.GET.get("error"),
                "success": request.GET.get("success"),
            },
        )

    email = request.POST.get("email", "").strip()
    password = request.POST.get("password", "")
    if not email or not password:
        return _redirect_with("users:login", error=_("Email dan password harus diisi"))

    user = verify_credentials(email, password)
    if user is None:
        return _redirect_with("users:login", error=_("Email atau password salah"))

    target = pop_redirect_target(request)
    login_session(request, user, remember=bool(request.POST.get("remember")))
    logger.info("auth.session_login", user_id=user.pk)
    return redirect(target)


@require_http_methods(["GET", "POST"])
@guest_only
def register_view(request):
    if request.method == "GET":
        return render(
            request,
            "users/register.html",
            {"title": "Register - HikeBook", "error": request.GET.get("error")},
        )

    data = RegistrationData(
        name=request.POST.get("name", ""),
        email=request.POST.get("email", ""),
        phone=request.POST.get("phone") or None,
        password=request.POST.get("password", ""),
        password_confirm=request.POST.get("confirmPassword", ""),
    )
    try:
        user = register_user(data)
    except RegistrationError as exc:
        return _redirect_with("users:register", error=str(exc.message))

    login_session(request, user)
    return redirect(f"/?{urlencode({'success': _('Registrasi berhasil! Selamat datang di HikeBook')})}")


@require_http_methods(["GET", "POST"])
def logout_view(request):
    logout_session(request)
    return _redirect_with("users:login", success=_("Logout berhasil"))
