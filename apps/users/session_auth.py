"""Cookie-session issuer and guards for the HTML site.

The session carries only the user projection ``{id, name, email, phone}``
under ``session["user"]``; it is independent of Django's auth session keys
and of the API bearer tokens.
"""

from __future__ import annotations

from functools import wraps
from typing import Any

from django.conf import settings  # type: ignore
from django.shortcuts import redirect  # type: ignore
from django.utils.http import url_has_allowed_host_and_scheme  # type: ignore

SESSION_USER_KEY = "user"
REDIRECT_KEY = "redirect_to"


def get_session_user(request) -> dict[str, Any] | None:
    return request.session.get(SESSION_USER_KEY)


def login_session(request, user, *, remember: bool = False) -> None:
    # Keep the wizard draft and the pending redirect across the key rotation.
    request.session.cycle_key()
    request.session[SESSION_USER_KEY] = user.to_projection()
    request.session.set_expiry(settings.REMEMBER_ME_AGE if remember else settings.SESSION_COOKIE_AGE)


def logout_session(request) -> None:
    request.session.flush()


def pop_redirect_target(request) -> str:
    """Consume the path stored by ``session_login_required``."""
    target = request.session.pop(REDIRECT_KEY, None)
    if target and url_has_allowed_host_and_scheme(
        target,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return target
    return "/"


def session_login_required(view_func):
    """Redirect anonymous visitors to the login page, remembering where they were going."""

    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if get_session_user(request) is None:
            request.session[REDIRECT_KEY] = request.get_full_path()
            return redirect("users:login")
        return view_func(request, *args, **kwargs)

    return _wrapped


def guest_only(view_func):
    """Send logged-in users home instead of showing login/register again."""

    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if get_session_user(request) is not None:
            return redirect("/")
        return view_func(request, *args, **kwargs)

    return _wrapped
