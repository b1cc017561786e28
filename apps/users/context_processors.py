from __future__ import annotations

from .session_auth import get_session_user


def session_user(request):
    """Expose the session user projection to every template."""
    return {
        "session_user": get_session_user(request),
        "current_path": request.path,
    }
