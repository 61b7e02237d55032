# middleware.py
import logging

from django.contrib import messages
from django.contrib.auth import logout
from django.shortcuts import redirect

from .accounts import resolve_session_user
from .exceptions import AccountNotFound

logger = logging.getLogger(__name__)


class SessionUserMiddleware:
    """
    Attach `request.session_user` (a SessionUser or None).

    A restored session goes through the same role resolution as a fresh
    sign-in; an identity that no longer resolves is signed out.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.session_user = None
        user = getattr(request, "user", None)

        if user is not None and user.is_authenticated:
            try:
                request.session_user = resolve_session_user(user)
            except AccountNotFound as exc:
                # admin staff have no application role but keep their session
                if not (user.is_staff and request.path.startswith("/admin/")):
                    logger.warning("Signing out %s: %s", user, exc)
                    logout(request)
                    messages.error(request, str(exc))
                    return redirect("login")

        return self.get_response(request)
