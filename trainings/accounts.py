# accounts.py
"""
Auth contract and role resolution.

An authenticated Django user is only half of a session: the application role
comes from the lookup tables. A manager needs BOTH a `managers` row (matched
by email) and an explicit `manager` grant in `user_roles`; a trainer needs a
`trainers` row linked to the identity. Anything else is "account not found"
and the identity gets signed out.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.contrib.auth import authenticate, get_user_model, login, logout
from django.db import IntegrityError, transaction

from .exceptions import AccountNotFound, BackendError
from .models import Manager, Trainer, UserRole

logger = logging.getLogger(__name__)

ROLE_MANAGER = UserRole.ROLE_MANAGER
ROLE_TRAINER = UserRole.ROLE_TRAINER


@dataclass(frozen=True)
class SessionUser:
    """Per-request auth context handed to views instead of global state."""
    id: int
    email: str
    name: str
    role: str
    trainer_id: Optional[int] = None
    manager_id: Optional[int] = None

    @property
    def is_manager(self):
        return self.role == ROLE_MANAGER

    @property
    def is_trainer(self):
        return self.role == ROLE_TRAINER


def _display_name(user):
    return user.get_full_name() or user.first_name or user.email or user.username


def resolve_session_user(user) -> SessionUser:
    """Resolve the application role for an authenticated identity or raise AccountNotFound."""
    if user is None or not getattr(user, "is_authenticated", False):
        raise AccountNotFound()

    email = (user.email or user.username or "").strip()

    manager = Manager.objects.filter(email__iexact=email).first() if email else None
    if manager is not None:
        if UserRole.objects.filter(user=user, role=ROLE_MANAGER).exists():
            return SessionUser(
                id=user.pk,
                email=manager.email,
                name=manager.name,
                role=ROLE_MANAGER,
                manager_id=manager.pk,
            )
        logger.warning("Manager row for %s has no manager role grant; falling through", email)

    trainer = Trainer.objects.filter(user=user).first()
    if trainer is not None:
        return SessionUser(
            id=user.pk,
            email=trainer.email,
            name=trainer.name or _display_name(user),
            role=ROLE_TRAINER,
            trainer_id=trainer.pk,
        )

    logger.warning("No manager or trainer account for identity %s", email or user.pk)
    raise AccountNotFound()


def sign_up(email, password, name=""):
    """Create an auth identity (username == email) with `name` as metadata."""
    email = (email or "").strip().lower()
    UserModel = get_user_model()
    if UserModel.objects.filter(username__iexact=email).exists():
        raise BackendError("User already registered")
    try:
        with transaction.atomic():
            return UserModel.objects.create_user(username=email, email=email, password=password, first_name=name or "")
    except IntegrityError as exc:
        logger.exception("sign_up: failed to create identity for %s", email)
        raise BackendError(str(exc)) from exc


def sign_in(request, email, password) -> SessionUser:
    """
    Authenticate, resolve the role and establish the session.
    Raises BackendError on bad credentials and AccountNotFound (after signing
    the identity out) when no role resolves.
    """
    email = (email or "").strip().lower()
    logger.info("Sign-in attempt for %s", email)

    user = authenticate(request, username=email, password=password)
    if user is None:
        logger.warning("Authentication failed for %s", email)
        raise BackendError("Invalid login credentials")

    login(request, user)
    try:
        session_user = resolve_session_user(user)
    except AccountNotFound:
        logout(request)
        raise

    logger.info("Signed in %s as %s", email, session_user.role)
    return session_user


def sign_out(request):
    logout(request)
