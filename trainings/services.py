# services.py
"""
Data-access layer: thin wrappers around store calls used by the views.

Nothing here caches; every call reads the store again so the pages always
reflect the latest writes.
"""
import logging

from django.contrib.auth.hashers import make_password
from django.db import IntegrityError, DatabaseError
from django.db.models import Prefetch, Q

from . import accounts
from .exceptions import BackendError
from .models import (
    ExpenseCategory,
    Manager,
    NewAccount,
    Trainer,
    Training,
    TrainingExpense,
    UserRole,
)

logger = logging.getLogger(__name__)


# -------------------------
# Trainings
# -------------------------
def training_queryset():
    """Trainings with trainer, media, expenses (+category) and extension activity embedded."""
    return (
        Training.objects
        .select_related("trainer", "extension_activity")
        .prefetch_related(
            "media",
            Prefetch("expenses", queryset=TrainingExpense.objects.select_related("category")),
        )
        .order_by("-created_at", "-id")
    )


def list_trainings(trainer_id=None, search=""):
    qs = training_queryset()
    if trainer_id is not None:
        qs = qs.filter(trainer_id=trainer_id)
    search = (search or "").strip()
    if search:
        qs = qs.filter(
            Q(title__icontains=search)
            | Q(description__icontains=search)
            | Q(gps_address__icontains=search)
        )
    return list(qs)


def get_training(training_id):
    try:
        return training_queryset().get(pk=training_id)
    except Training.DoesNotExist:
        raise BackendError("Training not found")


def delete_training(training_id):
    deleted, _ = Training.objects.filter(pk=training_id).delete()
    if not deleted:
        raise BackendError("Training not found")
    logger.info("Deleted training %s", training_id)


def list_expense_categories():
    return list(ExpenseCategory.objects.order_by("name"))


# -------------------------
# Trainers
# -------------------------
def list_trainers(search=""):
    qs = Trainer.objects.order_by("-created_at", "-id")
    search = (search or "").strip()
    if search:
        qs = qs.filter(Q(name__icontains=search) | Q(email__icontains=search))
    return list(qs)


def get_trainer(trainer_id):
    try:
        return Trainer.objects.get(pk=trainer_id)
    except Trainer.DoesNotExist:
        raise BackendError("Trainer not found")


def add_trainer(email, password, name, discipline="", post="", created_by=None):
    """
    Provision a trainer: auth identity, trainers row, then the trainer role grant.
    A failing role grant is logged only; the trainer can still sign in because
    trainer resolution goes through the trainers table.
    """
    user = accounts.sign_up(email, password, name)

    manager = None
    if created_by is not None:
        manager = Manager.objects.filter(pk=created_by).first()

    try:
        trainer = Trainer.objects.create(
            user=user,
            email=user.email,
            name=name,
            discipline=discipline or None,
            post=post or None,
            created_by=manager,
        )
    except (IntegrityError, DatabaseError) as exc:
        logger.exception("add_trainer: trainer insert failed for %s", email)
        raise BackendError(str(exc)) from exc

    try:
        UserRole.objects.create(user=user, role=UserRole.ROLE_TRAINER)
    except (IntegrityError, DatabaseError):
        logger.exception("add_trainer: role grant failed for %s", email)

    logger.info("Trainer %s (%s) created", trainer.pk, trainer.email)
    return trainer


def delete_trainer(trainer_id):
    deleted, _ = Trainer.objects.filter(pk=trainer_id).delete()
    if not deleted:
        raise BackendError("Trainer not found")
    logger.info("Deleted trainer %s", trainer_id)


# -------------------------
# Account requests
# -------------------------
def create_account_request(name, post, discipline, contact_method, password, email=None, phone=None, heads_email=None):
    is_email = contact_method == NewAccount.CONTACT_EMAIL
    try:
        return NewAccount.objects.create(
            name=name,
            post=post,
            discipline=discipline,
            heads_email=None if post == "Head" else (heads_email or None),
            contact_method=contact_method,
            email=email if is_email else None,
            phone=None if is_email else phone,
            password=make_password(password),
        )
    except (IntegrityError, DatabaseError) as exc:
        logger.exception("create_account_request failed for %s", email or phone)
        raise BackendError(str(exc)) from exc
