# signals.py
import logging

from django.contrib.auth.signals import user_logged_in, user_logged_out, user_login_failed
from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import Trainer

logger = logging.getLogger(__name__)


@receiver(user_logged_in)
def on_session_started(sender, request, user, **kwargs):
    logger.info("Session started for %s", user)


@receiver(user_logged_out)
def on_session_ended(sender, request, user, **kwargs):
    logger.info("Session ended for %s", user)


@receiver(user_login_failed)
def on_login_failed(sender, credentials, request=None, **kwargs):
    logger.warning("Login failed for %s", credentials.get("username"))


@receiver(post_delete, sender=Trainer)
def deactivate_trainer_identity(sender, instance: Trainer, **kwargs):
    """
    A deleted trainer keeps no way in: the linked identity is deactivated so a
    stale session cannot resolve to anything.
    """
    user = instance.user
    if user is None:
        return
    try:
        user.is_active = False
        user.save(update_fields=["is_active"])
    except Exception as exc:
        logger.exception("Could not deactivate identity for trainer %s: %s", instance.pk, exc)
