"""
Tests for role resolution and the sign-in / sign-up contract.
"""
import logging

import pytest
from django.contrib.auth import get_user_model
from django.urls import reverse

from trainings.accounts import ROLE_MANAGER, ROLE_TRAINER, resolve_session_user, sign_up
from trainings.exceptions import AccountNotFound, BackendError
from trainings.models import Manager, Trainer, UserRole

from .conftest import PASSWORD

pytestmark = pytest.mark.django_db


class TestResolveSessionUser:
    def test_manager_needs_row_and_grant(self, manager, manager_user):
        su = resolve_session_user(manager_user)
        assert su.role == ROLE_MANAGER
        assert su.is_manager and not su.is_trainer
        assert su.manager_id == manager.pk
        assert su.name == "Dr. Head"

    def test_manager_email_match_is_case_insensitive(self, make_user):
        user = make_user("Chief@KVK.example")
        Manager.objects.create(name="Chief", email="chief@kvk.example")
        UserRole.objects.create(user=user, role=UserRole.ROLE_MANAGER)
        assert resolve_session_user(user).is_manager

    def test_manager_row_without_grant_is_not_a_manager(self, make_user):
        user = make_user("nogrant@kvk.example")
        Manager.objects.create(name="No Grant", email="nogrant@kvk.example")
        with pytest.raises(AccountNotFound):
            resolve_session_user(user)

    def test_manager_row_without_grant_falls_through_to_trainer(self, make_user):
        user = make_user("both@kvk.example")
        Manager.objects.create(name="Both", email="both@kvk.example")
        trainer = Trainer.objects.create(user=user, name="Both", email=user.email)
        su = resolve_session_user(user)
        assert su.role == ROLE_TRAINER
        assert su.trainer_id == trainer.pk

    def test_grant_without_manager_row_is_not_a_manager(self, make_user):
        user = make_user("grantonly@kvk.example")
        UserRole.objects.create(user=user, role=UserRole.ROLE_MANAGER)
        with pytest.raises(AccountNotFound):
            resolve_session_user(user)

    def test_trainer(self, trainer):
        su = resolve_session_user(trainer.user)
        assert su.is_trainer
        assert su.trainer_id == trainer.pk
        assert su.email == trainer.email

    def test_unknown_identity(self, make_user):
        with pytest.raises(AccountNotFound) as exc:
            resolve_session_user(make_user("nobody@kvk.example"))
        assert str(exc.value) == "Account not found"


class TestSignUp:
    def test_username_is_lowercased_email(self):
        user = sign_up("New.Person@KVK.example", "pass1234", "New Person")
        assert user.username == "new.person@kvk.example"
        assert user.email == "new.person@kvk.example"
        assert user.first_name == "New Person"
        assert user.check_password("pass1234")

    def test_duplicate_is_rejected(self, make_user):
        make_user("dup@kvk.example")
        with pytest.raises(BackendError, match="already registered"):
            sign_up("DUP@kvk.example", "pass1234")


class TestSignInFlow:
    def test_trainer_signs_in(self, client, trainer):
        response = client.post(reverse("login"), {"email": "Scientist@KVK.example", "password": PASSWORD})
        assert response.status_code == 302
        assert response.url == reverse("dashboard")
        assert client.session["_auth_user_id"] == str(trainer.user.pk)

    def test_bad_password(self, client, trainer):
        response = client.post(reverse("login"), {"email": trainer.email, "password": "wrong"})
        assert response.status_code == 200
        assert "Invalid login credentials" in response.content.decode()
        assert "_auth_user_id" not in client.session

    def test_identity_without_role_is_signed_out(self, client, make_user):
        make_user("orphan@kvk.example")
        response = client.post(reverse("login"), {"email": "orphan@kvk.example", "password": PASSWORD})
        assert response.status_code == 200
        assert "Account not found" in response.content.decode()
        assert "_auth_user_id" not in client.session

    def test_restored_session_is_resolved_again(self, client, trainer):
        client.force_login(trainer.user)
        assert client.get(reverse("dashboard")).status_code == 200

        # trainer row removed out of band: next request signs the identity out
        Trainer.objects.filter(pk=trainer.pk).update(user=None)
        response = client.get(reverse("dashboard"))
        assert response.status_code == 302
        assert response.url == reverse("login")
        assert "_auth_user_id" not in client.session

    def test_logout(self, trainer_client):
        response = trainer_client.get(reverse("logout"))
        assert response.status_code == 302
        assert "_auth_user_id" not in trainer_client.session


def test_deleting_trainer_deactivates_identity(trainer):
    user_id = trainer.user_id
    trainer.delete()
    assert get_user_model().objects.get(pk=user_id).is_active is False


def test_refused_sign_in_is_logged(client, trainer, caplog, monkeypatch):
    monkeypatch.setattr(logging.getLogger("trainings"), "propagate", True)
    with caplog.at_level(logging.WARNING, logger="trainings.views"):
        client.post(reverse("login"), {"email": trainer.email, "password": "wrong"})

    records = [r for r in caplog.records if r.name == "trainings.views"]
    assert [r.getMessage() for r in records] == [f"Sign-in refused for {trainer.email}: Invalid login credentials"]
    assert records[0].args[0] == trainer.email
