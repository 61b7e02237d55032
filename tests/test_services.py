"""
Tests for the data-access layer.
"""
import pytest
from django.contrib.auth.hashers import check_password

from trainings import services
from trainings.exceptions import BackendError
from trainings.models import NewAccount, Trainer, Training, UserRole

pytestmark = pytest.mark.django_db


class TestTrainings:
    def test_list_is_newest_first_and_scoped(self, trainer, other_trainer, make_training):
        first = make_training(trainer, title="First")
        second = make_training(trainer, title="Second")
        make_training(other_trainer, title="Elsewhere")

        assert [t.pk for t in services.list_trainings(trainer_id=trainer.pk)] == [second.pk, first.pk]
        assert len(services.list_trainings()) == 3

    def test_search_matches_title_description_and_address(self, trainer, make_training):
        make_training(trainer, title="Mushroom cultivation")
        make_training(trainer, title="Goat rearing", description="includes mushroom compost")
        make_training(trainer, title="Bee keeping", gps_address="Mushroom Farm Road")
        make_training(trainer, title="Dairy")

        assert len(services.list_trainings(search="mushroom")) == 3
        assert len(services.list_trainings(search="   ")) == 4

    def test_get_and_delete(self, trainer, make_training):
        t = make_training(trainer)
        assert services.get_training(t.pk).pk == t.pk

        services.delete_training(t.pk)
        assert not Training.objects.filter(pk=t.pk).exists()

        with pytest.raises(BackendError, match="Training not found"):
            services.get_training(t.pk)
        with pytest.raises(BackendError, match="Training not found"):
            services.delete_training(t.pk)


class TestTrainers:
    def test_add_trainer_provisions_identity_row_and_grant(self, manager):
        t = services.add_trainer(
            email="New@KVK.example",
            password="pass1234",
            name="New Scientist",
            discipline="Horticulture",
            post="Scientist",
            created_by=manager.pk,
        )
        assert t.email == "new@kvk.example"
        assert t.created_by == manager
        assert t.user.check_password("pass1234")
        assert UserRole.objects.filter(user=t.user, role=UserRole.ROLE_TRAINER).exists()

    def test_add_trainer_duplicate_email(self, trainer):
        with pytest.raises(BackendError, match="already registered"):
            services.add_trainer(email=trainer.email, password="pass1234", name="Copy")
        assert Trainer.objects.count() == 1

    def test_search(self, trainer, other_trainer):
        assert services.list_trainers(search="asha") == [trainer]
        assert services.list_trainers(search="OTHER@") == [other_trainer]
        assert len(services.list_trainers()) == 2

    def test_delete_trainer_removes_their_trainings(self, trainer, make_training):
        make_training(trainer)
        services.delete_trainer(trainer.pk)
        assert Training.objects.count() == 0
        with pytest.raises(BackendError, match="Trainer not found"):
            services.get_trainer(trainer.pk)


class TestAccountRequests:
    def test_email_request(self):
        req = services.create_account_request(
            name="Meena",
            post="Scientist",
            discipline="Soil Science",
            contact_method=NewAccount.CONTACT_EMAIL,
            password="pass1234",
            email="meena@kvk.example",
            phone="9876543210",
            heads_email="head@kvk.example",
        )
        assert req.phone is None
        assert req.heads_email == "head@kvk.example"
        assert req.password != "pass1234"
        assert check_password("pass1234", req.password)

    def test_head_has_no_heads_email(self):
        req = services.create_account_request(
            name="Head",
            post="Head",
            discipline="Extension",
            contact_method=NewAccount.CONTACT_PHONE,
            password="pass1234",
            phone="9876543210",
            heads_email="ignored@kvk.example",
        )
        assert req.heads_email is None
        assert req.email is None
        assert req.phone == "9876543210"
