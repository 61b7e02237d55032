"""
Shared fixtures: in-memory media storage, a manager and a trainer with
logged-in clients.
"""
import pytest
from django.contrib.auth import get_user_model

from trainings.models import Manager, Trainer, Training, UserRole

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def memory_storage(settings):
    """Keep uploaded media out of the filesystem."""
    settings.STORAGES = {
        "default": {"BACKEND": "django.core.files.storage.InMemoryStorage"},
        "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
    }
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def make_user(db):
    def _make(email, password=PASSWORD, **extra):
        return get_user_model().objects.create_user(username=email, email=email, password=password, **extra)
    return _make


@pytest.fixture
def manager(make_user):
    """Manager with both the managers row and the manager grant."""
    user = make_user("head@kvk.example")
    row = Manager.objects.create(name="Dr. Head", email="head@kvk.example")
    UserRole.objects.create(user=user, role=UserRole.ROLE_MANAGER)
    return row


@pytest.fixture
def manager_user(manager):
    return get_user_model().objects.get(username=manager.email)


@pytest.fixture
def trainer(make_user):
    user = make_user("scientist@kvk.example", first_name="Asha")
    t = Trainer.objects.create(user=user, name="Asha Rao", email=user.email, discipline="Agronomy", post="Scientist")
    UserRole.objects.create(user=user, role=UserRole.ROLE_TRAINER)
    return t


@pytest.fixture
def other_trainer(make_user):
    user = make_user("other@kvk.example")
    return Trainer.objects.create(user=user, name="Ravi Kumar", email=user.email)


@pytest.fixture
def manager_client(client, manager_user):
    client.force_login(manager_user)
    return client


@pytest.fixture
def trainer_client(client, trainer):
    client.force_login(trainer.user)
    return client


@pytest.fixture
def make_training():
    def _make(trainer, **fields):
        data = {
            "title": "Soil health camp",
            "training_type": Training.TYPE_FARMER_FARMWOMAN,
            "training_mode": Training.MODE_ON_CAMPUS,
        }
        data.update(fields)
        return Training.objects.create(trainer=trainer, **data)
    return _make
