from django.urls import path

from . import views

urlpatterns = [
    path("", views.home_view, name="home"),
    path("login/", views.login_view, name="login"),
    path("logout/", views.logout_view, name="logout"),
    path("create-account/", views.create_account, name="create_account"),

    path("dashboard/", views.dashboard, name="dashboard"),
    path("api/stats/", views.stats_api, name="stats_api"),

    # Trainer management (manager)
    path("trainers/add/", views.add_trainer, name="add_trainer"),
    path("trainers/<int:trainer_id>/delete/", views.delete_trainer, name="delete_trainer"),
    path("trainers/<int:trainer_id>/credentials/", views.trainer_credentials, name="trainer_credentials"),

    # Trainings
    path("trainings/new/", views.training_create, name="training_create"),
    path("trainings/<int:training_id>/", views.training_detail, name="training_detail"),
    path("trainings/<int:training_id>/delete/", views.delete_training, name="delete_training"),
]
