"""
Tests for the admin blueprint downloads.
"""
from io import BytesIO

import pytest
from django.urls import reverse
from openpyxl import load_workbook

pytestmark = pytest.mark.django_db


def download(client, model_name):
    response = client.get(reverse(f"admin:trainings_{model_name}_download_blueprint"))
    assert response.status_code == 200
    assert response["Content-Disposition"] == f'attachment; filename="{model_name}_blueprint.xlsx"'
    return load_workbook(BytesIO(response.content))


class TestBlueprintDownload:
    def test_trainer_blueprint_has_headers_and_sample(self, admin_client):
        wb = download(admin_client, "trainer")
        rows = list(wb["Blueprint"].iter_rows(values_only=True))
        headers, sample = rows[0], dict(zip(rows[0], rows[1]))
        assert sorted(headers) == ["created_at", "created_by", "discipline", "email", "name", "post"]
        assert sample["email"] == "asha@kvk.example"
        assert sample["created_at"]
        assert "Choices" not in wb.sheetnames

    def test_training_blueprint_lists_choices(self, admin_client):
        wb = download(admin_client, "training")
        choices = {row[0]: list(row[1:]) for row in wb["Choices"].iter_rows(values_only=True)}
        assert choices["training_mode"][:2] == ["on_campus", "off_campus"]
        assert choices["training_type"][:3] == ["farmer_farmwoman", "rural_youth", "inservice"]

    def test_requires_staff(self, trainer_client):
        response = trainer_client.get(reverse("admin:trainings_trainer_download_blueprint"))
        assert response.status_code == 302
