# resources.py
from import_export import fields, resources
from import_export.widgets import ForeignKeyWidget

from .models import ExpenseCategory, Manager, Trainer, Training


# -------------------------
# ExpenseCategory
# -------------------------
class ExpenseCategoryResource(resources.ModelResource):
    class Meta:
        model = ExpenseCategory
        import_id_fields = ("name",)
        skip_unchanged = True
        report_skipped = True
        fields = ("name",)


# -------------------------
# Trainer
# -------------------------
class TrainerResource(resources.ModelResource):
    created_by = fields.Field(
        column_name="created_by",
        attribute="created_by",
        widget=ForeignKeyWidget(Manager, "email"),
    )

    blueprint_sample = {
        "name": "Asha Rao",
        "email": "asha@kvk.example",
        "discipline": "Agronomy",
        "post": "Scientist",
    }

    class Meta:
        model = Trainer
        import_id_fields = ("email",)
        skip_unchanged = True
        report_skipped = True
        fields = ("name", "email", "discipline", "post", "created_by", "created_at")


# -------------------------
# Training (export only; trainings are created through the wizard)
# -------------------------
class TrainingResource(resources.ModelResource):
    trainer = fields.Field(
        column_name="trainer",
        attribute="trainer",
        widget=ForeignKeyWidget(Trainer, "email"),
    )
    total_farmers = fields.Field(column_name="total_farmers", readonly=True)
    total_expenses = fields.Field(column_name="total_expenses", readonly=True)

    blueprint_sample = {
        "training_type": Training.TYPE_FARMER_FARMWOMAN,
        "training_mode": Training.MODE_ON_CAMPUS,
    }

    class Meta:
        model = Training
        skip_unchanged = True
        report_skipped = True
        fields = (
            "id", "trainer", "title", "training_type", "training_mode",
            "total_farmers_male", "total_farmers_female",
            "demographics_sc", "demographics_st", "demographics_gen", "demographics_obc",
            "gps_address", "gps_lat", "gps_lng", "created_at",
            "total_farmers", "total_expenses",
        )

    def get_queryset(self):
        return Training.objects.select_related("trainer").prefetch_related("expenses")

    def dehydrate_total_farmers(self, training):
        return training.total_farmers

    def dehydrate_total_expenses(self, training):
        return training.total_expenses
