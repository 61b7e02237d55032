# admin.py
from datetime import date

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin
from django.core.exceptions import FieldDoesNotExist
from django.http import HttpResponse
from django.urls import path
from django.utils.html import format_html
from import_export.admin import ImportExportModelAdmin
from openpyxl import Workbook

from .models import (
    ExpenseCategory,
    ExtensionActivity,
    Manager,
    NewAccount,
    Trainer,
    Training,
    TrainingExpense,
    TrainingMedia,
    User,
    UserRole,
)
from .resources import ExpenseCategoryResource, TrainerResource, TrainingResource


class BlueprintAdminMixin:
    """
    Adds a 'download-blueprint' URL serving an import template for the resource:
    the export headers, one sample row (the resource's `blueprint_sample`, with
    created_at set to today) and, when any column has choices, a Choices sheet.
    """
    def get_urls(self):
        urls = super().get_urls()
        model_name = self.model._meta.model_name
        app_label = self.model._meta.app_label
        custom = [
            path(
                "download-blueprint/",
                self.admin_site.admin_view(self.download_blueprint),
                name=f"{app_label}_{model_name}_download_blueprint",
            ),
        ]
        return custom + urls

    def download_blueprint(self, request):
        resource = getattr(self, "resource_class", None)
        if resource is None:
            raise NotImplementedError("Resource class not defined for blueprint export.")
        res = resource()
        headers = res.get_export_headers()
        sample = dict(getattr(res, "blueprint_sample", {}))
        sample.setdefault("created_at", date.today().strftime("%Y-%m-%d"))

        wb = Workbook()
        ws = wb.active
        ws.title = "Blueprint"
        ws.append(headers)
        ws.append([sample.get(h, "") for h in headers])
        ws.freeze_panes = "A2"

        choices = {}
        for h in headers:
            try:
                field = self.model._meta.get_field(h)
            except FieldDoesNotExist:
                continue
            if field.choices:
                choices[h] = [str(value) for value, _ in field.choices]
        if choices:
            cs = wb.create_sheet("Choices")
            for column, values in choices.items():
                cs.append([column, *values])

        response = HttpResponse(
            content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
        filename = f"{self.model._meta.model_name}_blueprint.xlsx"
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        wb.save(response)
        return response


# -------------------------
# Identity and roles
# -------------------------
class UserRoleInline(admin.TabularInline):
    model = UserRole
    extra = 0


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ("id", "username", "email", "first_name", "is_active", "is_staff", "created_at")
    search_fields = ("username", "email", "first_name", "last_name")
    list_filter = ("is_active", "is_staff")
    ordering = ("-created_at",)
    inlines = (UserRoleInline,)


@admin.register(Manager)
class ManagerAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "created_at")
    search_fields = ("name", "email")
    readonly_fields = ("created_at",)


@admin.register(UserRole)
class UserRoleAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "role")
    list_filter = ("role",)
    search_fields = ("user__username", "user__email")
    autocomplete_fields = ("user",)


# -------------------------
# Trainers
# -------------------------
@admin.register(Trainer)
class TrainerAdmin(BlueprintAdminMixin, ImportExportModelAdmin):
    resource_class = TrainerResource
    list_display = ("id", "name", "email", "discipline", "post", "created_by", "training_count", "created_at")
    search_fields = ("name", "email", "discipline")
    list_filter = ("post",)
    list_select_related = ("created_by",)
    readonly_fields = ("created_at", "updated_at")
    autocomplete_fields = ("user",)

    def training_count(self, obj):
        return obj.trainings.count()
    training_count.short_description = "Trainings"


# -------------------------
# Trainings
# -------------------------
class TrainingMediaInline(admin.TabularInline):
    model = TrainingMedia
    extra = 0
    readonly_fields = ("created_at", "preview")
    fields = ("file_name", "file_type", "file_url", "preview", "created_at")

    def preview(self, obj):
        if not obj.file_url:
            return "-"
        return format_html('<a href="{}" target="_blank">open</a>', obj.file_url)


class TrainingExpenseInline(admin.TabularInline):
    model = TrainingExpense
    extra = 0
    readonly_fields = ("created_at",)
    fields = ("expense_name", "amount", "category", "created_at")


class ExtensionActivityInline(admin.StackedInline):
    model = ExtensionActivity
    extra = 0
    readonly_fields = ("created_at",)


@admin.register(Training)
class TrainingAdmin(BlueprintAdminMixin, ImportExportModelAdmin):
    resource_class = TrainingResource
    list_display = ("id", "title", "trainer", "training_type", "training_mode", "total_farmers", "created_at")
    list_filter = ("training_type", "training_mode")
    search_fields = ("title", "description", "gps_address", "trainer__name")
    list_select_related = ("trainer",)
    readonly_fields = ("created_at", "updated_at")
    inlines = (TrainingMediaInline, TrainingExpenseInline, ExtensionActivityInline)
    ordering = ("-created_at",)


@admin.register(ExpenseCategory)
class ExpenseCategoryAdmin(BlueprintAdminMixin, ImportExportModelAdmin):
    resource_class = ExpenseCategoryResource
    list_display = ("id", "name", "created_at")
    search_fields = ("name",)
    readonly_fields = ("created_at",)


# -------------------------
# Account requests
# -------------------------
@admin.register(NewAccount)
class NewAccountAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "post", "discipline", "contact_method", "email", "phone", "heads_email", "created_at")
    list_filter = ("post", "contact_method")
    search_fields = ("name", "email", "phone", "heads_email")
    readonly_fields = ("password", "created_at")
