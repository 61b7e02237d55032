# models.py
from django.db import models
from django.contrib.auth.models import AbstractUser
from django.conf import settings


# -------------------------
# Core user model (auth identity)
# -------------------------
class User(AbstractUser):
    """
    Auth identity. The username is the email address; the application role is
    not stored here but resolved from the managers / user_roles / trainers
    tables on every session (see accounts.py).
    """
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.email or self.username


# -------------------------
# Manager (Head)
# -------------------------
class Manager(models.Model):
    name = models.CharField(max_length=200)
    email = models.EmailField(unique=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "managers"
        verbose_name = "Manager"
        verbose_name_plural = "Managers"

    def __str__(self):
        return f"{self.name} <{self.email}>"


# -------------------------
# UserRole (explicit role grants)
# -------------------------
class UserRole(models.Model):
    ROLE_MANAGER = "manager"
    ROLE_TRAINER = "trainer"
    ROLE_CHOICES = [
        (ROLE_MANAGER, "Manager"),
        (ROLE_TRAINER, "Trainer"),
    ]

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="role_grants")
    role = models.CharField(max_length=20, choices=ROLE_CHOICES)

    class Meta:
        db_table = "user_roles"
        verbose_name = "User Role"
        verbose_name_plural = "User Roles"
        unique_together = ("user", "role")

    def __str__(self):
        return f"{self.user} -> {self.role}"


# -------------------------
# Trainer (Scientist)
# -------------------------
class Trainer(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="trainer_profile",
        help_text="Auth identity this trainer signs in with",
    )
    name = models.CharField(max_length=200)
    email = models.EmailField(db_index=True)
    discipline = models.CharField(max_length=200, blank=True, null=True)
    post = models.CharField(max_length=200, blank=True, null=True)

    created_by = models.ForeignKey(
        Manager,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="trainers_created",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "trainers"
        verbose_name = "Trainer"
        verbose_name_plural = "Trainers"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["name"], name="trainers_name_9f1a1d_idx"),
        ]

    def __str__(self):
        return self.name


# -------------------------
# ExpenseCategory
# -------------------------
class ExpenseCategory(models.Model):
    name = models.CharField(max_length=120, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "expense_categories"
        verbose_name = "Expense Category"
        verbose_name_plural = "Expense Categories"
        ordering = ["name"]

    def __str__(self):
        return self.name


# -------------------------
# Training (training event)
# -------------------------
class Training(models.Model):
    TYPE_FARMER_FARMWOMAN = "farmer_farmwoman"
    TYPE_RURAL_YOUTH = "rural_youth"
    TYPE_INSERVICE = "inservice"
    TYPE_CHOICES = [
        (TYPE_FARMER_FARMWOMAN, "Farmer / Farm Woman"),
        (TYPE_RURAL_YOUTH, "Rural Youth"),
        (TYPE_INSERVICE, "Inservice"),
    ]

    MODE_ON_CAMPUS = "on_campus"
    MODE_OFF_CAMPUS = "off_campus"
    MODE_CHOICES = [
        (MODE_ON_CAMPUS, "On Campus"),
        (MODE_OFF_CAMPUS, "Off Campus"),
    ]

    trainer = models.ForeignKey(Trainer, on_delete=models.CASCADE, related_name="trainings")
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    training_type = models.CharField("Training Type", max_length=32, choices=TYPE_CHOICES)
    training_mode = models.CharField("Training Mode", max_length=16, choices=MODE_CHOICES)

    # Attendance; gender and social category counts are independent of each other
    total_farmers_male = models.PositiveIntegerField("Male Farmers", default=0)
    total_farmers_female = models.PositiveIntegerField("Female Farmers", default=0)
    demographics_sc = models.PositiveIntegerField("SC", default=0)
    demographics_st = models.PositiveIntegerField("ST", default=0)
    demographics_gen = models.PositiveIntegerField("GEN", default=0)
    demographics_obc = models.PositiveIntegerField("OBC", default=0)

    gps_lat = models.FloatField("Latitude", blank=True, null=True)
    gps_lng = models.FloatField("Longitude", blank=True, null=True)
    gps_address = models.CharField("Address / Venue", max_length=500, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "trainings"
        verbose_name = "Training"
        verbose_name_plural = "Trainings"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["trainer", "created_at"], name="trainings_trainer_4c2b7e_idx"),
            models.Index(fields=["training_mode"], name="trainings_trainin_8d0e3a_idx"),
        ]

    def __str__(self):
        return f"{self.title} ({self.get_training_mode_display()})"

    @property
    def total_farmers(self):
        return (self.total_farmers_male or 0) + (self.total_farmers_female or 0)

    @property
    def total_expenses(self):
        return sum((e.amount for e in self.expenses.all()), 0)


# -------------------------
# TrainingMedia
# -------------------------
class TrainingMedia(models.Model):
    FILE_TYPE_CHOICES = [
        ("image", "Image"),
        ("video", "Video"),
    ]

    training = models.ForeignKey(Training, on_delete=models.CASCADE, related_name="media")
    file_url = models.CharField(max_length=1000)
    file_type = models.CharField(max_length=10, choices=FILE_TYPE_CHOICES)
    file_name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "training_media"
        verbose_name = "Training Media"
        verbose_name_plural = "Training Media"
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"{self.file_name} ({self.file_type})"


# -------------------------
# TrainingExpense
# -------------------------
class TrainingExpense(models.Model):
    training = models.ForeignKey(Training, on_delete=models.CASCADE, related_name="expenses")
    expense_name = models.CharField(max_length=255)
    amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    category = models.ForeignKey(
        ExpenseCategory,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="expenses",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "training_expenses"
        verbose_name = "Training Expense"
        verbose_name_plural = "Training Expenses"
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"{self.expense_name}: {self.amount}"


# -------------------------
# ExtensionActivity
# -------------------------
class ExtensionActivity(models.Model):
    """Outreach-partner involvement recorded against a single training."""
    training = models.OneToOneField(Training, on_delete=models.CASCADE, related_name="extension_activity")
    partner_organization = models.CharField("Partner Organisation", max_length=255)
    activity_type = models.CharField("Activity Type", max_length=120, blank=True, null=True)
    participants = models.PositiveIntegerField(blank=True, null=True)
    remarks = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "extension_activities"
        verbose_name = "Extension Activity"
        verbose_name_plural = "Extension Activities"

    def __str__(self):
        return f"{self.partner_organization} - {self.training_id}"


# -------------------------
# NewAccount (self-service account requests)
# -------------------------
class NewAccount(models.Model):
    POST_CHOICES = [
        ("Scientist", "Scientist"),
        ("STO", "STO"),
        ("Head", "Head"),
    ]
    CONTACT_EMAIL = 1
    CONTACT_PHONE = 2
    CONTACT_METHOD_CHOICES = [
        (CONTACT_EMAIL, "Email"),
        (CONTACT_PHONE, "Phone"),
    ]

    name = models.CharField(max_length=200)
    post = models.CharField(max_length=20, choices=POST_CHOICES)
    discipline = models.CharField(max_length=200)
    heads_email = models.EmailField(blank=True, null=True)
    contact_method = models.PositiveSmallIntegerField(choices=CONTACT_METHOD_CHOICES, default=CONTACT_EMAIL)
    email = models.EmailField(blank=True, null=True)
    phone = models.CharField(max_length=20, blank=True, null=True)
    password = models.CharField(max_length=128)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "new_accounts"
        verbose_name = "Account Request"
        verbose_name_plural = "Account Requests"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.post})"
