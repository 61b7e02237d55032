import django.contrib.auth.models
import django.contrib.auth.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("username", models.CharField(error_messages={"unique": "A user with that username already exists."}, help_text="Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.", max_length=150, unique=True, validators=[django.contrib.auth.validators.UnicodeUsernameValidator()], verbose_name="username")),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="email address")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "verbose_name": "user",
                "verbose_name_plural": "users",
                "abstract": False,
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="ExpenseCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=120, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Expense Category",
                "verbose_name_plural": "Expense Categories",
                "db_table": "expense_categories",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Manager",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("email", models.EmailField(db_index=True, max_length=254, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Manager",
                "verbose_name_plural": "Managers",
                "db_table": "managers",
            },
        ),
        migrations.CreateModel(
            name="NewAccount",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("post", models.CharField(choices=[("Scientist", "Scientist"), ("STO", "STO"), ("Head", "Head")], max_length=20)),
                ("discipline", models.CharField(max_length=200)),
                ("heads_email", models.EmailField(blank=True, max_length=254, null=True)),
                ("contact_method", models.PositiveSmallIntegerField(choices=[(1, "Email"), (2, "Phone")], default=1)),
                ("email", models.EmailField(blank=True, max_length=254, null=True)),
                ("phone", models.CharField(blank=True, max_length=20, null=True)),
                ("password", models.CharField(max_length=128)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Account Request",
                "verbose_name_plural": "Account Requests",
                "db_table": "new_accounts",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Trainer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("email", models.EmailField(db_index=True, max_length=254)),
                ("discipline", models.CharField(blank=True, max_length=200, null=True)),
                ("post", models.CharField(blank=True, max_length=200, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="trainers_created", to="trainings.manager")),
                ("user", models.OneToOneField(blank=True, help_text="Auth identity this trainer signs in with", null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="trainer_profile", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "Trainer",
                "verbose_name_plural": "Trainers",
                "db_table": "trainers",
                "ordering": ["-created_at", "-id"],
                "indexes": [models.Index(fields=["name"], name="trainers_name_9f1a1d_idx")],
            },
        ),
        migrations.CreateModel(
            name="Training",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("training_type", models.CharField(choices=[("farmer_farmwoman", "Farmer / Farm Woman"), ("rural_youth", "Rural Youth"), ("inservice", "Inservice")], max_length=32, verbose_name="Training Type")),
                ("training_mode", models.CharField(choices=[("on_campus", "On Campus"), ("off_campus", "Off Campus")], max_length=16, verbose_name="Training Mode")),
                ("total_farmers_male", models.PositiveIntegerField(default=0, verbose_name="Male Farmers")),
                ("total_farmers_female", models.PositiveIntegerField(default=0, verbose_name="Female Farmers")),
                ("demographics_sc", models.PositiveIntegerField(default=0, verbose_name="SC")),
                ("demographics_st", models.PositiveIntegerField(default=0, verbose_name="ST")),
                ("demographics_gen", models.PositiveIntegerField(default=0, verbose_name="GEN")),
                ("demographics_obc", models.PositiveIntegerField(default=0, verbose_name="OBC")),
                ("gps_lat", models.FloatField(blank=True, null=True, verbose_name="Latitude")),
                ("gps_lng", models.FloatField(blank=True, null=True, verbose_name="Longitude")),
                ("gps_address", models.CharField(blank=True, max_length=500, null=True, verbose_name="Address / Venue")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("trainer", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="trainings", to="trainings.trainer")),
            ],
            options={
                "verbose_name": "Training",
                "verbose_name_plural": "Trainings",
                "db_table": "trainings",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["trainer", "created_at"], name="trainings_trainer_4c2b7e_idx"),
                    models.Index(fields=["training_mode"], name="trainings_trainin_8d0e3a_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ExtensionActivity",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("partner_organization", models.CharField(max_length=255, verbose_name="Partner Organisation")),
                ("activity_type", models.CharField(blank=True, max_length=120, null=True, verbose_name="Activity Type")),
                ("participants", models.PositiveIntegerField(blank=True, null=True)),
                ("remarks", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("training", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="extension_activity", to="trainings.training")),
            ],
            options={
                "verbose_name": "Extension Activity",
                "verbose_name_plural": "Extension Activities",
                "db_table": "extension_activities",
            },
        ),
        migrations.CreateModel(
            name="TrainingExpense",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("expense_name", models.CharField(max_length=255)),
                ("amount", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("category", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="expenses", to="trainings.expensecategory")),
                ("training", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="expenses", to="trainings.training")),
            ],
            options={
                "verbose_name": "Training Expense",
                "verbose_name_plural": "Training Expenses",
                "db_table": "training_expenses",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="TrainingMedia",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("file_url", models.CharField(max_length=1000)),
                ("file_type", models.CharField(choices=[("image", "Image"), ("video", "Video")], max_length=10)),
                ("file_name", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("training", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="media", to="trainings.training")),
            ],
            options={
                "verbose_name": "Training Media",
                "verbose_name_plural": "Training Media",
                "db_table": "training_media",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="UserRole",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role", models.CharField(choices=[("manager", "Manager"), ("trainer", "Trainer")], max_length=20)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="role_grants", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "User Role",
                "verbose_name_plural": "User Roles",
                "db_table": "user_roles",
                "unique_together": {("user", "role")},
            },
        ),
    ]
