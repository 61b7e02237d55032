# create_manager.py
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from trainings.models import Manager, UserRole

User = get_user_model()


class Command(BaseCommand):
    help = "Provision a manager: auth identity, managers row and manager role grant."

    def add_arguments(self, parser):
        parser.add_argument("--email", required=True)
        parser.add_argument("--name", required=True)
        parser.add_argument("--password", required=True)
        parser.add_argument("--dry-run", action="store_true", help="Don't write to DB")

    def handle(self, *args, **options):
        email = options["email"].strip().lower()
        name = options["name"].strip()
        password = options["password"]

        if not email or "@" not in email:
            raise CommandError(f"Invalid email: {options['email']!r}")
        if not name:
            raise CommandError("Name must not be empty")

        with transaction.atomic():
            user = User.objects.filter(username__iexact=email).first()
            if user is None:
                user = User.objects.create_user(username=email, email=email, password=password, first_name=name)
                self.stdout.write(f"Created identity {email}")
            else:
                user.set_password(password)
                user.save(update_fields=["password"])
                self.stdout.write(f"Identity {email} exists, password reset")

            manager, created = Manager.objects.get_or_create(email=email, defaults={"name": name})
            if not created and manager.name != name:
                manager.name = name
                manager.save(update_fields=["name"])

            UserRole.objects.get_or_create(user=user, role=UserRole.ROLE_MANAGER)

            if options["dry_run"]:
                transaction.set_rollback(True)
                self.stdout.write(self.style.WARNING(f"DRY RUN: manager {email} not saved."))
                return

        self.stdout.write(self.style.SUCCESS(f"Manager {email} ready (managers id {manager.pk})."))
