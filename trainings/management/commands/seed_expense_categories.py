# seed_expense_categories.py
from django.core.management.base import BaseCommand
from django.db import transaction

from trainings.models import ExpenseCategory

DEFAULT_CATEGORIES = [
    "Venue",
    "Refreshments",
    "Training Material",
    "Travel",
    "Honorarium",
    "Miscellaneous",
]


class Command(BaseCommand):
    help = "Create the default expense categories (existing names are left alone)."

    def add_arguments(self, parser):
        parser.add_argument("--dry-run", action="store_true", help="Don't write to DB")

    def handle(self, *args, **options):
        dry_run = options["dry_run"]
        created = 0
        existing = 0

        with transaction.atomic():
            for name in DEFAULT_CATEGORIES:
                if ExpenseCategory.objects.filter(name__iexact=name).exists():
                    existing += 1
                    continue
                if dry_run:
                    self.stdout.write(f"Would create category: {name}")
                else:
                    ExpenseCategory.objects.create(name=name)
                created += 1

            if dry_run:
                transaction.set_rollback(True)

        if dry_run:
            self.stdout.write(self.style.WARNING(f"DRY RUN: {created} to create, {existing} already present."))
        else:
            self.stdout.write(self.style.SUCCESS(f"Created {created} categories, {existing} already present."))
