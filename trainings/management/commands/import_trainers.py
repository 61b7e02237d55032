# import_trainers.py
from pathlib import Path

import pandas as pd
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from trainings import services
from trainings.exceptions import BackendError
from trainings.forms import AddTrainerForm
from trainings.models import Manager

COLUMNS = ("name", "email", "password", "discipline", "post")


def normalize(s):
    if s is None or (isinstance(s, float) and pd.isna(s)):
        return ""
    return str(s).strip()


class Command(BaseCommand):
    help = "Create trainer accounts from Excel. Headers expected: Name, Email, Password, Discipline, Post."

    def add_arguments(self, parser):
        parser.add_argument("file", help="Path to Excel file (.xlsx)")
        parser.add_argument("--manager", help="Email of the manager recorded as creator")
        parser.add_argument("--dry-run", action="store_true", help="Validate rows without writing to DB")

    def handle(self, *args, **options):
        path = Path(options["file"])
        if not path.exists():
            raise CommandError(f"File not found: {path}")

        try:
            df = pd.read_excel(path, engine="openpyxl", dtype=str)
        except Exception as e:
            raise CommandError(f"Failed reading Excel: {e}")

        if df.empty:
            self.stdout.write(self.style.WARNING("Excel is empty"))
            return

        # header lookup is case-insensitive
        col_map = {c.strip().lower(): c for c in df.columns}
        missing = [c for c in COLUMNS if c not in col_map]
        if missing:
            raise CommandError(f"Missing columns: {', '.join(missing)}. Found: {list(df.columns)}")

        manager_id = None
        if options.get("manager"):
            manager = Manager.objects.filter(email__iexact=options["manager"].strip()).first()
            if manager is None:
                raise CommandError(f"No manager with email {options['manager']}")
            manager_id = manager.pk

        created = 0
        skipped = 0
        for idx, r in df.iterrows():
            row_no = idx + 2  # header is row 1
            data = {c: normalize(r.get(col_map[c])) for c in COLUMNS}
            form = AddTrainerForm(data)
            if not form.is_valid():
                first = next(iter(form.errors.values()))[0]
                self.stderr.write(self.style.ERROR(f"Row {row_no}: {first}"))
                skipped += 1
                continue

            cd = form.cleaned_data
            if options["dry_run"]:
                self.stdout.write(f"Would create trainer: {cd['name']} <{cd['email']}>")
                created += 1
                continue

            try:
                with transaction.atomic():
                    services.add_trainer(
                        email=cd["email"],
                        password=cd["password"],
                        name=cd["name"],
                        discipline=cd["discipline"],
                        post=cd["post"],
                        created_by=manager_id,
                    )
            except BackendError as e:
                self.stderr.write(self.style.ERROR(f"Row {row_no}: {e}"))
                skipped += 1
                continue
            created += 1

        verb = "Would create" if options["dry_run"] else "Created"
        self.stdout.write(self.style.SUCCESS(f"{verb} {created} trainer(s), skipped {skipped}."))
