# wizard.py
"""
Three-step training creation: type selection -> mode selection -> details.

The wizard state lives in the session between requests. Submission is not
transactional: the parent training is written first and each media file and
expense line is written on its own, so a failure part-way leaves the training
with fewer children than were submitted.
"""
import logging

from django import forms
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from . import storage
from .exceptions import WizardTransitionError
from .models import ExpenseCategory, ExtensionActivity, Training, TrainingExpense, TrainingMedia

logger = logging.getLogger(__name__)

STEP_TYPE = "type"
STEP_MODE = "mode"
STEP_DETAILS = "details"
STEPS = (STEP_TYPE, STEP_MODE, STEP_DETAILS)

SESSION_KEY = "training_wizard"

VALID_TYPES = {value for value, _ in Training.TYPE_CHOICES}
VALID_MODES = {value for value, _ in Training.MODE_CHOICES}


class TrainingWizard:
    def __init__(self, step=STEP_TYPE, training_type=None, training_mode=None):
        self.step = step if step in STEPS else STEP_TYPE
        self.training_type = training_type
        self.training_mode = training_mode
        # a restored state may not skip ahead of its selections
        if self.step == STEP_DETAILS and not (self.training_type and self.training_mode):
            self.step = STEP_MODE if self.training_type else STEP_TYPE
        if self.step == STEP_MODE and not self.training_type:
            self.step = STEP_TYPE

    # -- session round trip --
    @classmethod
    def from_session(cls, session):
        data = session.get(SESSION_KEY) or {}
        return cls(
            step=data.get("step", STEP_TYPE),
            training_type=data.get("training_type"),
            training_mode=data.get("training_mode"),
        )

    def to_session(self, session):
        session[SESSION_KEY] = {
            "step": self.step,
            "training_type": self.training_type,
            "training_mode": self.training_mode,
        }

    @staticmethod
    def clear(session):
        session.pop(SESSION_KEY, None)

    # -- transitions --
    @property
    def step_index(self):
        return STEPS.index(self.step)

    def can_advance(self):
        if self.step == STEP_TYPE:
            return self.training_type in VALID_TYPES
        if self.step == STEP_MODE:
            return self.training_mode in VALID_MODES
        return False

    def select(self, value):
        """Record the selection for the current step (None clears it)."""
        if self.step == STEP_TYPE:
            self.training_type = value or None
        elif self.step == STEP_MODE:
            self.training_mode = value or None

    def advance(self, value=None):
        if value is not None:
            self.select(value)
        if not self.can_advance():
            raise WizardTransitionError(f"Please make a selection before continuing ({self.step})")
        self.step = STEPS[self.step_index + 1]
        return self.step

    def back(self):
        if self.step_index > 0:
            self.step = STEPS[self.step_index - 1]
        return self.step

    @property
    def at_details(self):
        return self.step == STEP_DETAILS

    def __repr__(self):
        return f"TrainingWizard(step={self.step!r}, type={self.training_type!r}, mode={self.training_mode!r})"


# -------------------------
# Expense lines
# -------------------------
# same shape as TrainingExpense.amount; NaN, Infinity, negatives and overflow are rejected
_AMOUNT_FIELD = forms.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)


def _parse_amount(raw):
    if raw is None:
        return None
    try:
        return _AMOUNT_FIELD.clean(str(raw).strip())
    except ValidationError:
        return None


def clean_expense_lines(lines):
    """
    Keep only lines that carry both a name and an amount.
    `lines` is an iterable of dicts with 'name', 'amount' and optional 'category'.
    """
    kept = []
    for line in lines or []:
        name = (line.get("name") or "").strip()
        amount = _parse_amount(line.get("amount"))
        if not name or amount is None:
            logger.debug("Dropping incomplete expense line %r", line)
            continue
        kept.append({"name": name, "amount": amount, "category": line.get("category") or None})
    return kept


def expense_lines_from_post(data):
    """Zip the parallel expense_name / expense_amount / expense_category lists of a POST."""
    names = data.getlist("expense_name")
    amounts = data.getlist("expense_amount")
    categories = data.getlist("expense_category")
    lines = []
    for i, name in enumerate(names):
        lines.append({
            "name": name,
            "amount": amounts[i] if i < len(amounts) else "",
            "category": categories[i] if i < len(categories) else "",
        })
    return lines


def _category_for(value):
    if not value:
        return None
    try:
        return ExpenseCategory.objects.filter(pk=int(value)).first()
    except (TypeError, ValueError):
        return None


# -------------------------
# Submission
# -------------------------
def submit_training(wizard, trainer, details, staged_media=(), expense_lines=(), extension=None):
    """
    Persist a training from a completed wizard.

    details: cleaned TrainingDetailsForm data.
    staged_media: StagedMedia items, uploaded one by one; a failing file is skipped.
    expense_lines: raw dicts, filtered through clean_expense_lines.
    extension: optional cleaned extension-activity data.
    Returns the created Training.
    """
    if not wizard.at_details or not (wizard.training_type and wizard.training_mode):
        raise WizardTransitionError("Training type and mode must be selected before submitting")

    # 1) parent record
    training = Training.objects.create(
        trainer=trainer,
        title=details["title"].strip(),
        description=details.get("description") or "",
        training_type=wizard.training_type,
        training_mode=wizard.training_mode,
        total_farmers_male=details.get("total_farmers_male") or 0,
        total_farmers_female=details.get("total_farmers_female") or 0,
        demographics_sc=details.get("demographics_sc") or 0,
        demographics_st=details.get("demographics_st") or 0,
        demographics_gen=details.get("demographics_gen") or 0,
        demographics_obc=details.get("demographics_obc") or 0,
        gps_lat=details.get("gps_lat"),
        gps_lng=details.get("gps_lng"),
        gps_address=details.get("gps_address") or None,
    )
    logger.info("Training %s created by trainer %s", training.pk, trainer.pk)

    # 2) media, sequential, each file isolated
    uploaded = 0
    for item in staged_media:
        try:
            name = storage.upload(storage.media_path(training.pk, item.name), item.file)
            with transaction.atomic():
                TrainingMedia.objects.create(
                    training=training,
                    file_url=storage.public_url(name),
                    file_type=item.file_type,
                    file_name=item.name,
                )
            uploaded += 1
        except Exception:
            # TODO: surface skipped uploads to the user once product decides on partial-failure reporting
            logger.exception("Media upload failed for training %s, skipping %s", training.pk, item.name)

    # 3) expenses, incomplete lines dropped
    expenses = clean_expense_lines(expense_lines)
    saved_expenses = 0
    for line in expenses:
        try:
            with transaction.atomic():
                TrainingExpense.objects.create(
                    training=training,
                    expense_name=line["name"],
                    amount=line["amount"],
                    category=_category_for(line["category"]),
                )
            saved_expenses += 1
        except (DatabaseError, ValidationError):
            logger.exception("Expense insert failed for training %s, skipping %r", training.pk, line["name"])

    # 4) optional extension activity
    if extension and (extension.get("partner_organization") or "").strip():
        ExtensionActivity.objects.create(
            training=training,
            partner_organization=extension["partner_organization"].strip(),
            activity_type=extension.get("activity_type") or None,
            participants=extension.get("participants"),
            remarks=extension.get("remarks") or None,
        )

    logger.info(
        "Training %s: %d/%d media uploaded, %d expense line(s) saved",
        training.pk, uploaded, len(staged_media), saved_expenses,
    )
    return training
