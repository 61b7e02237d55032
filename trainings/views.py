import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpResponseForbidden, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from . import services
from .accounts import sign_in, sign_out
from .exceptions import AccountNotFound, BackendError, WizardTransitionError
from .forms import (
    AddTrainerForm,
    CreateAccountForm,
    ExtensionActivityForm,
    LoginForm,
    TrainingDetailsForm,
    TrainingModeForm,
    TrainingTypeForm,
)
from .models import Trainer, Training
from .stats import calculate_stats, trainer_stats
from .storage import stage_media
from .wizard import (
    STEP_MODE,
    STEP_TYPE,
    TrainingWizard,
    expense_lines_from_post,
    submit_training,
)

logger = logging.getLogger(__name__)


def _session_user(request):
    return getattr(request, "session_user", None)


def _first_form_error(form):
    for errors in form.errors.values():
        if errors:
            return str(errors[0])
    return "Please fix the errors and try again."


def home_view(request):
    if _session_user(request):
        return redirect("dashboard")
    return redirect("login")


# -------------------------
# Auth
# -------------------------
def login_view(request):
    if _session_user(request):
        return redirect("dashboard")

    form = LoginForm(request.POST or None)
    if request.method == "POST":
        if not form.is_valid():
            messages.error(request, _first_form_error(form))
            return render(request, "login.html", {"form": form})

        try:
            session_user = sign_in(request, form.cleaned_data["email"], form.cleaned_data["password"])
        except (BackendError, AccountNotFound) as exc:
            logger.warning("Sign-in refused for %s: %s", form.cleaned_data["email"], exc)
            messages.error(request, str(exc))
            return render(request, "login.html", {"form": form})

        messages.success(request, f"Welcome back, {session_user.name}!")
        return redirect("dashboard")

    return render(request, "login.html", {"form": form})


def logout_view(request):
    sign_out(request)
    return redirect("login")


def create_account(request):
    """Public account request form (new_accounts)."""
    form = CreateAccountForm(request.POST or None)
    if request.method == "POST":
        if form.is_valid():
            cd = form.cleaned_data
            try:
                services.create_account_request(
                    name=cd["name"].strip(),
                    post=cd["post"],
                    discipline=cd["discipline"].strip(),
                    contact_method=cd["contact_method_value"],
                    password=cd["password"],
                    email=cd.get("email") or None,
                    phone=cd.get("phone") or None,
                    heads_email=cd.get("heads_email") or None,
                )
            except BackendError as exc:
                messages.error(request, str(exc))
                return render(request, "create_account.html", {"form": form})
            messages.success(request, "Account request submitted. You will be notified once it is approved.")
            return redirect("login")
        messages.error(request, _first_form_error(form))
    return render(request, "create_account.html", {"form": form})


# -------------------------
# Dashboards
# -------------------------
@login_required
def dashboard(request):
    su = _session_user(request)
    if su is None:
        return HttpResponseForbidden("Not authorized")
    if su.is_trainer:
        return _trainer_dashboard(request, su)
    return _manager_dashboard(request, su)


def _trainer_dashboard(request, su):
    trainings = services.list_trainings(trainer_id=su.trainer_id)
    context = {
        "session_user": su,
        "trainings": trainings,
        "stats": calculate_stats(trainings),
        "stats_title": "Dashboard Stats",
    }
    return render(request, "trainer_dashboard.html", context)


def _manager_dashboard(request, su):
    view_mode = request.GET.get("view", "trainers")
    if view_mode not in ("trainers", "trainings"):
        view_mode = "trainers"
    q = (request.GET.get("q") or "").strip()

    all_trainings = services.list_trainings()
    overall = calculate_stats(all_trainings)

    selected_trainer = None
    selected_id = request.GET.get("trainer")
    if selected_id:
        try:
            selected_trainer = services.get_trainer(int(selected_id))
        except (BackendError, ValueError):
            messages.error(request, "Trainer not found")
            return redirect("dashboard")

    context = {
        "session_user": su,
        "view_mode": view_mode,
        "q": q,
        "add_trainer_form": AddTrainerForm(),
        "selected_trainer": selected_trainer,
    }

    if selected_trainer is not None:
        context["trainings"] = [t for t in all_trainings if t.trainer_id == selected_trainer.pk]
        context["stats"] = trainer_stats(all_trainings, selected_trainer.pk)
        context["stats_title"] = f"{selected_trainer.name}'s Stats"
    else:
        context["stats"] = overall
        context["stats_title"] = "Overall Statistics"
        if view_mode == "trainers":
            context["trainer_rows"] = [
                {"trainer": t, "stats": trainer_stats(all_trainings, t.pk)}
                for t in services.list_trainers(search=q)
            ]
        else:
            context["trainings"] = services.list_trainings(search=q) if q else all_trainings

    return render(request, "manager_dashboard.html", context)


@login_required
@require_http_methods(["GET"])
def stats_api(request):
    """DashboardStats for the caller's scope as JSON."""
    su = _session_user(request)
    if su is None:
        return HttpResponseForbidden("Not authorized")

    if su.is_trainer:
        trainings = services.list_trainings(trainer_id=su.trainer_id)
    else:
        trainer_id = request.GET.get("trainer", "").strip()
        try:
            trainings = services.list_trainings(trainer_id=int(trainer_id) if trainer_id != "" else None)
        except ValueError:
            return JsonResponse({"ok": False, "message": "Invalid trainer id"}, status=400)

    return JsonResponse({"ok": True, "stats": calculate_stats(trainings).as_dict()})


# -------------------------
# Trainer management (manager)
# -------------------------
@login_required
@require_POST
def add_trainer(request):
    su = _session_user(request)
    if su is None or not su.is_manager:
        return HttpResponseForbidden("Not authorized")

    form = AddTrainerForm(request.POST)
    if not form.is_valid():
        messages.error(request, _first_form_error(form))
        return redirect("dashboard")

    cd = form.cleaned_data
    try:
        services.add_trainer(
            email=cd["email"],
            password=cd["password"],
            name=cd["name"],
            discipline=cd["discipline"],
            post=cd["post"],
            created_by=su.manager_id,
        )
    except BackendError as exc:
        messages.error(request, str(exc) or "Failed to create Scientist account")
        return redirect("dashboard")

    messages.success(request, "Scientist account created successfully!")
    return redirect("dashboard")


@login_required
@require_POST
def delete_trainer(request, trainer_id):
    su = _session_user(request)
    if su is None or not su.is_manager:
        return HttpResponseForbidden("Not authorized")

    try:
        services.delete_trainer(trainer_id)
    except BackendError as exc:
        messages.error(request, str(exc))
    else:
        messages.success(request, "Trainer deleted successfully")
    return redirect("dashboard")


@login_required
def trainer_credentials(request, trainer_id):
    su = _session_user(request)
    if su is None or not su.is_manager:
        return HttpResponseForbidden("Not authorized")
    trainer = get_object_or_404(Trainer, pk=trainer_id)
    return render(request, "trainer_credentials.html", {"trainer": trainer})


# -------------------------
# Trainings
# -------------------------
def _can_access_training(su, training):
    return su is not None and (su.is_manager or training.trainer_id == su.trainer_id)


@login_required
def training_detail(request, training_id):
    su = _session_user(request)
    try:
        training = services.get_training(training_id)
    except BackendError as exc:
        messages.error(request, str(exc))
        return redirect("dashboard")

    if not _can_access_training(su, training):
        return HttpResponseForbidden("Not authorized")

    extension = getattr(training, "extension_activity", None)
    context = {
        "training": training,
        "media": list(training.media.all()),
        "expenses": list(training.expenses.all()),
        "total_expenses": training.total_expenses,
        "extension": extension,
    }
    return render(request, "training_detail.html", context)


@login_required
@require_POST
def delete_training(request, training_id):
    su = _session_user(request)
    training = get_object_or_404(Training, pk=training_id)
    if not _can_access_training(su, training):
        return HttpResponseForbidden("Not authorized")

    try:
        services.delete_training(training_id)
    except BackendError:
        messages.error(request, "Failed to delete training")
    else:
        messages.success(request, "Training deleted successfully")
    return redirect("dashboard")


# -------------------------
# Training creation wizard (trainer)
# -------------------------
def _render_wizard(request, wizard, details_form=None, extension_form=None, status=200):
    context = {
        "wizard": wizard,
        "type_form": TrainingTypeForm(initial={"training_type": wizard.training_type}),
        "mode_form": TrainingModeForm(initial={"training_mode": wizard.training_mode}),
        "details_form": details_form or TrainingDetailsForm(),
        "extension_form": extension_form or ExtensionActivityForm(),
        "expense_categories": services.list_expense_categories(),
        "type_label": dict(Training.TYPE_CHOICES).get(wizard.training_type, ""),
        "mode_label": dict(Training.MODE_CHOICES).get(wizard.training_mode, ""),
    }
    return render(request, "training_wizard.html", context, status=status)


@login_required
def training_create(request):
    su = _session_user(request)
    if su is None or not su.is_trainer:
        return HttpResponseForbidden("Not authorized")

    if request.method == "GET":
        if request.GET.get("restart"):
            TrainingWizard.clear(request.session)
        wizard = TrainingWizard.from_session(request.session)
        return _render_wizard(request, wizard)

    wizard = TrainingWizard.from_session(request.session)
    action = request.POST.get("action", "next")

    if action == "cancel":
        TrainingWizard.clear(request.session)
        return redirect("dashboard")

    if action == "back":
        wizard.back()
        wizard.to_session(request.session)
        return redirect("training_create")

    if wizard.step in (STEP_TYPE, STEP_MODE):
        form_class, field = (
            (TrainingTypeForm, "training_type") if wizard.step == STEP_TYPE
            else (TrainingModeForm, "training_mode")
        )
        form = form_class(request.POST)
        value = form.cleaned_data[field] if form.is_valid() else None
        try:
            wizard.advance(value)
        except WizardTransitionError:
            messages.error(request, "Please select an option to continue")
        wizard.to_session(request.session)
        return redirect("training_create")

    # details step: submit
    details_form = TrainingDetailsForm(request.POST)
    extension_form = ExtensionActivityForm(request.POST)
    if not details_form.is_valid() or not extension_form.is_valid():
        bad = details_form if details_form.errors else extension_form
        messages.error(request, _first_form_error(bad))
        return _render_wizard(request, wizard, details_form, extension_form, status=400)

    trainer = get_object_or_404(Trainer, pk=su.trainer_id)
    staged, rejected = stage_media(request.FILES.getlist("media_files"))
    if rejected:
        logger.warning("training_create: rejected non-media uploads %s", rejected)
        messages.warning(request, f"Skipped {len(rejected)} file(s): only photos and videos are accepted")

    try:
        submit_training(
            wizard,
            trainer,
            details_form.cleaned_data,
            staged_media=staged,
            expense_lines=expense_lines_from_post(request.POST),
            extension=extension_form.cleaned_data,
        )
    except WizardTransitionError as exc:
        messages.error(request, str(exc))
        return redirect("training_create")
    except BackendError as exc:
        messages.error(request, str(exc))
        return _render_wizard(request, wizard, details_form, extension_form, status=400)

    TrainingWizard.clear(request.session)
    messages.success(request, "Training created successfully!")
    return redirect("dashboard")
