# forms.py
import re

from django import forms
from django.conf import settings

from .models import ExtensionActivity, NewAccount, Training

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _min_password_length():
    return getattr(settings, "AGRITRAIN_MIN_PASSWORD_LENGTH", 6)


class LoginForm(forms.Form):
    email = forms.CharField(max_length=254, label="Email")
    password = forms.CharField(widget=forms.PasswordInput, label="Password")

    def clean_email(self):
        return self.cleaned_data["email"].strip().lower()


class AddTrainerForm(forms.Form):
    """Manager-side form that provisions a Scientist account."""
    name = forms.CharField(max_length=200, label="Full Name")
    email = forms.CharField(max_length=254, label="Email")
    password = forms.CharField(widget=forms.PasswordInput, label="Password")
    discipline = forms.CharField(max_length=200, label="Discipline")
    post = forms.CharField(max_length=200, label="Post")

    def clean_name(self):
        name = self.cleaned_data["name"].strip()
        if not name:
            raise forms.ValidationError("Please fill in all fields")
        return name

    def clean_email(self):
        email = self.cleaned_data["email"].strip().lower()
        if not EMAIL_RE.match(email):
            raise forms.ValidationError("Please enter a valid email address")
        return email

    def clean_password(self):
        p = self.cleaned_data["password"]
        if not p.strip():
            raise forms.ValidationError("Please fill in all fields")
        if len(p) < _min_password_length():
            raise forms.ValidationError(f"Password must be at least {_min_password_length()} characters")
        return p

    def clean_discipline(self):
        d = self.cleaned_data["discipline"].strip()
        if not d:
            raise forms.ValidationError("Please fill in all fields")
        return d

    def clean_post(self):
        p = self.cleaned_data["post"].strip()
        if not p:
            raise forms.ValidationError("Please fill in all fields")
        return p


class CreateAccountForm(forms.Form):
    """Public account request; lands in new_accounts for a Head to act on."""
    CONTACT_CHOICES = [("email", "Email"), ("phone", "Phone")]

    name = forms.CharField(max_length=200)
    post = forms.ChoiceField(choices=NewAccount.POST_CHOICES)
    discipline = forms.CharField(max_length=200)
    heads_email = forms.CharField(max_length=254, required=False, label="Head's Email")
    contact_method = forms.ChoiceField(choices=CONTACT_CHOICES, initial="email", widget=forms.RadioSelect)
    email = forms.CharField(max_length=254, required=False)
    phone = forms.CharField(max_length=20, required=False)
    password = forms.CharField(widget=forms.PasswordInput)
    confirm_password = forms.CharField(widget=forms.PasswordInput, label="Confirm password")

    def clean(self):
        cleaned = super().clean()
        if self.errors:
            return cleaned

        method = cleaned.get("contact_method")
        email = (cleaned.get("email") or "").strip()
        phone = (cleaned.get("phone") or "").strip()
        heads_email = (cleaned.get("heads_email") or "").strip()
        post = cleaned.get("post")
        password = cleaned.get("password") or ""
        confirm = cleaned.get("confirm_password") or ""

        if not cleaned.get("name", "").strip() or not cleaned.get("discipline", "").strip():
            raise forms.ValidationError("Please fill in all fields")

        if method == "email":
            if not email:
                raise forms.ValidationError("Please enter your email address")
            if not EMAIL_RE.match(email):
                raise forms.ValidationError("Please enter a valid email address")
        else:
            if not phone:
                raise forms.ValidationError("Please enter your phone number")
            if not re.fullmatch(r"\d{10}", re.sub(r"\D", "", phone)):
                raise forms.ValidationError("Please enter a valid 10-digit phone number")

        if post != "Head" and not heads_email:
            raise forms.ValidationError("Please enter your head's email address")
        if heads_email and not EMAIL_RE.match(heads_email):
            raise forms.ValidationError("Please enter a valid email address for head")

        if len(password) < _min_password_length():
            raise forms.ValidationError(f"Password must be at least {_min_password_length()} characters")
        if password != confirm:
            raise forms.ValidationError("Passwords do not match")

        cleaned["email"] = email
        cleaned["phone"] = phone
        cleaned["heads_email"] = heads_email
        cleaned["contact_method_value"] = (
            NewAccount.CONTACT_EMAIL if method == "email" else NewAccount.CONTACT_PHONE
        )
        return cleaned


# -------------------------
# Training wizard
# -------------------------
class TrainingTypeForm(forms.Form):
    training_type = forms.ChoiceField(choices=Training.TYPE_CHOICES, widget=forms.RadioSelect)


class TrainingModeForm(forms.Form):
    training_mode = forms.ChoiceField(choices=Training.MODE_CHOICES, widget=forms.RadioSelect)


class TrainingDetailsForm(forms.ModelForm):
    title = forms.CharField(max_length=255, required=False, label="Training Title")
    total_farmers_male = forms.IntegerField(min_value=0, required=False, label="Male Farmers")
    total_farmers_female = forms.IntegerField(min_value=0, required=False, label="Female Farmers")
    demographics_sc = forms.IntegerField(min_value=0, required=False, label="SC")
    demographics_st = forms.IntegerField(min_value=0, required=False, label="ST")
    demographics_gen = forms.IntegerField(min_value=0, required=False, label="GEN")
    demographics_obc = forms.IntegerField(min_value=0, required=False, label="OBC")
    gps_lat = forms.FloatField(min_value=-90, max_value=90, required=False, label="Latitude")
    gps_lng = forms.FloatField(min_value=-180, max_value=180, required=False, label="Longitude")

    class Meta:
        model = Training
        fields = [
            "title", "description",
            "total_farmers_male", "total_farmers_female",
            "demographics_sc", "demographics_st", "demographics_gen", "demographics_obc",
            "gps_address", "gps_lat", "gps_lng",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }

    def clean_title(self):
        title = (self.cleaned_data.get("title") or "").strip()
        if not title:
            raise forms.ValidationError("Please enter a training title")
        return title

    def clean(self):
        cleaned = super().clean()
        # blank counts mean zero
        for f in ("total_farmers_male", "total_farmers_female",
                  "demographics_sc", "demographics_st", "demographics_gen", "demographics_obc"):
            if cleaned.get(f) is None and f not in self.errors:
                cleaned[f] = 0
        return cleaned


class ExtensionActivityForm(forms.ModelForm):
    partner_organization = forms.CharField(max_length=255, required=False, label="Partner Organisation")

    class Meta:
        model = ExtensionActivity
        fields = ["partner_organization", "activity_type", "participants", "remarks"]
        widgets = {
            "remarks": forms.Textarea(attrs={"rows": 2}),
        }

    def clean(self):
        cleaned = super().clean()
        others = [cleaned.get("activity_type"), cleaned.get("participants"), cleaned.get("remarks")]
        if any(v not in (None, "") for v in others) and not (cleaned.get("partner_organization") or "").strip():
            raise forms.ValidationError("Partner organisation is required for an extension activity")
        return cleaned
