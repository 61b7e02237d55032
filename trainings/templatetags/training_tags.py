# trainings/templatetags/training_tags.py
from django import template

register = template.Library()


@register.filter
def attr(obj, attr_name):
    """
    Attribute or dict item, with None and literal "None"/"null" rendered as "".
    """
    if isinstance(obj, dict):
        val = obj.get(attr_name, "")
    else:
        val = getattr(obj, attr_name, "")

    if val is None:
        return ""
    if isinstance(val, str):
        s = val.strip()
        if s == "" or s.lower() in ("none", "null"):
            return ""
    return val


@register.filter
def percent(part, whole):
    """Integer percentage of part in whole; 0 when whole is 0."""
    try:
        whole = int(whole)
        if whole <= 0:
            return 0
        return round(int(part) * 100 / whole)
    except (TypeError, ValueError):
        return 0
