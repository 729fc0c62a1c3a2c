import re

from django import forms

from .choices import NONE_OPTION, PackagingType


_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_quantity(raw):
    """Toma el entero inicial del valor; cualquier cosa no numérica es 0"""
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw)
    match = _LEADING_INT.match(str(raw))
    if not match:
        return 0
    return int(match.group(1))


class LenientQuantityField(forms.IntegerField):
    """IntegerField que nunca falla por texto no numérico (lo guarda como 0)"""

    def __init__(self, **kwargs):
        kwargs.setdefault("min_value", 0)
        kwargs.setdefault("widget", forms.NumberInput(attrs={"min": "0"}))
        super().__init__(**kwargs)

    def to_python(self, value):
        return coerce_quantity(value)


class CategoryChoiceField(forms.ModelChoiceField):
    """Selector de categoría cuya opción "None" limpia a una referencia nula"""

    def __init__(self, queryset, **kwargs):
        kwargs.setdefault("empty_label", "None")
        kwargs.setdefault("required", False)
        super().__init__(queryset, **kwargs)


class PackagingTypeField(forms.TypedChoiceField):
    """Selector de empaque; "None" se guarda como cadena vacía, nunca nulo"""

    def __init__(self, **kwargs):
        kwargs.setdefault("choices", [(NONE_OPTION, "None")] + list(PackagingType.choices))
        kwargs.setdefault("required", False)
        kwargs.setdefault("empty_value", "")
        super().__init__(**kwargs)


def price_widget(placeholder):
    return forms.NumberInput(attrs={"min": "0", "step": "0.01", "placeholder": placeholder})
