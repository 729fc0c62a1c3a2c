from django import forms
from django.conf import settings

from .choices import ItemStatus
from .fields import CategoryChoiceField, LenientQuantityField, PackagingTypeField, price_widget
from .models import Category, InventoryItem

# Orden de los campos en el payload de actualización
EDITABLE_FIELDS = [
    "name",
    "description",
    "category_id",
    "packaging_type",
    "quantity",
    "cost_price",
    "selling_price",
    "discount_price",
    "manufacturer",
    "status",
]


class InventoryItemForm(forms.ModelForm):
    category_id = CategoryChoiceField(queryset=Category.objects.none(), label="Category")
    packaging_type = PackagingTypeField(label="Packaging Type")
    quantity = LenientQuantityField(label="Quantity")
    status = forms.ChoiceField(choices=ItemStatus.choices, label="Status")

    class Meta:
        model = InventoryItem
        fields = [
            "name",
            "description",
            "packaging_type",
            "quantity",
            "cost_price",
            "selling_price",
            "discount_price",
            "manufacturer",
            "status",
        ]
        labels = {
            "name": "Item Name",
            "manufacturer": "Manufacturer",
            "description": "Description",
        }
        widgets = {
            "name": forms.TextInput(attrs={"placeholder": "Enter item name"}),
            "manufacturer": forms.TextInput(attrs={"placeholder": "Enter manufacturer name"}),
            "description": forms.TextInput(attrs={"placeholder": "Enter item description"}),
            "cost_price": price_widget("Enter cost price"),
            "selling_price": price_widget("Enter selling price"),
            "discount_price": price_widget("Enter discount price (if applicable)"),
        }
        help_texts = {
            "discount_price": "Leave empty if no discount applies",
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["category_id"].queryset = Category.objects.order_by("name")
        if self.instance.pk and "category_id" not in self.initial:
            self.initial["category_id"] = self.instance.category_id

        currency = getattr(settings, "INVENTORY_CURRENCY", "UGX")
        self.fields["cost_price"].label = f"Cost Price ({currency})"
        self.fields["selling_price"].label = f"Selling Price ({currency})"
        self.fields["discount_price"].label = f"Discount Price ({currency})"

        self.order_fields(EDITABLE_FIELDS)

    def clean(self):
        cleaned_data = super().clean()
        # category_id no es campo del modelo; se asigna antes de validar la instancia
        if "category_id" in cleaned_data:
            self.instance.category = cleaned_data["category_id"]
        return cleaned_data

    def errors_by_field(self):
        """Primer mensaje de error por campo, como lo muestra el formulario"""
        return {field: messages[0] for field, messages in self.errors.items() if messages}
