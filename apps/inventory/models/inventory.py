from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal

from ..choices import CategoryStatus, ItemStatus, PackagingType


class Category(models.Model):
    name = models.CharField(max_length=80, unique=True)
    status = models.CharField(max_length=20, choices=CategoryStatus.choices, default=CategoryStatus.ACTIVE)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name

    def as_option(self):
        return {"id": self.id, "name": self.name, "status": self.status}


def _price_str(value):
    return None if value is None else str(value)


class InventoryItem(models.Model):
    name = models.CharField(max_length=150)
    description = models.TextField(blank=True, default="")
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="items",
    )
    packaging_type = models.CharField(max_length=20, choices=PackagingType.choices, blank=True, default="")

    quantity = models.PositiveIntegerField(default=0)

    cost_price = models.DecimalField(
        max_digits=12, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(Decimal("0"))],
    )
    selling_price = models.DecimalField(
        max_digits=12, decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    discount_price = models.DecimalField(
        max_digits=12, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(Decimal("0"))],
    )

    manufacturer = models.CharField(max_length=150, blank=True, default="")
    status = models.CharField(max_length=20, choices=ItemStatus.choices, default=ItemStatus.ACTIVE)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["category", "status"], name="inventory_i_categor_5b1f0e_idx"),
            models.Index(fields=["name"], name="inventory_i_name_3c9d2a_idx"),
        ]

    def __str__(self):
        return self.name

    def as_props(self):
        """Registro tal como lo recibe el formulario de edición"""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category_id": self.category_id,
            "packaging_type": self.packaging_type,
            "quantity": self.quantity,
            "cost_price": _price_str(self.cost_price),
            "selling_price": _price_str(self.selling_price),
            "discount_price": _price_str(self.discount_price),
            "manufacturer": self.manufacturer,
            "status": self.status,
        }
