from decimal import Decimal

import pytest

from apps.inventory.fields import coerce_quantity
from apps.inventory.forms import EDITABLE_FIELDS, InventoryItemForm

pytestmark = pytest.mark.django_db


def _data(**overrides):
    data = {
        "name": "Mineral Water 500ml",
        "description": "Still water",
        "category_id": None,
        "packaging_type": "",
        "quantity": 12,
        "cost_price": "800.00",
        "selling_price": "1000.00",
        "discount_price": "",
        "manufacturer": "Rwenzori",
        "status": "inactive",
    }
    data.update(overrides)
    return data


@pytest.mark.parametrize(
    "raw, expected",
    [("5", 5), ("5.9", 5), ("-2", -2), ("abc", 0), ("", 0), (None, 0), (3, 3), (4.7, 4)],
)
def test_coerce_quantity(raw, expected):
    assert coerce_quantity(raw) == expected


def test_fields_follow_payload_order(item):
    form = InventoryItemForm(instance=item)
    assert list(form.fields) == EDITABLE_FIELDS
    assert form.initial["category_id"] == item.category_id
    assert form.fields["selling_price"].label == "Selling Price (UGX)"


def test_none_options_clean_to_null_category_and_empty_packaging(item):
    form = InventoryItemForm(_data(), instance=item)
    assert form.is_valid(), form.errors

    saved = form.save()
    assert saved.category is None
    assert saved.packaging_type == ""
    assert saved.discount_price is None
    assert saved.status == "inactive"


def test_category_can_be_assigned(item, categories):
    form = InventoryItemForm(_data(category_id=categories[1].pk, packaging_type="Can"), instance=item)
    assert form.is_valid(), form.errors
    saved = form.save()
    assert saved.category == categories[1]
    assert saved.packaging_type == "Can"


def test_non_numeric_quantity_saves_zero(item):
    form = InventoryItemForm(_data(quantity="lots"), instance=item)
    assert form.is_valid(), form.errors
    assert form.save().quantity == 0


def test_required_and_range_errors(item):
    form = InventoryItemForm(_data(name="", selling_price="", quantity="-3", cost_price="-1"), instance=item)
    assert not form.is_valid()

    errors = form.errors_by_field()
    assert set(errors) >= {"name", "selling_price", "quantity", "cost_price"}
    assert all(isinstance(message, str) for message in errors.values())


def test_price_precision_is_not_rounded(item):
    form = InventoryItemForm(_data(selling_price="10.555"), instance=item)
    assert not form.is_valid()
    assert "selling_price" in form.errors

    item.refresh_from_db()
    assert item.selling_price == Decimal("1000.00")


def test_unknown_category_is_an_error(item):
    form = InventoryItemForm(_data(category_id=99999), instance=item)
    assert not form.is_valid()
    assert "category_id" in form.errors


def test_invalid_category_leaves_instance_category_untouched(item, categories):
    form = InventoryItemForm(_data(category_id=99999), instance=item)
    assert not form.is_valid()
    assert form.instance.category_id == categories[0].pk
