# conftest.py: fixtures compartidos para las pruebas

import os
from decimal import Decimal

import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")


@pytest.fixture(autouse=True)
def _relaxed_test_settings(settings):
    settings.ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
    settings.INVENTORY_CURRENCY = "UGX"


@pytest.fixture
def categories(db):
    from apps.inventory.models import Category

    return [
        Category.objects.create(name="Beverages"),
        Category.objects.create(name="Snacks"),
    ]


@pytest.fixture
def item(db, categories):
    from apps.inventory.models import InventoryItem

    return InventoryItem.objects.create(
        name="Mineral Water 500ml",
        description="Still water",
        category=categories[0],
        packaging_type="Bottle",
        quantity=24,
        cost_price=Decimal("800.00"),
        selling_price=Decimal("1000.00"),
        discount_price=Decimal("950.00"),
        manufacturer="Rwenzori",
        status="active",
    )


@pytest.fixture
def uncategorized_item(db):
    from apps.inventory.models import InventoryItem

    return InventoryItem.objects.create(name="Loose Sugar", selling_price=Decimal("4500.00"))


@pytest.fixture
def editor(db, django_user_model):
    from django.contrib.auth.models import Permission

    user = django_user_model.objects.create_user("editor", "editor@example.com", "password12345")
    user.user_permissions.add(
        Permission.objects.get(codename="view_inventoryitem"),
        Permission.objects.get(codename="change_inventoryitem"),
    )
    return user


@pytest.fixture
def editor_client(client, editor):
    client.force_login(editor)
    return client
