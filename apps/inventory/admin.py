from django.contrib import admin
from .models import Category, InventoryItem


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "status")
    list_filter = ("status",)
    search_fields = ("name",)


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "packaging_type", "quantity", "selling_price", "status")
    list_filter = ("status", "packaging_type", "category")
    search_fields = ("name", "manufacturer", "description")
