from .inventory import Category, InventoryItem

__all__ = ["Category", "InventoryItem"]
