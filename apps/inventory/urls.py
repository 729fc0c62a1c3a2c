from django.urls import path
from . import views

urlpatterns = [
    # Inventario
    path("inventory", views.inventory_list, name="inventory_list"),
    path("inventory/<int:pk>", views.inventory_item, name="inventory_detail"),
    path("inventory/<int:pk>/edit", views.inventory_edit, name="inventory_edit"),
]
