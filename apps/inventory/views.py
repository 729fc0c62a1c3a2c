import json
import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required, permission_required
from django.core.exceptions import PermissionDenied
from django.core.paginator import Paginator
from django.db.models import Q
from django.http import HttpResponseBadRequest, HttpResponseNotAllowed, JsonResponse, QueryDict
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse
from django.utils.http import urlencode

from apps.profiles.context import UserContext

from .choices import ItemStatus, PackagingType
from .forms import InventoryItemForm
from .models import Category, InventoryItem

logger = logging.getLogger(__name__)


def _breadcrumbs(item=None, editing=False):
    crumbs = [{"title": "Inventory", "href": reverse("inventory_list")}]
    if item is not None:
        crumbs.append({"title": item.name, "href": reverse("inventory_detail", args=[item.pk])})
    if editing:
        crumbs.append({"title": "Edit", "href": reverse("inventory_edit", args=[item.pk])})
    return crumbs


def _edit_props(item):
    """Datos con los que se siembra el formulario de edición"""
    return {
        "inventory": item.as_props(),
        "categories": [c.as_option() for c in Category.objects.order_by("name")],
    }


def _render_edit(request, item, form, status=200):
    context = {
        "item": item,
        "form": form,
        "nav_user": UserContext.from_user(request.user),
        "breadcrumbs": _breadcrumbs(item, editing=True),
        "page_title": f"Edit {item.name}",
        "props": _edit_props(item),
        "currency": settings.INVENTORY_CURRENCY,
        "packaging_options": PackagingType.values,
        "status_options": ItemStatus.values,
    }
    return render(request, "inventory/edit.html", context, status=status)


def _is_json(request):
    return request.content_type == "application/json"


def _parse_update_data(request):
    """Cuerpo del PUT: JSON (petición XHR) o formulario codificado"""
    if _is_json(request):
        data = json.loads(request.body or b"{}")
        if not isinstance(data, dict):
            raise ValueError("Se esperaba un objeto JSON")
        return data
    if request.method == "POST":
        return request.POST
    return QueryDict(request.body, encoding=request.encoding)


@login_required
@permission_required('inventory.view_inventoryitem', raise_exception=True)
def inventory_list(request):
    """Lista de inventario con filtros y paginación"""
    items = InventoryItem.objects.select_related('category')

    search = request.GET.get('search', '')
    category_id = request.GET.get('category', '')
    status = request.GET.get('status', '')

    if search:
        items = items.filter(
            Q(name__icontains=search) | Q(manufacturer__icontains=search) | Q(description__icontains=search)
        )

    if category_id.isdigit():
        items = items.filter(category_id=category_id)

    if status in ItemStatus.values:
        items = items.filter(status=status)

    items = items.order_by('name')

    paginator = Paginator(items, settings.INVENTORY_PER_PAGE)
    page_number = request.GET.get('page', 1)
    items_page = paginator.get_page(page_number)

    context = {
        'items': items_page,
        'categories': Category.objects.order_by('name'),
        'search': search,
        'category_id': category_id,
        'status': status,
        'filter_query': urlencode({k: v for k, v in (('search', search), ('category', category_id), ('status', status)) if v}),
        'status_options': ItemStatus.values,
        'nav_user': UserContext.from_user(request.user),
        'breadcrumbs': _breadcrumbs(),
        'currency': settings.INVENTORY_CURRENCY,
    }
    return render(request, 'inventory/list.html', context)


@login_required
def inventory_item(request, pk):
    """GET muestra el artículo; PUT (o POST con _method=PUT) lo actualiza"""
    method = request.method
    if method == "POST" and request.POST.get("_method", "").upper() == "PUT":
        method = "PUT"

    if method == "GET":
        return inventory_detail(request, pk)
    if method == "PUT":
        return inventory_update(request, pk)
    return HttpResponseNotAllowed(["GET", "PUT"])


@permission_required('inventory.view_inventoryitem', raise_exception=True)
def inventory_detail(request, pk):
    item = get_object_or_404(InventoryItem.objects.select_related('category'), pk=pk)
    context = {
        'item': item,
        'nav_user': UserContext.from_user(request.user),
        'breadcrumbs': _breadcrumbs(item),
        'currency': settings.INVENTORY_CURRENCY,
    }
    return render(request, 'inventory/detail.html', context)


@login_required
@permission_required('inventory.change_inventoryitem', raise_exception=True)
def inventory_edit(request, pk):
    """Formulario de edición de un artículo"""
    item = get_object_or_404(InventoryItem, pk=pk)
    return _render_edit(request, item, InventoryItemForm(instance=item))


def inventory_update(request, pk):
    """Actualiza el artículo con el conjunto completo de campos enviados"""
    if not request.user.has_perm('inventory.change_inventoryitem'):
        raise PermissionDenied

    item = get_object_or_404(InventoryItem, pk=pk)
    wants_json = _is_json(request)

    try:
        data = _parse_update_data(request)
    except ValueError as e:
        logger.warning("Cuerpo inválido al actualizar el artículo %s: %s", pk, e)
        return HttpResponseBadRequest("Cuerpo JSON inválido")

    form = InventoryItemForm(data, instance=item)
    if not form.is_valid():
        errors = form.errors_by_field()
        logger.warning("Validación fallida al actualizar el artículo %s: %s", pk, sorted(errors))
        if wants_json:
            return JsonResponse({"errors": errors}, status=422)
        # La validación modifica la instancia en memoria; la página se arma con la guardada
        stored = get_object_or_404(InventoryItem, pk=pk)
        return _render_edit(request, stored, form)

    item = form.save()
    logger.info("Artículo %s actualizado por %s", item.pk, request.user.get_username())
    messages.success(request, f'Artículo {item.name} actualizado exitosamente')

    response = redirect('inventory_list')
    if request.method == "PUT":
        # 303 para que el cliente siga la redirección con GET
        response.status_code = 303
    return response
