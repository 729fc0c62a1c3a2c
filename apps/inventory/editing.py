"""
Sesión de edición de un artículo de inventario del lado del cliente.

Guarda una copia local y mutable de los campos editables, la re-sincroniza
cuando llega un registro nuevo y arma la petición de actualización con el
conjunto completo de campos.
"""
import enum
import json
import logging

from .choices import NONE_OPTION, ItemStatus, PackagingType
from .fields import coerce_quantity
from .forms import EDITABLE_FIELDS

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("name", "description", "manufacturer")
PRICE_FIELDS = ("cost_price", "selling_price", "discount_price")


class SubmissionFailed(Exception):
    """La respuesta no fue ni una redirección ni un mapa de errores"""

    def __init__(self, status_code, message=""):
        self.status_code = status_code
        super().__init__(message or f"Respuesta inesperada ({status_code})")


class EditPhase(enum.Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    DONE = "done"


class SubmitRequest:
    def __init__(self, method, url, payload):
        self.method = method
        self.url = url
        self.payload = payload

    def __repr__(self):
        return f"<SubmitRequest {self.method} {self.url}>"


class SubmitResult:
    def __init__(self, redirect_to=None, errors=None):
        self.redirect_to = redirect_to
        self.errors = dict(errors or {})

    @property
    def ok(self):
        return not self.errors


def initial_state(record):
    """Copia editable del registro con los mismos valores por defecto del formulario"""
    return {
        "name": record.get("name") or "",
        "description": record.get("description") or "",
        "category_id": record.get("category_id"),
        "packaging_type": record.get("packaging_type") or "",
        "quantity": record.get("quantity") or 0,
        "cost_price": record.get("cost_price") or "",
        "selling_price": record.get("selling_price") or "",
        "discount_price": record.get("discount_price") or "",
        "manufacturer": record.get("manufacturer") or "",
        "status": record.get("status") or ItemStatus.ACTIVE.value,
    }


def result_from_response(response):
    """Traduce una respuesta HTTP del backend a un SubmitResult"""
    status = response.status_code
    if 300 <= status < 400:
        return SubmitResult(redirect_to=response["Location"])
    if status == 422:
        try:
            body = json.loads(response.content or b"{}")
        except ValueError:
            raise SubmissionFailed(status, "Mapa de errores ilegible")
        return SubmitResult(errors=body.get("errors") or {})
    raise SubmissionFailed(status)


class InventoryEditSession:
    def __init__(self, record, categories, user):
        self.categories = list(categories)
        self.user = user
        self.phase = EditPhase.EDITING
        self.redirect_to = None
        self.errors = {}
        self._record = None
        self.state = {}
        self.reset(record)

    @property
    def record(self):
        return self._record

    @property
    def processing(self):
        return self.phase is EditPhase.SUBMITTING

    @property
    def update_url(self):
        return f"/inventory/{self._record['id']}"

    def reset(self, record):
        """Vuelve a sembrar el estado desde ``record`` descartando lo no guardado"""
        self._record = record
        self.state = initial_state(record)
        self.errors = {}

    def sync(self, record):
        """Se llama cada vez que llega el registro; solo resetea si cambió la referencia"""
        if record is not self._record:
            logger.debug("Registro %s reemplazado, se descartan cambios locales", record.get("id"))
            self.reset(record)
            return True
        return False

    def set_field(self, name, raw):
        if name not in self.state:
            raise KeyError(name)

        if name == "category_id":
            value = None if raw in (None, NONE_OPTION) else int(raw)
        elif name == "packaging_type":
            if raw in (None, NONE_OPTION):
                value = ""
            elif raw in PackagingType.values:
                value = raw
            else:
                raise ValueError(f"Tipo de empaque inválido: {raw!r}")
        elif name == "status":
            if raw not in ItemStatus.values:
                raise ValueError(f"Estado inválido: {raw!r}")
            value = raw
        elif name == "quantity":
            value = coerce_quantity(raw)
        elif name in PRICE_FIELDS:
            value = "" if raw is None else str(raw)
        else:
            value = raw

        self.state[name] = value
        return value

    def display_values(self):
        """Valores tal como se muestran en los controles"""
        values = dict(self.state)

        category_names = {c["id"]: c["name"] for c in self.categories}
        category_id = self.state["category_id"]
        if category_id is None:
            values["category_id"] = "None"
        else:
            values["category_id"] = category_names.get(category_id, str(category_id))

        packaging = self.state["packaging_type"]
        if not packaging:
            values["packaging_type"] = "None"
        elif packaging in PackagingType.values:
            values["packaging_type"] = PackagingType(packaging).label
        else:
            values["packaging_type"] = packaging
        return values

    def payload(self):
        return {field: self.state[field] for field in EDITABLE_FIELDS}

    def begin_submit(self):
        """Arma la petición; devuelve None si ya hay un envío en curso"""
        if self.processing:
            logger.info("Envío ignorado: el artículo %s ya se está guardando", self._record["id"])
            return None
        self.phase = EditPhase.SUBMITTING
        return SubmitRequest("PUT", self.update_url, self.payload())

    def finish_submit(self, result):
        if result.ok:
            self.errors = {}
            self.redirect_to = result.redirect_to
            self.phase = EditPhase.DONE
        else:
            self.errors = dict(result.errors)
            self.phase = EditPhase.EDITING
        return result

    def abandon_submit(self):
        self.phase = EditPhase.EDITING

    def submit(self, transport):
        """
        Envía el registro completo con ``transport(method, url, payload)``.

        El transporte devuelve un SubmitResult; sus excepciones se propagan.
        """
        request = self.begin_submit()
        if request is None:
            return None
        try:
            result = transport(request.method, request.url, request.payload)
        except Exception:
            self.abandon_submit()
            raise
        return self.finish_submit(result)
