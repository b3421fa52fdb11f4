"""Route and action permission tables of the dashboard."""

from panela.domain.access import AccessPolicy, AccessResolver, NavigationItem
from panela.domain.access import routes
from panela.domain.exceptions import PolicyConfigurationError

ADMIN = "admin"
ADVISOR = "asesor"
COLLABORATOR = "colaborador"

ALL_ROLES = (ADMIN, ADVISOR, COLLABORATOR)
CRUD = ("view", "create", "update", "delete")

ROUTE_PERMISSIONS: dict[str, tuple[str, ...]] = {
    routes.DASHBOARD: ALL_ROLES,
    routes.ANALYTICS: (ADMIN, ADVISOR),
    routes.CUSTOMERS: ALL_ROLES,
    routes.INVENTORY: ALL_ROLES,
    routes.INVENTORY_MANAGE: (ADMIN, COLLABORATOR),
    routes.INVENTORY_MOVEMENTS: (ADMIN, COLLABORATOR),
    # Every section below inherits this rule.
    routes.MASTER_DATA: (ADMIN,),
    routes.NOTIFICATIONS: ALL_ROLES,
    routes.REPORTS: (ADMIN, ADVISOR),
    routes.SALES: (ADMIN, ADVISOR),
    routes.SETTINGS: (ADMIN,),
}

MASTER_DATA_SECTIONS = (
    "almacenamiento",
    "bodegas",
    "centros-costo",
    "colores",
    "marcas",
    "modelos",
    "productos",
    "proveedores",
    "ram",
    "tipo-productos",
    "usuarios",
)

ACTION_PERMISSIONS: dict[str, dict[str, tuple[str, ...]]] = {
    routes.DASHBOARD: {ADMIN: ("view",), ADVISOR: ("view",), COLLABORATOR: ("view",)},
    routes.ANALYTICS: {ADMIN: ("view",), ADVISOR: ("view",)},
    routes.CUSTOMERS: {
        ADMIN: CRUD,
        ADVISOR: ("view", "create", "update"),
        COLLABORATOR: ("view",),
    },
    routes.INVENTORY: {ADMIN: ("view",), ADVISOR: ("view",), COLLABORATOR: ("view",)},
    routes.INVENTORY_MANAGE: {ADMIN: CRUD, COLLABORATOR: CRUD},
    routes.INVENTORY_MOVEMENTS: {
        ADMIN: ("view", "create"),
        COLLABORATOR: ("view", "create"),
    },
    routes.MASTER_DATA: {ADMIN: ("view",)},
    **{f"{routes.MASTER_DATA}/{section}": {ADMIN: CRUD} for section in MASTER_DATA_SECTIONS},
    routes.NOTIFICATIONS: {ADMIN: ("view",), ADVISOR: ("view",), COLLABORATOR: ("view",)},
    routes.REPORTS: {ADMIN: ("view",), ADVISOR: ("view",)},
    routes.SALES: {
        ADMIN: CRUD + ("edit_client", "edit_price"),
        ADVISOR: ("view", "create", "update", "edit_client", "edit_price"),
    },
    routes.SETTINGS: {ADMIN: ("view", "update")},
}

NAVIGATION = (
    NavigationItem(title="Panel Principal", href=routes.DASHBOARD),
    NavigationItem(title="Inventario", href=routes.INVENTORY),
    NavigationItem(title="Datos Maestros", href=routes.MASTER_DATA),
    NavigationItem(title="Ventas", href=routes.SALES),
    NavigationItem(title="Clientes", href=routes.CUSTOMERS),
    NavigationItem(title="Reportes", href=routes.REPORTS),
    NavigationItem(title="Analíticas", href=routes.ANALYTICS),
    NavigationItem(title="Configuración", href=routes.SETTINGS),
)


def build_default_policy() -> AccessPolicy:
    """Build and validate the dashboard policy. Fails if a page is left uncovered."""
    policy = AccessPolicy.from_mappings(ROUTE_PERMISSIONS, ACTION_PERMISSIONS)
    pages = [item.href for item in NAVIGATION] + list(ACTION_PERMISSIONS)
    uncovered = policy.uncovered(pages)
    if uncovered:
        raise PolicyConfigurationError(f"Routes without a permission rule: {uncovered}")
    return policy


def build_default_resolver() -> AccessResolver:
    return AccessResolver(build_default_policy())
