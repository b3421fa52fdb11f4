"""Application routes referenced by the access policy and the page guard."""

HOME = "/"
DASHBOARD = "/dashboard"
ANALYTICS = "/dashboard/analytics"
CUSTOMERS = "/dashboard/customers"
INVENTORY = "/dashboard/inventory"
INVENTORY_MANAGE = "/dashboard/inventory/manage"
INVENTORY_MOVEMENTS = "/dashboard/inventory/movements"
MASTER_DATA = "/dashboard/master-data"
MASTER_DATA_USERS = "/dashboard/master-data/usuarios"
NOTIFICATIONS = "/dashboard/notifications"
REPORTS = "/dashboard/reports"
SALES = "/dashboard/sales"
SETTINGS = "/dashboard/settings"

SIGN_IN = "/sign-in"
SIGN_UP = "/sign-up"
FORGOT_PASSWORD = "/forgot-password"
SET_PASSWORD = "/set-password"
AUTH_CALLBACK = "/auth/callback"
UNAUTHORIZED = "/unauthorized"

PUBLIC_ROUTES = (SIGN_IN, SIGN_UP, FORGOT_PASSWORD, SET_PASSWORD, AUTH_CALLBACK)
PROTECTED_PREFIXES = (DASHBOARD,)
