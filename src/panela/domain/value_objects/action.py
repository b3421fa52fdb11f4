"""Actions that can be performed within a route."""

from enum import StrEnum


class Action(StrEnum):
    """Fine-grained operations guarded per route."""

    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    EDIT_CLIENT = "edit_client"
    EDIT_PRICE = "edit_price"
