"""Domain value objects."""

from panela.domain.value_objects.action import Action
from panela.domain.value_objects.role_name import RoleName, normalize_role
from panela.domain.value_objects.route_path import (
    is_route_prefix,
    normalize_route_path,
    route_segments,
)

__all__ = [
    "Action",
    "RoleName",
    "is_route_prefix",
    "normalize_role",
    "normalize_route_path",
    "route_segments",
]
