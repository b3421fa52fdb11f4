"""Role-based access control over routes and actions."""

from panela.domain.access.policy import AccessPolicy, ActionRule, NavigationItem, RouteRule
from panela.domain.access.resolver import AccessResolver

__all__ = [
    "AccessPolicy",
    "AccessResolver",
    "ActionRule",
    "NavigationItem",
    "RouteRule",
]
