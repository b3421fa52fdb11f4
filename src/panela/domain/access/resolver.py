"""Access control resolver - pure allow/deny decisions over an AccessPolicy."""

from collections.abc import Iterable

from panela.domain.access.policy import AccessPolicy, NavigationItem
from panela.domain.value_objects import Action, RoleName, normalize_route_path


def _as_role(role: RoleName | str | None) -> RoleName | None:
    if isinstance(role, RoleName):
        return role
    if not isinstance(role, str):
        return None
    try:
        return RoleName(role)
    except ValueError:
        return None


def _as_action(action: Action | str) -> Action | None:
    if isinstance(action, Action):
        return action
    if not isinstance(action, str):
        return None
    try:
        return Action(action)
    except ValueError:
        return None


class AccessResolver:
    """Decides whether a role may open a route or perform an action on it.

    Stateless apart from the injected policy: no I/O, never raises, and the
    same (role, route, action) always yields the same verdict. Anything that
    cannot be resolved (no role, unknown role or action, no matching rule)
    is denied.
    """

    def __init__(self, policy: AccessPolicy) -> None:
        self._policy = policy

    @property
    def policy(self) -> AccessPolicy:
        return self._policy

    def can_access_route(self, role: RoleName | str | None, route_path: str) -> bool:
        """True iff role is allowed by the most specific rule covering route_path."""
        resolved = _as_role(role)
        if resolved is None or not isinstance(route_path, str):
            return False
        rule = self._policy.match(normalize_route_path(route_path))
        if rule is None:
            return False
        return resolved in rule.roles

    def can_perform_action(
        self,
        role: RoleName | str | None,
        route_path: str,
        action: Action | str,
    ) -> bool:
        """Route access is required; the most specific action rule then decides.

        Action rules cover the routes below their own, so /dashboard/customers/123
        is judged by the rule on /dashboard/customers. Without any rule for the
        action, route access alone decides.
        """
        resolved_action = _as_action(action)
        if resolved_action is None or not isinstance(route_path, str):
            return False
        path = normalize_route_path(route_path)
        if not self.can_access_route(role, path):
            return False
        rule = self._policy.match_action(path, resolved_action)
        if rule is None:
            return True
        return _as_role(role) in rule.roles

    def allowed_actions(self, role: RoleName | str | None, route_path: str) -> frozenset[Action]:
        """Actions role may perform on route_path."""
        return frozenset(a for a in Action if self.can_perform_action(role, route_path, a))

    def visible_navigation(
        self, role: RoleName | str | None, items: Iterable[NavigationItem]
    ) -> list[NavigationItem]:
        """Navigation entries whose route role may open, in the given order."""
        return [item for item in items if self.can_access_route(role, item.href)]
