"""Access policy - route and action rules, validated once and read-only afterwards."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from panela.domain.exceptions import PolicyConfigurationError
from panela.domain.value_objects import (
    Action,
    RoleName,
    is_route_prefix,
    normalize_route_path,
    route_segments,
)


@dataclass(frozen=True)
class RouteRule:
    """Roles allowed on pattern and on every route below it."""

    pattern: str
    roles: frozenset[RoleName]

    @property
    def specificity(self) -> int:
        """Number of path segments; the root rule has 0."""
        return len(route_segments(self.pattern))

    def applies_to(self, path: str) -> bool:
        return is_route_prefix(self.pattern, path)


@dataclass(frozen=True)
class ActionRule:
    """Roles allowed to perform action on exactly route."""

    route: str
    action: Action
    roles: frozenset[RoleName]


@dataclass(frozen=True)
class NavigationItem:
    """Entry of the dashboard navigation."""

    title: str
    href: str


def _check_pattern(pattern: str) -> str:
    if not isinstance(pattern, str) or normalize_route_path(pattern) != pattern:
        raise PolicyConfigurationError(f"Route pattern is not normalized: {pattern!r}")
    return pattern


def _check_roles(where: str, roles: Iterable[object]) -> None:
    for role in roles:
        if not isinstance(role, RoleName):
            raise PolicyConfigurationError(f"Unknown role {role!r} in rule for {where}")


def _parse_role(name: str, where: str) -> RoleName:
    try:
        return RoleName(name)
    except ValueError:
        raise PolicyConfigurationError(f"Unknown role {name!r} in rule for {where}") from None


def _parse_action(name: str, where: str) -> Action:
    try:
        return Action(name)
    except ValueError:
        raise PolicyConfigurationError(f"Unknown action {name!r} in rule for {where}") from None


class AccessPolicy:
    """Immutable route and action permission tables.

    Route rules match a path and everything below it, segment by segment. The
    rule with the most segments wins, so an exact match always beats a
    prefix. Two rules can only tie on the same path, which is rejected here,
    as is any role or action outside the known enumerations.

    Action rules are keyed by (route, action) and, like route rules, cover
    the routes below their own. The most specific one for a path decides.
    They may only grant roles that can already open their route.
    """

    def __init__(
        self,
        route_rules: Iterable[RouteRule],
        action_rules: Iterable[ActionRule] = (),
    ) -> None:
        by_pattern: dict[str, RouteRule] = {}
        for rule in route_rules:
            _check_pattern(rule.pattern)
            _check_roles(rule.pattern, rule.roles)
            if rule.pattern in by_pattern:
                raise PolicyConfigurationError(f"Duplicate route rule for {rule.pattern}")
            by_pattern[rule.pattern] = rule
        self._route_rules = tuple(
            sorted(by_pattern.values(), key=lambda r: (-r.specificity, r.pattern))
        )

        by_key: dict[tuple[str, Action], ActionRule] = {}
        for rule in action_rules:
            where = f"{rule.route} ({rule.action})"
            _check_pattern(rule.route)
            _check_roles(where, rule.roles)
            if not isinstance(rule.action, Action):
                raise PolicyConfigurationError(f"Unknown action {rule.action!r} in rule for {rule.route}")
            key = (rule.route, rule.action)
            if key in by_key:
                raise PolicyConfigurationError(f"Duplicate action rule for {where}")
            route_rule = self.match(rule.route)
            if route_rule is None:
                raise PolicyConfigurationError(f"Action rule for {where} has no route rule")
            extra = rule.roles - route_rule.roles
            if extra:
                raise PolicyConfigurationError(
                    f"Action rule for {where} grants {sorted(extra)} without route access"
                )
            by_key[key] = rule
        self._action_rules = MappingProxyType(by_key)
        self._action_rules_by_action: dict[Action, tuple[ActionRule, ...]] = {
            action: tuple(
                sorted(
                    (r for r in by_key.values() if r.action is action),
                    key=lambda r: (-len(route_segments(r.route)), r.route),
                )
            )
            for action in Action
        }

    @classmethod
    def from_mappings(
        cls,
        route_permissions: Mapping[str, Iterable[str]],
        action_permissions: Mapping[str, Mapping[str, Iterable[str]]] | None = None,
    ) -> "AccessPolicy":
        """Build policy from route -> roles and route -> role -> actions tables.

        A route present in action_permissions lists its actions exhaustively:
        every action no role lists there gets a rule granting nobody.
        """
        route_rules = [
            RouteRule(
                pattern=_check_pattern(pattern),
                roles=frozenset(_parse_role(r, pattern) for r in roles),
            )
            for pattern, roles in route_permissions.items()
        ]

        action_rules: list[ActionRule] = []
        for route, per_role in (action_permissions or {}).items():
            _check_pattern(route)
            granted: dict[Action, set[RoleName]] = {action: set() for action in Action}
            for role_name, actions in per_role.items():
                role = _parse_role(role_name, route)
                for name in actions:
                    granted[_parse_action(name, route)].add(role)
            action_rules.extend(
                ActionRule(route=route, action=action, roles=frozenset(roles))
                for action, roles in granted.items()
            )

        return cls(route_rules, action_rules)

    @property
    def route_rules(self) -> tuple[RouteRule, ...]:
        """Route rules, most specific first."""
        return self._route_rules

    @property
    def action_rules(self) -> Mapping[tuple[str, Action], ActionRule]:
        return self._action_rules

    def match(self, path: str) -> RouteRule | None:
        """Most specific route rule covering the normalized path, if any."""
        for rule in self._route_rules:
            if rule.applies_to(path):
                return rule
        return None

    def action_rule(self, route: str, action: Action) -> ActionRule | None:
        """Rule declared on exactly route, if any."""
        return self._action_rules.get((route, action))

    def match_action(self, path: str, action: Action) -> ActionRule | None:
        """Most specific action rule on the normalized path or one of its ancestors."""
        for rule in self._action_rules_by_action.get(action, ()):
            if is_route_prefix(rule.route, path):
                return rule
        return None

    def uncovered(self, paths: Iterable[str]) -> list[str]:
        """Paths that no route rule applies to."""
        return [p for p in paths if self.match(normalize_route_path(p)) is None]
