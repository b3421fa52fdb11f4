"""What the current user may see and do, for conditional rendering."""

from dataclasses import dataclass, field

from panela.application.dto.current_user import CurrentUser
from panela.domain.access import NavigationItem
from panela.domain.value_objects import Action


@dataclass(frozen=True)
class AccessDescription:
    """Visible navigation and allowed actions per policy route."""

    user: CurrentUser
    navigation: list[NavigationItem] = field(default_factory=list)
    actions: dict[str, frozenset[Action]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "user": self.user.to_dict(),
            "role": self.user.role.value if self.user.role else None,
            "navigation": [{"title": n.title, "href": n.href} for n in self.navigation],
            "actions": {
                route: sorted(a.value for a in actions)
                for route, actions in self.actions.items()
            },
        }
