"""Describe access use case - what the UI may render for the current user."""

from collections.abc import Sequence

from panela.application.dto.access_description import AccessDescription
from panela.application.dto.session import SessionClaims
from panela.application.ports import CurrentUserProvider
from panela.domain.access import AccessResolver, NavigationItem


class DescribeAccessUseCase:
    """Role, visible navigation and allowed actions per route for the session's user."""

    def __init__(
        self,
        current_user_provider: CurrentUserProvider,
        resolver: AccessResolver,
        navigation: Sequence[NavigationItem],
    ) -> None:
        self._current_user_provider = current_user_provider
        self._resolver = resolver
        self._navigation = tuple(navigation)

    async def execute(self, session: SessionClaims | None) -> AccessDescription | None:
        """None when there is no authenticated user."""
        user = await self._current_user_provider.get_current_user(session)
        if user is None:
            return None

        routes = sorted(rule.pattern for rule in self._resolver.policy.route_rules)
        actions = {}
        for route in routes:
            allowed = self._resolver.allowed_actions(user.role, route)
            if allowed:
                actions[route] = allowed

        return AccessDescription(
            user=user,
            navigation=self._resolver.visible_navigation(user.role, self._navigation),
            actions=actions,
        )
