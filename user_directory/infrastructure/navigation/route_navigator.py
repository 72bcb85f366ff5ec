"""In-memory navigator: records the route the front end should show."""

import logging

from user_directory.application.interfaces.navigator import LIST_ROUTE, Navigator

logger = logging.getLogger(__name__)


class RouteNavigator(Navigator):
    """Keeps the current route for the HTTP surface to report."""

    def __init__(self, initial_route: str = LIST_ROUTE):
        self._route = initial_route

    @property
    def current_route(self) -> str:
        return self._route

    def navigate(self, route: str) -> None:
        if route != self._route:
            logger.debug("Navigate %s -> %s", self._route, route)
        self._route = route
