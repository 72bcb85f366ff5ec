"""Abstract port for page navigation."""

from abc import ABC, abstractmethod

LIST_ROUTE = "/list"
FORM_ROUTE = "/form"


class Navigator(ABC):
    """Moves the user between the list and form views."""

    @abstractmethod
    def navigate(self, route: str) -> None:
        ...

    @property
    @abstractmethod
    def current_route(self) -> str:
        ...
