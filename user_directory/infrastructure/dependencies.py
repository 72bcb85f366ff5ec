"""Dependency wiring: builds the session workspace and exposes it to FastAPI."""

from dataclasses import dataclass

import httpx
from fastapi import HTTPException, Request, status

from user_directory.config import Settings, get_settings
from user_directory.application.formatting import DateFormatter
from user_directory.application.interfaces import UserStore
from user_directory.application.services import (
    FormController,
    ListController,
    UserRecordCache,
)
from user_directory.application.state import UserDirectoryStore, log_notifications
from user_directory.infrastructure.navigation import RouteNavigator
from user_directory.infrastructure.user_api import HttpUserStore


@dataclass
class Workspace:
    """Everything one browser session works against.

    Passed explicitly to the controllers; there are no module-level singletons.
    """

    store: UserDirectoryStore
    cache: UserRecordCache
    navigator: RouteNavigator
    form: FormController
    users: ListController


def build_workspace(
    user_store: UserStore,
    date_formatter: DateFormatter | None = None,
    navigator: RouteNavigator | None = None,
) -> Workspace:
    """Wire the state store, cache and controllers around a UserStore."""
    store = UserDirectoryStore()
    store.subscribe(log_notifications)
    navigator = navigator or RouteNavigator()
    cache = UserRecordCache(user_store, store, date_formatter)
    return Workspace(
        store=store,
        cache=cache,
        navigator=navigator,
        form=FormController(cache, store, navigator),
        users=ListController(cache, store, navigator),
    )


def build_http_user_store(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> HttpUserStore:
    settings = settings or get_settings()
    return HttpUserStore(
        base_url=settings.user_api_base_url,
        timeout=settings.user_api_timeout,
        http_client=http_client,
    )


def get_workspace(request: Request) -> Workspace:
    """FastAPI dependency: the workspace created during application startup."""
    workspace = getattr(request.app.state, "workspace", None)
    if workspace is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="User directory is not initialised",
        )
    return workspace
