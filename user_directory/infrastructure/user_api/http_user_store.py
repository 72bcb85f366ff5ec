"""HTTP client for the remote user store: implements the UserStore port.

Talks JSON over httpx to the user management API:

    GET    /users            -> {success, message, data: {users, total, showing}}
    POST   /users/register   -> {success, data: <user>}
    PUT    /users/{id}       -> {success, data: <user>}
    DELETE /users/{id}       -> {success}
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from user_directory.application.interfaces.user_store import UserStore
from user_directory.application.schemas.user import (
    UserListResponse,
    UserPayload,
    UserResponse,
    UserWire,
)
from user_directory.domain.exceptions import (
    ApiError,
    BadRequestError,
    ConflictError,
    NetworkError,
    UnprocessableError,
)

logger = logging.getLogger(__name__)

_ERRORS_BY_STATUS: dict[int, type[ApiError]] = {
    400: BadRequestError,
    409: ConflictError,
    422: UnprocessableError,
}


class HttpUserStore(UserStore):
    """Infrastructure adapter: connects to the remote user API.

    An injected ``httpx.AsyncClient`` is reused across calls; otherwise a
    short-lived client is created per request and closed afterwards.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(
        self, method: str, path: str, payload: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        client = self._get_client()
        should_close = self._http_client is None

        try:
            logger.debug("%s %s", method, url)
            response = await client.request(
                method, url, json=payload, timeout=self._timeout
            )
        except httpx.TimeoutException as exc:
            logger.warning("%s %s timed out after %.0fs", method, url, self._timeout)
            raise NetworkError(
                f"Request timed out after {self._timeout:.0f} seconds"
            ) from exc
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise NetworkError(f"Could not reach the user service: {exc}") from exc
        finally:
            if should_close:
                await client.aclose()

        if not response.is_success:
            self._raise_api_error(response)

        body = self._json_body(response)
        if body.get("success") is False:
            self._raise_api_error(response, body)
        return body

    @staticmethod
    def _json_body(response: httpx.Response) -> dict[str, Any]:
        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    @classmethod
    def _raise_api_error(
        cls, response: httpx.Response, body: dict[str, Any] | None = None
    ) -> None:
        """Map a failure response to a single human-readable ApiError."""
        if body is None:
            body = cls._json_body(response)

        errors = _error_strings(body.get("errors"))
        message = str(body.get("message") or "").strip()
        if errors:
            detail = "; ".join(errors)
            message = f"{message}: {detail}" if message else detail
        if not message:
            message = f"Request failed with status {response.status_code}"

        error_cls = _ERRORS_BY_STATUS.get(response.status_code, ApiError)
        logger.warning(
            "User API error %d on %s %s: %s",
            response.status_code,
            response.request.method,
            response.request.url,
            message,
        )
        raise error_cls(response.status_code, message, errors)

    @staticmethod
    def _parse_user(body: dict[str, Any], status_code: int) -> UserWire:
        try:
            data = UserResponse.model_validate(body).data
            # Some deployments wrap the record as data.users[0]
            users = data.get("users")
            if isinstance(users, list) and users:
                data = users[0]
            return UserWire.model_validate(data)
        except ValidationError as exc:
            logger.warning("Malformed user payload (status %d): %s", status_code, exc)
            raise ApiError(status_code, "Unexpected response from the user service") from exc

    async def list_users(self) -> list[UserWire]:
        body = await self._request("GET", "/users")
        try:
            envelope = UserListResponse.model_validate(body)
        except ValidationError as exc:
            raise ApiError(200, "Unexpected response from the user service") from exc
        logger.info("Fetched %d user(s)", len(envelope.data.users))
        return envelope.data.users

    async def create_user(self, payload: UserPayload) -> UserWire:
        body = await self._request(
            "POST", "/users/register", payload.model_dump(by_alias=True)
        )
        user = self._parse_user(body, 201)
        logger.info("Registered user %s", user.id)
        return user

    async def update_user(self, user_id: str, payload: UserPayload) -> UserWire:
        body = await self._request(
            "PUT", f"/users/{user_id}", payload.model_dump(by_alias=True)
        )
        user = self._parse_user(body, 200)
        logger.info("Updated user %s", user_id)
        return user

    async def delete_user(self, user_id: str) -> None:
        await self._request("DELETE", f"/users/{user_id}")
        logger.info("Deleted user %s", user_id)


def _error_strings(raw: Any) -> list[str]:
    """Flatten an ``errors`` field (strings, objects, or a field map) to strings."""
    if not raw:
        return []
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, dict):
        return [f"{key}: {value}" for key, value in raw.items()]
    messages: list[str] = []
    for item in raw:
        if isinstance(item, dict):
            text = item.get("msg") or item.get("message")
            if text:
                messages.append(str(text))
        elif item:
            messages.append(str(item))
    return messages
