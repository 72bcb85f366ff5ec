"""Abstract port for the remote user store."""

from abc import ABC, abstractmethod

from user_directory.application.schemas.user import UserPayload, UserWire


class UserStore(ABC):
    """Port for the remote CRUD API: implemented in the infrastructure layer.

    Implementations raise ``RemoteStoreError`` subclasses on failure.
    """

    @abstractmethod
    async def list_users(self) -> list[UserWire]:
        """Fetch every user the store holds."""
        ...

    @abstractmethod
    async def create_user(self, payload: UserPayload) -> UserWire:
        """Register a new user and return it with its assigned id."""
        ...

    @abstractmethod
    async def update_user(self, user_id: str, payload: UserPayload) -> UserWire:
        """Update an existing user and return the stored values."""
        ...

    @abstractmethod
    async def delete_user(self, user_id: str) -> None:
        """Delete a user."""
        ...
