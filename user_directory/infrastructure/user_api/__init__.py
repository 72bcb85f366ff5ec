"""Remote user store infrastructure package."""

from .http_user_store import HttpUserStore

__all__ = ["HttpUserStore"]
