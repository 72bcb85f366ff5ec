from .navigator import FORM_ROUTE, LIST_ROUTE, Navigator
from .user_store import UserStore

__all__ = [
    "FORM_ROUTE",
    "LIST_ROUTE",
    "Navigator",
    "UserStore",
]
