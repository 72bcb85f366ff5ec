from .user_record_cache import UserRecordCache
from .form_controller import FormController, FormStatus, SubmitOutcome
from .list_controller import ListController

__all__ = [
    "UserRecordCache",
    "FormController",
    "FormStatus",
    "SubmitOutcome",
    "ListController",
]
