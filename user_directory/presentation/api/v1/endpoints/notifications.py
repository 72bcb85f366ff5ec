"""Toast notification endpoint."""

from fastapi import APIRouter, Depends

from user_directory.application.schemas.views import ToastSchema
from user_directory.application.state import ToastHidden
from user_directory.infrastructure.dependencies import Workspace, get_workspace
from user_directory.presentation.api.v1.views import toast_view

router = APIRouter(prefix="/toast", tags=["Notifications"])


@router.delete("", response_model=ToastSchema)
async def dismiss_toast(
    workspace: Workspace = Depends(get_workspace),
) -> ToastSchema:
    """Hide the current notification."""
    workspace.store.dispatch(ToastHidden())
    return toast_view(workspace)
