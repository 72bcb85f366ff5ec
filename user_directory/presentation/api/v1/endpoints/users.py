"""User list endpoints: search, edit selection and confirmed delete."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from user_directory.application.interfaces import FORM_ROUTE, LIST_ROUTE
from user_directory.application.schemas.views import FormViewResponse, ListViewResponse
from user_directory.infrastructure.dependencies import Workspace, get_workspace
from user_directory.presentation.api.v1.views import form_view, list_view

router = APIRouter(prefix="/users", tags=["Users"])


def _show_list(workspace: Workspace) -> None:
    if workspace.navigator.current_route == FORM_ROUTE:
        workspace.form.leave()
    workspace.navigator.navigate(LIST_ROUTE)


@router.get("", response_model=ListViewResponse)
async def list_users(
    search: str = Query("", description="Filter by name, email or mobile number"),
    refresh: bool = Query(False, description="Reload users from the remote store"),
    workspace: Workspace = Depends(get_workspace),
) -> ListViewResponse:
    """Show the user list, loading it from the remote store on first view."""
    _show_list(workspace)
    if refresh or not workspace.users.mounted:
        await workspace.users.mount()
    workspace.users.set_search(search)
    return list_view(workspace)


@router.post("/delete/confirm", response_model=ListViewResponse)
async def confirm_delete(
    workspace: Workspace = Depends(get_workspace),
) -> ListViewResponse:
    """Delete the user awaiting confirmation."""
    if workspace.users.pending_delete is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="No delete is awaiting confirmation",
        )
    await workspace.users.confirm_delete()
    return list_view(workspace)


@router.post("/delete/cancel", response_model=ListViewResponse)
async def cancel_delete(
    workspace: Workspace = Depends(get_workspace),
) -> ListViewResponse:
    workspace.users.cancel_delete()
    return list_view(workspace)


@router.post("/{user_id}/delete", response_model=ListViewResponse)
async def request_delete(
    user_id: str,
    workspace: Workspace = Depends(get_workspace),
) -> ListViewResponse:
    """Ask for confirmation before deleting a user."""
    if workspace.users.find(user_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with id '{user_id}' not found",
        )
    workspace.users.request_delete(user_id)
    return list_view(workspace)


@router.post("/{user_id}/edit", response_model=FormViewResponse)
async def edit_user(
    user_id: str,
    workspace: Workspace = Depends(get_workspace),
) -> FormViewResponse:
    """Select a user for editing and open the form."""
    record = workspace.users.find(user_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with id '{user_id}' not found",
        )
    workspace.users.edit(record)
    workspace.form.open()
    return form_view(workspace)
