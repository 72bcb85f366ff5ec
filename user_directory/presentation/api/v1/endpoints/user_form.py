"""User form endpoints: create/edit, field changes, submit and cancel."""

from fastapi import APIRouter, Depends, HTTPException, status

from user_directory.application.interfaces import FORM_ROUTE
from user_directory.application.schemas.views import FieldChangeRequest, FormViewResponse
from user_directory.application.services import FormStatus
from user_directory.infrastructure.dependencies import Workspace, get_workspace
from user_directory.presentation.api.v1.views import form_view

router = APIRouter(prefix="/form", tags=["User Form"])


@router.get("", response_model=FormViewResponse)
async def get_form(
    workspace: Workspace = Depends(get_workspace),
) -> FormViewResponse:
    """Current form state; opens the form when it is not already open."""
    if workspace.form.status == FormStatus.IDLE:
        workspace.form.open()
    workspace.navigator.navigate(FORM_ROUTE)
    return form_view(workspace)


@router.post("/new", response_model=FormViewResponse)
async def new_user_form(
    workspace: Workspace = Depends(get_workspace),
) -> FormViewResponse:
    """Open an empty registration form, dropping any edit selection."""
    workspace.form.begin_create()
    workspace.navigator.navigate(FORM_ROUTE)
    return form_view(workspace)


@router.put("/fields/{field_name}", response_model=FormViewResponse)
async def change_field(
    field_name: str,
    data: FieldChangeRequest,
    workspace: Workspace = Depends(get_workspace),
) -> FormViewResponse:
    try:
        workspace.form.change(field_name, data.value)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown form field '{field_name}'",
        )
    return form_view(workspace)


@router.post("/submit", response_model=FormViewResponse)
async def submit_form(
    workspace: Workspace = Depends(get_workspace),
) -> FormViewResponse:
    """Validate and submit; on success the route switches to the list."""
    await workspace.form.submit()
    return form_view(workspace)


@router.post("/cancel", response_model=FormViewResponse)
async def cancel_form(
    workspace: Workspace = Depends(get_workspace),
) -> FormViewResponse:
    workspace.form.cancel()
    return form_view(workspace)
