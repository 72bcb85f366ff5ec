"""Builds JSON view state from the workspace controllers."""

from user_directory.application.schemas.views import (
    FormFieldsSchema,
    FormViewResponse,
    ListViewResponse,
    ToastSchema,
    UserRowSchema,
)
from user_directory.infrastructure.dependencies import Workspace


def toast_view(workspace: Workspace) -> ToastSchema:
    toast = workspace.store.state.toast
    return ToastSchema(message=toast.message, kind=toast.kind.value, visible=toast.visible)


def list_view(workspace: Workspace) -> ListViewResponse:
    users = workspace.users
    visible = users.visible_records
    return ListViewResponse(
        route=workspace.navigator.current_route,
        search=users.search_term,
        users=[UserRowSchema(**users.row(record)) for record in visible],
        total=users.total,
        showing=len(visible),
        empty_message=None if visible else users.empty_message,
        pending_delete=users.pending_delete,
        loading=users.busy,
        error=users.error,
        toast=toast_view(workspace),
    )


def form_view(workspace: Workspace) -> FormViewResponse:
    form = workspace.form
    return FormViewResponse(
        route=workspace.navigator.current_route,
        title=form.title,
        status=form.status.value,
        editing=form.is_edit_mode,
        fields=FormFieldsSchema(**form.fields.as_dict()),
        errors=dict(form.errors),
        error=form.remote_error,
        submitted=form.is_submitted,
        loading=form.busy,
        toast=toast_view(workspace),
    )
