# capture/presenter.py
from __future__ import annotations
from typing import Protocol

from capture.context import FormFields
from capture.models import UIState


class Presenter(Protocol):
    """Commands the orchestrator sends to whatever renders the form."""

    state: UIState

    def show_field_error(self, field: str, message: str) -> None: ...
    def show_form_success(self) -> None: ...
    def show_form_error(self, message: str) -> None: ...
    def hide_form_messages(self) -> None: ...
    def set_submitting(self, submitting: bool) -> None: ...
    def reset_fields(self) -> None: ...
    def scroll_success_into_view(self) -> None: ...
    def focus(self, field: str) -> None: ...


class FormView:
    """
    In-memory rendering of the form: keeps a UIState and clears the
    FormFields it is attached to. At most one banner is ever set.
    """

    def __init__(self, fields: FormFields):
        self.fields = fields
        self.state = UIState()

    def show_field_error(self, field: str, message: str) -> None:
        if message:
            self.state.field_errors[field] = message
        else:
            self.state.field_errors.pop(field, None)

    def show_form_success(self) -> None:
        self.state.banner = "success"
        self.state.banner_message = ""

    def show_form_error(self, message: str) -> None:
        self.state.banner = "error"
        self.state.banner_message = message
        self.state.success_in_view = False

    def hide_form_messages(self) -> None:
        self.state.banner = None
        self.state.banner_message = ""
        self.state.success_in_view = False

    def set_submitting(self, submitting: bool) -> None:
        # loader replaces the button label while disabled
        self.state.submit_disabled = submitting
        self.state.show_loader = submitting

    def reset_fields(self) -> None:
        self.fields.clear()

    def scroll_success_into_view(self) -> None:
        if self.state.banner == "success":
            self.state.success_in_view = True

    def focus(self, field: str) -> None:
        self.state.focused_field = field
