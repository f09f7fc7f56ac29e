"""Result types returned by the form actions."""
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from .invoice import InvoiceForm


class ErrorKind(str, Enum):
    """Category of a failed action."""
    VALIDATION = "validation"
    STORAGE = "storage"


class ValidationResult(BaseModel):
    """Outcome of validating one form submission."""
    success: bool
    data: Optional[InvoiceForm] = None
    field_errors: dict[str, list[str]] = Field(default_factory=dict)


class ActionState(BaseModel):
    """State handed back to a form so it can re-render."""
    errors: dict[str, list[str]] = Field(default_factory=dict)
    message: Optional[str] = None
    error: Optional[ErrorKind] = None


class Rendered(BaseModel):
    """The action finished on the current view with a state to show."""
    kind: Literal["rendered"] = "rendered"
    state: ActionState


class Redirected(BaseModel):
    """The action succeeded and the client should navigate to ``path``."""
    kind: Literal["redirected"] = "redirected"
    path: str


ActionResult = Union[Rendered, Redirected]
