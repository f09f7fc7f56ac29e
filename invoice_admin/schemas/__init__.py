"""Pydantic schemas for forms, action results and API responses."""
from .invoice import (
    InvoiceStatus,
    InvoiceForm,
    CustomerField,
    InvoiceRow,
    InvoiceEditView,
    InvoiceListResponse,
    InvoiceFormContext,
)
from .actions import (
    ErrorKind,
    ValidationResult,
    ActionState,
    Rendered,
    Redirected,
    ActionResult,
)
from .response import (
    HealthResponse,
    SignInResponse,
    SessionUser,
)

__all__ = [
    # Invoice
    "InvoiceStatus",
    "InvoiceForm",
    "CustomerField",
    "InvoiceRow",
    "InvoiceEditView",
    "InvoiceListResponse",
    "InvoiceFormContext",
    # Actions
    "ErrorKind",
    "ValidationResult",
    "ActionState",
    "Rendered",
    "Redirected",
    "ActionResult",
    # Response
    "HealthResponse",
    "SignInResponse",
    "SessionUser",
]
