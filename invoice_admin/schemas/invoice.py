"""Invoice-related Pydantic schemas."""
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, AfterValidator, BeforeValidator
from pydantic_core import PydanticCustomError

from ..utils.money import to_cents

InvoiceStatus = Literal["pending", "paid"]
INVOICE_STATUSES: tuple[str, ...] = ("pending", "paid")

CUSTOMER_MESSAGE = "Please select a customer."
AMOUNT_MESSAGE = "Amount must be greater than $0."
STATUS_MESSAGE = "Please select a status."

# Largest accepted amount (exclusive), in dollars
MAX_AMOUNT = Decimal("1e13")


def _check_customer_id(value: Any) -> str:
    # An unselected <select> posts an empty string
    if not isinstance(value, str) or not value:
        raise PydanticCustomError("customer_required", CUSTOMER_MESSAGE)
    return value


def _coerce_amount(value: Any) -> Decimal:
    # Blank input coerces to zero and is then rejected by the positivity check
    if value is None or (isinstance(value, str) and not value.strip()):
        return Decimal(0)
    if isinstance(value, bool):
        raise PydanticCustomError("amount_invalid", AMOUNT_MESSAGE)
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise PydanticCustomError("amount_invalid", AMOUNT_MESSAGE)
    if not amount.is_finite():
        raise PydanticCustomError("amount_invalid", AMOUNT_MESSAGE)
    return amount


def _check_positive(value: Decimal) -> Decimal:
    # Checked in whole cents, as stored
    if value <= 0 or value >= MAX_AMOUNT or to_cents(value) <= 0:
        raise PydanticCustomError("amount_not_positive", AMOUNT_MESSAGE)
    return value


def _check_status(value: Any) -> str:
    if value not in INVOICE_STATUSES:
        raise PydanticCustomError("status_invalid", STATUS_MESSAGE)
    return value


CustomerId = Annotated[str, BeforeValidator(_check_customer_id)]
Amount = Annotated[Decimal, BeforeValidator(_coerce_amount), AfterValidator(_check_positive)]
Status = Annotated[InvoiceStatus, BeforeValidator(_check_status)]


class InvoiceForm(BaseModel):
    """
    Fields submitted by the create and edit invoice forms.

    ``id`` and ``date`` are assigned by the system and never read from
    the form; any other extra form keys are ignored.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    customer_id: CustomerId = Field(
        None, alias="customerId", validate_default=True, description="Selected customer"
    )
    amount: Amount = Field(None, validate_default=True, description="Amount in dollars")
    status: Status = Field(None, validate_default=True, description="pending or paid")


class CustomerField(BaseModel):
    """Customer option for the invoice form select."""
    id: str
    name: str


class InvoiceRow(BaseModel):
    """Invoice as shown in the dashboard listing."""
    id: str
    customer_id: str
    name: str
    email: str
    image_url: Optional[str] = None
    amount: Decimal = Field(..., description="Amount in dollars")
    status: InvoiceStatus
    date: str


class InvoiceEditView(BaseModel):
    """Invoice payload used to pre-fill the edit form."""
    id: str
    customer_id: str
    amount: Decimal = Field(..., description="Amount in dollars")
    status: InvoiceStatus

    class Config:
        json_schema_extra = {
            "example": {
                "id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
                "customer_id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
                "amount": "157.95",
                "status": "pending",
            }
        }


class InvoiceListResponse(BaseModel):
    """Response for the dashboard invoice listing."""
    items: list[InvoiceRow] = Field(..., description="Invoices, newest first")
    total: int = Field(..., description="Number of invoices returned")
    query: str = Field(default="", description="Filter applied to the listing")


class InvoiceFormContext(BaseModel):
    """Data needed to render the create or edit form."""
    customers: list[CustomerField]
    invoice: Optional[InvoiceEditView] = None
