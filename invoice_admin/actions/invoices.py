"""Form actions that create, update and delete invoices.

Each action validates the submitted form, runs a single statement against
the invoices table and invalidates the cached invoice listing. Failures come
back as a ``Rendered`` state for the form; create and update hand back a
``Redirected`` result on success.
"""
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from sqlalchemy import delete, insert, update
from sqlalchemy.orm import Session

from ..config.settings import settings
from ..db.models import Invoice
from ..schemas.actions import ActionResult, ActionState, ErrorKind, Redirected, Rendered
from ..services.page_cache import revalidate_path
from ..utils.logger import get_logger
from ..utils.money import to_cents
from ..utils.validators import validate_invoice_form

logger = get_logger("actions.invoices")


def _today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def _invalid(field_errors: dict[str, list[str]], message: str) -> Rendered:
    return Rendered(state=ActionState(
        errors=field_errors,
        message=message,
        error=ErrorKind.VALIDATION,
    ))


def _storage_failure(message: str) -> Rendered:
    return Rendered(state=ActionState(message=message, error=ErrorKind.STORAGE))


async def create_invoice(
    prev_state: Optional[ActionState],
    form_data: Mapping[str, Any],
    db: Session,
) -> ActionResult:
    """
    Create an invoice from the submitted form.

    Args:
        prev_state: State from the previous submission (unused)
        form_data: Raw form fields
        db: Database session

    Returns:
        Redirected to the invoice listing, or Rendered with errors
    """
    validated = validate_invoice_form(form_data)
    if not validated.success:
        return _invalid(validated.field_errors, "Missing Fields. Failed to Create Invoice.")

    fields = validated.data
    amount_in_cents = to_cents(fields.amount)
    date = _today()

    try:
        db.execute(
            insert(Invoice).values(
                customer_id=fields.customer_id,
                amount=amount_in_cents,
                status=fields.status,
                date=date,
            )
        )
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Database error creating invoice: {e}", exc_info=True)
        return _storage_failure("Database Error: Failed to Create Invoice.")

    logger.info(
        "Invoice created",
        extra={"extra": {"customer_id": fields.customer_id, "amount": amount_in_cents}}
    )
    revalidate_path(settings.INVOICES_PATH)
    return Redirected(path=settings.INVOICES_PATH)


async def update_invoice(
    invoice_id: str,
    prev_state: Optional[ActionState],
    form_data: Mapping[str, Any],
    db: Session,
) -> ActionResult:
    """
    Update customer, amount and status of an existing invoice.

    The invoice date is left untouched.

    Args:
        invoice_id: Invoice to update
        prev_state: State from the previous submission (unused)
        form_data: Raw form fields
        db: Database session

    Returns:
        Redirected to the invoice listing, or Rendered with errors
    """
    validated = validate_invoice_form(form_data)
    if not validated.success:
        return _invalid(validated.field_errors, "Missing Fields. Failed to Update Invoice.")

    fields = validated.data
    amount_in_cents = to_cents(fields.amount)

    try:
        db.execute(
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(
                customer_id=fields.customer_id,
                amount=amount_in_cents,
                status=fields.status,
            )
        )
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Database error updating invoice {invoice_id}: {e}", exc_info=True)
        return _storage_failure("Database Error: Failed to Update Invoice.")

    logger.info(
        "Invoice updated",
        extra={"extra": {"invoice_id": invoice_id, "amount": amount_in_cents}}
    )
    revalidate_path(settings.INVOICES_PATH)
    return Redirected(path=settings.INVOICES_PATH)


async def delete_invoice(invoice_id: str, db: Session) -> ActionState:
    """
    Delete an invoice. The caller stays on the current view.

    Deleting an id that no longer exists is not an error.

    Args:
        invoice_id: Invoice to delete
        db: Database session

    Returns:
        State carrying the outcome message
    """
    try:
        db.execute(delete(Invoice).where(Invoice.id == invoice_id))
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Database error deleting invoice {invoice_id}: {e}", exc_info=True)
        return ActionState(
            message="Database Error: Failed to Delete Invoice.",
            error=ErrorKind.STORAGE,
        )

    logger.info("Invoice deleted", extra={"extra": {"invoice_id": invoice_id}})
    revalidate_path(settings.INVOICES_PATH)
    return ActionState(message="Deleted Invoice.")
