"""Read queries backing the dashboard views."""
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from .models import Customer, Invoice
from ..schemas.invoice import CustomerField, InvoiceEditView, InvoiceRow
from ..utils.money import from_cents


def fetch_invoices(db: Session, query: str = "") -> list[InvoiceRow]:
    """
    List invoices with their customer, newest first.

    Args:
        db: Database session
        query: Optional case-insensitive filter on customer name,
            customer email or status

    Returns:
        Invoice rows with amounts in dollars
    """
    q = db.query(Invoice, Customer).join(Customer, Invoice.customer_id == Customer.id)

    term = query.strip()
    if term:
        pattern = f"%{term}%"
        q = q.filter(or_(
            Customer.name.ilike(pattern),
            Customer.email.ilike(pattern),
            Invoice.status.ilike(pattern),
        ))

    rows = q.order_by(Invoice.date.desc(), Invoice.id).all()

    return [
        InvoiceRow(
            id=invoice.id,
            customer_id=customer.id,
            name=customer.name,
            email=customer.email,
            image_url=customer.image_url,
            amount=from_cents(invoice.amount),
            status=invoice.status,
            date=invoice.date,
        )
        for invoice, customer in rows
    ]


def fetch_invoice_by_id(db: Session, invoice_id: str) -> Optional[InvoiceEditView]:
    """
    Load one invoice for the edit form.

    Returns:
        Invoice with amount in dollars, or None if it doesn't exist
    """
    invoice = db.query(Invoice).filter(Invoice.id == invoice_id).first()
    if not invoice:
        return None

    return InvoiceEditView(
        id=invoice.id,
        customer_id=invoice.customer_id,
        amount=from_cents(invoice.amount),
        status=invoice.status,
    )


def fetch_customers(db: Session) -> list[CustomerField]:
    """Customers for the invoice form select, ordered by name."""
    customers = db.query(Customer).order_by(Customer.name).all()
    return [CustomerField(id=c.id, name=c.name) for c in customers]
