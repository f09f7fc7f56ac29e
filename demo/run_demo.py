"""
Demo script for the Invoice Admin actions.

Seeds the configured database with an admin user and a few customers,
then walks through the form actions:
- sign in with the demo credentials
- create an invoice, then a rejected submission
- edit and delete the invoice
- read the cached listing back

Run with: python -m demo.run_demo
"""
import asyncio

from invoice_admin.actions import authenticate, create_invoice, delete_invoice, update_invoice
from invoice_admin.auth import hash_password
from invoice_admin.config.settings import settings
from invoice_admin.db.models import Customer, Invoice, User
from invoice_admin.db.queries import fetch_invoices
from invoice_admin.db.session import get_db_context, init_db
from invoice_admin.schemas.actions import ActionState
from invoice_admin.schemas.invoice import InvoiceListResponse
from invoice_admin.services.page_cache import get_page_cache

DEMO_EMAIL = "user@nextmail.com"
DEMO_PASSWORD = "123456"

CUSTOMERS = [
    {"name": "Delba de Oliveira", "email": "delba@oliveira.com"},
    {"name": "Lee Robinson", "email": "lee@robinson.com"},
    {"name": "Michael Novotny", "email": "michael@novotny.com"},
]


def print_header(title: str):
    """Print section header."""
    print("\n" + "=" * 60)
    print(f" {title}")
    print("=" * 60)


def seed(db) -> list[Customer]:
    """Insert the demo user and customers if they are missing."""
    if not db.query(User).filter(User.email == DEMO_EMAIL).first():
        db.add(User(name="User", email=DEMO_EMAIL, password=hash_password(DEMO_PASSWORD)))

    customers = []
    for data in CUSTOMERS:
        customer = db.query(Customer).filter(Customer.email == data["email"]).first()
        if not customer:
            customer = Customer(**data)
            db.add(customer)
        customers.append(customer)

    db.commit()
    return customers


def print_listing(db):
    """Print the invoice listing via the page cache."""
    def render() -> InvoiceListResponse:
        items = fetch_invoices(db)
        return InvoiceListResponse(items=items, total=len(items))

    listing = get_page_cache().get_or_render(settings.INVOICES_PATH, render)
    for row in listing.items:
        print(f"   {row.date}  {row.name:<20} ${row.amount:>10}  {row.status}")
    if not listing.items:
        print("   (no invoices)")


async def main():
    init_db()

    with get_db_context() as db:
        print_header("Seeding")
        customers = seed(db)
        print(f"   {len(customers)} customers, login {DEMO_EMAIL} / {DEMO_PASSWORD}")

        print_header("Sign in")
        session: dict = {}
        message = await authenticate(None, {"email": DEMO_EMAIL, "password": "wrong-password"}, db, session)
        print(f"   Wrong password -> {message}")
        message = await authenticate(None, {"email": DEMO_EMAIL, "password": DEMO_PASSWORD}, db, session)
        print(f"   Correct password -> {message or 'signed in as ' + session['user']['email']}")

        print_header("Create")
        result = await create_invoice(
            ActionState(),
            {"customerId": customers[0].id, "amount": "157.95", "status": "pending"},
            db,
        )
        print(f"   Valid form -> {result.kind} {getattr(result, 'path', '')}")
        result = await create_invoice(ActionState(), {"amount": "0", "status": "overdue"}, db)
        print(f"   Invalid form -> {result.state.message}")
        for field, errors in result.state.errors.items():
            print(f"     {field}: {', '.join(errors)}")
        print_listing(db)

        print_header("Edit")
        invoice = db.query(Invoice).filter(Invoice.customer_id == customers[0].id).first()
        result = await update_invoice(
            invoice.id,
            ActionState(),
            {"customerId": customers[1].id, "amount": "200", "status": "paid"},
            db,
        )
        print(f"   {invoice.id} -> {result.kind}")
        print_listing(db)

        print_header("Delete")
        state = await delete_invoice(invoice.id, db)
        print(f"   {invoice.id} -> {state.message}")
        print_listing(db)


if __name__ == "__main__":
    asyncio.run(main())
