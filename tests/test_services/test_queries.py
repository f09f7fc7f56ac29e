"""Tests for dashboard read queries."""
from decimal import Decimal

from invoice_admin.db.models import Invoice
from invoice_admin.db.queries import fetch_customers, fetch_invoice_by_id, fetch_invoices


def test_fetch_invoices_newest_first(db, customers):
    db.add_all([
        Invoice(id="old", customer_id="c1", amount=100, status="paid", date="2023-06-01"),
        Invoice(id="new", customer_id="c2", amount=25050, status="pending", date="2024-03-01"),
    ])
    db.commit()

    rows = fetch_invoices(db)

    assert [row.id for row in rows] == ["new", "old"]
    assert rows[0].name == "Lee Robinson"
    assert rows[0].amount == Decimal("250.50")


def test_fetch_invoices_filters(db, customers):
    db.add_all([
        Invoice(id="a", customer_id="c1", amount=100, status="paid", date="2024-01-01"),
        Invoice(id="b", customer_id="c2", amount=100, status="pending", date="2024-01-02"),
    ])
    db.commit()

    assert [row.id for row in fetch_invoices(db, "DELBA")] == ["a"]
    assert [row.id for row in fetch_invoices(db, "robinson.com")] == ["b"]
    assert [row.id for row in fetch_invoices(db, "pend")] == ["b"]
    assert fetch_invoices(db, "nobody") == []


def test_fetch_invoice_by_id(db, invoice):
    view = fetch_invoice_by_id(db, "inv1")

    assert view.customer_id == "c1"
    assert view.amount == Decimal("15.00")
    assert view.status == "pending"
    assert fetch_invoice_by_id(db, "missing") is None


def test_fetch_customers_sorted(db, customers):
    assert [c.name for c in fetch_customers(db)] == ["Delba de Oliveira", "Lee Robinson"]
