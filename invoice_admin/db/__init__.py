"""Database module for persistence and queries."""
from .session import SessionLocal, engine, get_db_context, get_db_session, init_db
from .models import Base, Customer, Invoice, User
from .queries import fetch_customers, fetch_invoice_by_id, fetch_invoices

__all__ = [
    "SessionLocal",
    "engine",
    "get_db_context",
    "get_db_session",
    "init_db",
    "Base",
    "Customer",
    "Invoice",
    "User",
    "fetch_customers",
    "fetch_invoice_by_id",
    "fetch_invoices",
]
