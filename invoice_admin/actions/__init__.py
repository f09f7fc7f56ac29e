"""Form actions bound to the dashboard and sign-in forms."""
from .invoices import create_invoice, update_invoice, delete_invoice
from .auth import authenticate

__all__ = ["create_invoice", "update_invoice", "delete_invoice", "authenticate"]
