"""API module for FastAPI routes."""
from .routes import auth, health, invoices

__all__ = ["auth", "health", "invoices"]
