"""
Startup script for the Invoice Admin API.

Checks that the port is free, then runs the API under uvicorn.

Usage:
    python run_server.py
"""
import socket
import sys

import uvicorn

from invoice_admin.config.settings import settings


def check_port(port: int) -> bool:
    """Check if a port is available."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        return s.connect_ex(('localhost', port)) != 0


def main():
    """Start the API server."""
    print("=" * 60)
    print(f"{settings.APP_NAME} - Server Startup")
    print("=" * 60)

    if not check_port(settings.API_PORT):
        print(f"ERROR: Port {settings.API_PORT} is already in use!")
        print("Please free up the port and try again.")
        return 1

    print("\nEndpoints:")
    print(f"  • Login:     http://localhost:{settings.API_PORT}{settings.LOGIN_PATH}")
    print(f"  • Invoices:  http://localhost:{settings.API_PORT}{settings.INVOICES_PATH}")
    print(f"  • API Docs:  http://localhost:{settings.API_PORT}/docs")

    uvicorn.run(
        "invoice_admin.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
