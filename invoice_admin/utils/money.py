"""Currency conversion helpers.

Amounts enter the system as decimal dollars and are stored as integer cents.
"""
from decimal import Decimal, ROUND_HALF_UP

CENTS_PER_DOLLAR = 100


def to_cents(amount: Decimal) -> int:
    """
    Convert a dollar amount to integer cents.

    Fractions of a cent are rounded half-up.

    Args:
        amount: Dollar amount

    Returns:
        Amount in cents
    """
    cents = Decimal(amount) * CENTS_PER_DOLLAR
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    """Convert stored cents back to a two-place dollar amount."""
    return (Decimal(cents) / CENTS_PER_DOLLAR).quantize(Decimal("0.01"))
