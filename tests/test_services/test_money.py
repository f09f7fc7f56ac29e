"""Tests for dollar/cent conversion."""
from decimal import Decimal

from invoice_admin.utils.money import from_cents, to_cents


def test_to_cents():
    assert to_cents(Decimal("10.50")) == 1050
    assert to_cents(Decimal("20")) == 2000
    assert to_cents(Decimal("0.29")) == 29


def test_to_cents_rounds_fractional_cents():
    assert to_cents(Decimal("1.005")) == 101
    assert to_cents(Decimal("1.004")) == 100


def test_from_cents():
    assert from_cents(1050) == Decimal("10.50")
    assert from_cents(7) == Decimal("0.07")
