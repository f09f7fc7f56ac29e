"""Tests for the page cache."""
from invoice_admin.services.page_cache import PageCache


def test_get_or_render_caches(tmp_path):
    """Test render runs once per key."""
    cache = PageCache(tmp_path / "cache")
    calls = []

    def render():
        calls.append(1)
        return {"total": len(calls)}

    assert cache.get_or_render("/dashboard/invoices", render) == {"total": 1}
    assert cache.get_or_render("/dashboard/invoices", render) == {"total": 1}
    assert len(calls) == 1
    cache.close()


def test_revalidate_path_drops_all_variants(page_cache):
    """Test revalidation removes every variant of a path and nothing else."""
    page_cache.get_or_render("/dashboard/invoices", lambda: "all")
    page_cache.get_or_render("/dashboard/invoices", lambda: "paid", variant="paid")
    page_cache.get_or_render("/dashboard/customers", lambda: "customers")

    removed = page_cache.revalidate_path("/dashboard/invoices")

    assert removed == 2
    assert page_cache.get_or_render("/dashboard/invoices", lambda: "fresh") == "fresh"
    assert page_cache.get_or_render("/dashboard/invoices", lambda: "fresh", variant="paid") == "fresh"
    assert page_cache.get_or_render("/dashboard/customers", lambda: "fresh") == "customers"


def test_revalidate_unknown_path(page_cache):
    assert page_cache.revalidate_path("/nothing") == 0
