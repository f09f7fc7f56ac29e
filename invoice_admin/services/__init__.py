"""Services module."""
from .page_cache import PageCache, get_page_cache, set_page_cache, revalidate_path

__all__ = [
    "PageCache",
    "get_page_cache",
    "set_page_cache",
    "revalidate_path",
]
