"""Page cache for rendered dashboard views.

Views are cached under a key built from their route path and parameters
and tagged with the path, so a mutation can drop every cached variant
of a route at once with ``revalidate_path``.
"""
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import diskcache

from ..config.settings import settings
from ..utils.logger import get_logger

T = TypeVar("T")

logger = get_logger("page_cache")


class PageCache:
    """
    Disk-backed cache of rendered pages keyed by route.

    Thread-safe and process-safe through diskcache.
    """

    def __init__(self, cache_dir: str | Path, ttl: Optional[int] = None) -> None:
        """
        Initialize the page cache.

        Args:
            cache_dir: Directory for cache files, created if missing
            ttl: Seconds before an entry expires. None means never.
        """
        self.cache_dir = Path(cache_dir)
        self.ttl = ttl
        self._cache = diskcache.Cache(str(self.cache_dir))

    @staticmethod
    def _key(path: str, variant: str) -> str:
        return f"{path}?{variant}" if variant else path

    def get_or_render(self, path: str, render: Callable[[], T], variant: str = "") -> T:
        """
        Return the cached page for ``path`` or render and store it.

        Args:
            path: Route path, also used as the invalidation tag
            render: Builds the page on a miss (no arguments)
            variant: Distinguishes cached variants of the same route,
                e.g. an encoded query string

        Returns:
            The cached or freshly rendered value
        """
        key = self._key(path, variant)
        cached = self._cache.get(key, default=None)
        if cached is not None:
            return cached

        value = render()
        self._cache.set(key, value, expire=self.ttl, tag=path)
        return value

    def revalidate_path(self, path: str) -> int:
        """
        Drop every cached variant of ``path``.

        Returns:
            Number of entries removed
        """
        removed = self._cache.evict(path)
        logger.info(
            f"Revalidated {path}",
            extra={"extra": {"path": path, "removed": removed}}
        )
        return removed

    def clear(self) -> None:
        """Remove all cached pages."""
        self._cache.clear()

    def close(self) -> None:
        """Close the cache and release resources."""
        self._cache.close()


_page_cache: Optional[PageCache] = None


def get_page_cache() -> PageCache:
    """Get the process-wide page cache (created on first use)."""
    global _page_cache

    if _page_cache is None:
        _page_cache = PageCache(settings.PAGE_CACHE_DIR, ttl=settings.PAGE_CACHE_TTL)
    return _page_cache


def set_page_cache(cache: Optional[PageCache]) -> None:
    """Replace the process-wide page cache (used by tests)."""
    global _page_cache
    _page_cache = cache


def revalidate_path(path: str) -> int:
    """Invalidate cached views of ``path`` in the process-wide cache."""
    return get_page_cache().revalidate_path(path)
