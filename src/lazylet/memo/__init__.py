from .cache import MemoCache, get_or_compute

__all__ = ["MemoCache", "get_or_compute"]
