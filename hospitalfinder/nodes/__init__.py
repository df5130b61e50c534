"""Decision nodes for the hospital locator session."""

from .search_dispatcher_node import detect_search_mode

__all__ = ["detect_search_mode"]
