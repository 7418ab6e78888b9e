"""Paging — offset arithmetic for the two post listing styles.

Invariants:
    - Fixed paging is zero-based with PAGE_SIZE rows per page
    - Search paging is one-based with a caller-chosen size capped at MAX_PAGE_SIZE
    - Offsets are never negative
"""

PAGE_SIZE = 5
MAX_PAGE_SIZE = 2000


def fixed_page_offset(page: int) -> int:
    """Offset for a zero-based page of PAGE_SIZE rows. Negative pages read as 0."""
    return max(page, 0) * PAGE_SIZE


def search_page_limit(size: int) -> int:
    return min(max(size, 0), MAX_PAGE_SIZE)


def search_page_offset(page: int, size: int) -> int:
    """Offset for a one-based page. Pages below 1 read as 1."""
    return (max(page, 1) - 1) * search_page_limit(size)
