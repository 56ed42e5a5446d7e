"""
Pagination Utilities.

Offset-based pagination shared by every listing query. The clamp is a
pure function so it can be tested without a database.
"""

from dataclasses import dataclass

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PaginationParams:
    """Resolved OFFSET/LIMIT pair for a query."""

    offset: int
    limit: int


def paginate(page: int, page_size: int) -> PaginationParams:
    """
    Clamp a page request and compute its offset.

    Args:
        page: 1-based page number; anything below 1 is treated as 1
        page_size: Requested rows per page; <= 0 becomes DEFAULT_PAGE_SIZE,
            anything above MAX_PAGE_SIZE becomes MAX_PAGE_SIZE

    Returns:
        PaginationParams with offset (page - 1) * page_size

    Usage:
        params = paginate(page=3, page_size=20)
        stmt = stmt.offset(params.offset).limit(params.limit)
    """
    if page < 1:
        page = 1

    if page_size > MAX_PAGE_SIZE:
        page_size = MAX_PAGE_SIZE
    elif page_size <= 0:
        page_size = DEFAULT_PAGE_SIZE

    return PaginationParams(offset=(page - 1) * page_size, limit=page_size)
