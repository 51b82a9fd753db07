"""
Pagination - Shared count + page fetch for list endpoints

Every listing in the service follows the same contract:

    skip = (page - 1) * limit, take = limit
    total = count of the full filtered set
    total_pages = ceil(total / limit)   (0 when total is 0)

Usage:
    page = await paginate(session, Application, clauses, order_by, page=2, limit=10)
    page.items, page.total, page.total_pages
"""

import math
from dataclasses import dataclass, field
from typing import Any, Generic, List, Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a filtered, ordered result set."""

    items: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


async def paginate(
    session: AsyncSession,
    entity: Any,
    clauses: Sequence[Any],
    order_by: Sequence[Any],
    page: int,
    limit: int,
) -> Page:
    """
    Count and fetch one page of ``entity`` rows restricted by ``clauses``.

    Args:
        session: Database session
        entity: Mapped class to list
        clauses: WHERE clauses (all must hold)
        order_by: ORDER BY expressions, most significant first
        page: 1-based page number (validated upstream)
        limit: Page size (validated upstream)

    Returns:
        Page with the fetched items and the unpaginated total
    """
    query = select(entity)
    count_query = select(func.count()).select_from(entity)
    if clauses:
        query = query.where(*clauses)
        count_query = count_query.where(*clauses)

    total_result = await session.execute(count_query)
    total = total_result.scalar() or 0

    query = (
        query.order_by(*order_by)
        .offset((page - 1) * limit)
        .limit(limit)
        .execution_options(populate_existing=True)
    )
    result = await session.execute(query)

    return Page(items=list(result.scalars().all()), total=total, page=page, limit=limit)
