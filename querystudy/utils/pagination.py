"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides the page request/response models, the count-query short-circuit
shared by every paged query, and a generic ``paginate`` for entity queries.

Count short-circuit (identical totals to running the count query):
    1. 첫 페이지이고 조회 건수가 페이지 크기보다 작으면 total = 조회 건수
       (First page with fewer rows than the page size: total = rows fetched)
    2. 첫 페이지가 아니고, 조회 건수가 1 이상이며 페이지 크기보다 작으면
       total = offset + 조회 건수 (Later, non-empty, short page: last page)
    3. 그 외에는 count 쿼리 실행 (Otherwise run the count query)
"""

import math
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, ValidationError
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.config import settings
from querystudy.utils.exceptions import BadRequestError
from querystudy.utils.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class PageRequest(BaseModel):
    """페이지 요청 모델.

    Page request. ``page`` is 0-based.

    Attributes:
        page: 페이지 번호, 0부터 시작 (Page index, 0-based)
        size: 페이지 크기 (Page size, at least 1)
    """

    page: int = Field(0, ge=0)
    size: int = Field(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(cls, page: int, size: int) -> "PageRequest":
        """검증된 페이지 요청을 생성합니다.

        Build a validated page request.

        Raises:
            BadRequestError: 음수 페이지 또는 1 미만 크기
                             (Negative page index or size below 1)
        """
        try:
            return cls(page=page, size=size)
        except ValidationError as exc:
            raise BadRequestError(f"Invalid page request: page={page}, size={size}") from exc


class Page(BaseModel, Generic[T]):
    """페이지네이션 결과 모델.

    Pagination result model for typed responses.

    Attributes:
        items: 현재 페이지 항목 목록 (Items for the current page)
        total: 전체 항목 수 (Total count across all pages)
        page: 현재 페이지 번호 — 0부터 시작 (Current page index, 0-based)
        per_page: 페이지당 항목 수 (Items per page)
        pages: 전체 페이지 수 (Total pages, ceil(total/per_page))
    """

    items: list[T]
    total: int
    page: int
    per_page: int
    pages: int

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.pages


def total_pages(total: int, per_page: int) -> int:
    return math.ceil(total / per_page) if per_page else 0


async def resolve_total(
    fetched: int,
    page_request: PageRequest,
    count_fn: Callable[[], Awaitable[int]],
) -> int:
    """전체 개수를 계산합니다. 가능하면 count 쿼리를 생략합니다.

    Resolve the total element count, running ``count_fn`` only when the
    total cannot be derived from the offset and the number of fetched rows.

    Args:
        fetched: 현재 페이지 조회 건수 (Rows fetched for this page)
        page_request: 페이지 요청 (Page request)
        count_fn: count 쿼리 실행 함수 (Coroutine function running the count query)

    Returns:
        int: 전체 항목 수 (Total element count)
    """
    if page_request.offset == 0:
        if page_request.size > fetched:
            logger.debug("count query skipped: first page is short (%d rows)", fetched)
            return fetched
        return await count_fn()

    if fetched != 0 and page_request.size > fetched:
        logger.debug("count query skipped: last page at offset %d", page_request.offset)
        return page_request.offset + fetched

    return await count_fn()


async def build_page(
    items: Sequence[T],
    page_request: PageRequest,
    count_fn: Callable[[], Awaitable[int]],
) -> Page[T]:
    """조회된 항목으로 페이지를 구성합니다.

    Wrap already fetched items into a ``Page``, resolving the total with
    the count short-circuit.
    """
    total: int = await resolve_total(len(items), page_request, count_fn)
    return Page(
        items=list(items),
        total=total,
        page=page_request.page,
        per_page=page_request.size,
        pages=total_pages(total, page_request.size),
    )


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page_request: PageRequest,
) -> Page[Any]:
    """SQLAlchemy 엔티티 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy entity query.
    Fetches the page with OFFSET/LIMIT first, then counts via subquery only
    when the total cannot be derived.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리, 정렬 포함 (Ordered base query to paginate)
        page_request: 페이지 요청 (Page request)

    Returns:
        Page[Any]: 페이지 결과 (Page of entities)
    """
    # 페이지 항목 조회 — OFFSET/LIMIT 적용 (Fetch page items with offset/limit)
    result = await db.execute(query.offset(page_request.offset).limit(page_request.size))
    items: Sequence[Any] = result.scalars().all()

    async def count() -> int:
        # 전체 개수 조회 — 서브쿼리로 감싸서 COUNT 실행 (Count total via subquery)
        count_query = select(func.count()).select_from(query.order_by(None).subquery())
        return (await db.execute(count_query)).scalar() or 0

    return await build_page(items, page_request, count)
