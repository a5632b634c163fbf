import math
from fastapi import Query
from sqlalchemy.orm import Query as SAQuery

MAX_LIMIT = 100


class PageParams:
    def __init__(self, page: int, limit: int):
        self.page = page
        self.limit = limit


def page_params(default_limit: int = 10):
    """Build a dependency reading ``page``/``limit`` from the query string.

    Bad values (``page=abc``, ``limit=0``) fail validation instead of being
    coerced, so the request ends with a 400.
    """
    def dependency(
        page: int = Query(1, ge=1, description="Page number"),
        limit: int = Query(default_limit, ge=1, le=MAX_LIMIT, description="Items per page"),
    ) -> PageParams:
        return PageParams(page, limit)

    return dependency


def pagination_meta(total: int, page: int, limit: int) -> dict:
    return {
        "total": total,
        "total_pages": math.ceil(total / limit) if limit else 0,
        "current_page": page,
        "limit": limit,
    }


def paginate(query: SAQuery, page: int, limit: int) -> dict:
    total = query.order_by(None).count()
    rows = query.offset((page - 1) * limit).limit(limit).all()
    return {"data": rows, "pagination": pagination_meta(total, page, limit)}
