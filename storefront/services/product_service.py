from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload, joinedload

from storefront.core.exceptions import HttpException
from storefront.models import Category, Product
from storefront.services.category_service import descendant_ids
from storefront.utils.pagination import paginate

PRODUCT_SORTS = {
    "latest": (Product.created_at.desc(), Product.id.desc()),
    "oldest": (Product.created_at.asc(), Product.id.asc()),
    "price_asc": (Product.price.asc(), Product.id.asc()),
    "price_desc": (Product.price.desc(), Product.id.desc()),
}


def escape_like(value: str) -> str:
    """Make % and _ match literally in a LIKE pattern (escape char is a backslash)."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def list_products(
    db: Session,
    page: int,
    limit: int,
    category: Optional[str] = None,
    keyword: Optional[str] = None,
    sort: str = "latest",
) -> dict:
    query = db.query(Product).options(selectinload(Product.images))

    if category:
        found = db.query(Category).filter(Category.path == category).first()
        if found is None:
            raise HttpException(404, "Category does not exist.")
        query = query.filter(Product.category_id.in_(descendant_ids(db, found.id)))

    if keyword:
        pattern = f"%{escape_like(keyword.strip())}%"
        query = query.filter(
            or_(
                Product.name.ilike(pattern, escape="\\"),
                Product.summary.ilike(pattern, escape="\\"),
                Product.material.ilike(pattern, escape="\\"),
            )
        )

    query = query.order_by(*PRODUCT_SORTS.get(sort, PRODUCT_SORTS["latest"]))
    return paginate(query, page, limit)


def get_product_by_id(db: Session, product_id: int) -> Product:
    product = (
        db.query(Product)
        .options(selectinload(Product.images), joinedload(Product.category))
        .filter(Product.id == product_id)
        .first()
    )
    if product is None:
        raise HttpException(404, "Product does not exist.")
    return product
