from sqlalchemy.orm import Session, selectinload

from storefront.core.exceptions import HttpException
from storefront.models import Bookmark, Product
from storefront.utils.pagination import paginate


def _find(db: Session, user_id: int, product_id: int):
    return (
        db.query(Bookmark)
        .filter(Bookmark.user_id == user_id, Bookmark.product_id == product_id)
        .first()
    )


def add_bookmark(db: Session, user_id: int, product_id: int) -> Bookmark:
    if db.get(Product, product_id) is None:
        raise HttpException(404, "Product does not exist.")
    if _find(db, user_id, product_id):
        raise HttpException(409, "This product is already bookmarked.")

    bookmark = Bookmark(user_id=user_id, product_id=product_id)
    db.add(bookmark)
    db.commit()
    db.refresh(bookmark)
    return bookmark


def remove_bookmark(db: Session, user_id: int, product_id: int) -> dict:
    bookmark = _find(db, user_id, product_id)
    if bookmark is None:
        raise HttpException(404, "No bookmark found for this product.")

    db.delete(bookmark)
    db.commit()
    return {"message": "Bookmark removed.", "product_id": product_id}


def get_my_bookmarks(db: Session, user_id: int, page: int, limit: int) -> dict:
    query = (
        db.query(Bookmark)
        .options(selectinload(Bookmark.product).selectinload(Product.images))
        .filter(Bookmark.user_id == user_id)
        .order_by(Bookmark.created_at.desc(), Bookmark.id.desc())
    )
    return paginate(query, page, limit)
