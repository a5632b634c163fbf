from sqlalchemy.orm import Session, selectinload, joinedload

from storefront.core.exceptions import HttpException
from storefront.models import Order, OrderItem, Review, ReviewImage
from storefront.models.enums import OrderStatus
from storefront.schemas.review import ReviewCreateIn, ReviewUpdateIn
from storefront.utils.pagination import paginate

REVIEW_SORTS = {
    "latest": (Review.created_at.desc(), Review.id.desc()),
    "rating_desc": (Review.rating.desc(), Review.created_at.desc(), Review.id.desc()),
    "rating_asc": (Review.rating.asc(), Review.created_at.desc(), Review.id.desc()),
}


def order_by_for(sort: str):
    return REVIEW_SORTS.get(sort, REVIEW_SORTS["latest"])


def has_delivered_purchase(db: Session, user_id: int, product_id: int) -> bool:
    return (
        db.query(Order.id)
        .join(OrderItem, OrderItem.order_id == Order.id)
        .filter(
            Order.user_id == user_id,
            Order.status == OrderStatus.DELIVERED,
            OrderItem.product_id == product_id,
        )
        .first()
        is not None
    )


def create_review(db: Session, user_id: int, data: ReviewCreateIn) -> Review:
    existing = (
        db.query(Review)
        .filter(Review.user_id == user_id, Review.product_id == data.product_id)
        .first()
    )
    if existing:
        raise HttpException(409, "You have already reviewed this product.")

    if not has_delivered_purchase(db, user_id, data.product_id):
        raise HttpException(403, "Only products from delivered orders can be reviewed.")

    review = Review(
        user_id=user_id,
        product_id=data.product_id,
        rating=data.rating,
        content=data.content,
        images=[ReviewImage(url=url) for url in data.image_urls or []],
    )
    try:
        db.add(review)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(review)
    return review


def get_product_reviews(db: Session, product_id: int, sort: str, page: int, limit: int) -> dict:
    query = (
        db.query(Review)
        .options(joinedload(Review.user), selectinload(Review.images))
        .filter(Review.product_id == product_id)
        .order_by(*order_by_for(sort))
    )
    return paginate(query, page, limit)


def get_my_reviews(db: Session, user_id: int, sort: str, page: int, limit: int) -> dict:
    query = (
        db.query(Review)
        .options(joinedload(Review.product), selectinload(Review.images))
        .filter(Review.user_id == user_id)
        .order_by(*order_by_for(sort))
    )
    return paginate(query, page, limit)


def _get_own_review(db: Session, user_id: int, review_id: int, action: str) -> Review:
    review = db.get(Review, review_id)
    if review is None or review.user_id != user_id:
        raise HttpException(403, f"You do not have permission to {action} this review.")
    return review


def update_review(db: Session, user_id: int, review_id: int, data: ReviewUpdateIn) -> Review:
    review = _get_own_review(db, user_id, review_id, "edit")

    try:
        if data.image_urls is not None:
            # full replacement of the image list
            review.images = [ReviewImage(url=url) for url in data.image_urls]
        if data.rating is not None:
            review.rating = data.rating
        if data.content is not None:
            review.content = data.content
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(review)
    return review


def delete_review(db: Session, user_id: int, review_id: int) -> dict:
    review = _get_own_review(db, user_id, review_id, "delete")
    db.delete(review)
    db.commit()
    return {"message": "Review deleted.", "deleted_id": review_id}
