from datetime import date
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload, joinedload

from storefront.core.exceptions import HttpException
from storefront.models import Review, User
from storefront.services.admin_order_service import date_range_filters
from storefront.utils.pagination import paginate


def get_all_reviews(
    db: Session,
    page: int,
    limit: int,
    search: Optional[str] = None,
    product_id: Optional[int] = None,
    user_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> dict:
    query = db.query(Review).options(
        joinedload(Review.user), joinedload(Review.product), selectinload(Review.images)
    )

    if search:
        # review content or author name
        query = query.join(Review.user).filter(
            or_(Review.content.contains(search, autoescape=True), User.name.contains(search, autoescape=True))
        )
    if product_id:
        query = query.filter(Review.product_id == product_id)
    if user_id:
        query = query.filter(Review.user_id == user_id)
    for f in date_range_filters(Review.created_at, start_date, end_date):
        query = query.filter(f)

    query = query.order_by(Review.created_at.desc(), Review.id.desc())
    return paginate(query, page, limit)


def delete_review(db: Session, review_id: int) -> dict:
    review = db.get(Review, review_id)
    if review is None:
        raise HttpException(404, "Review to delete was not found.")

    db.delete(review)
    db.commit()
    return {"message": "Review deleted by an administrator.", "deleted_id": review_id}
