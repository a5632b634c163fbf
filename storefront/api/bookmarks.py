from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user
from storefront.db.session import get_db
from storefront.models import User
from storefront.schemas.bookmark import BookmarkCreateIn, BookmarkOut, BookmarkListItemOut, BookmarkRemovedOut
from storefront.schemas.common import MessageResponse, Page
from storefront.services import bookmark_service
from storefront.utils.pagination import PageParams, page_params

router = APIRouter()


@router.get("/", response_model=Page[BookmarkListItemOut])
def get_my_bookmarks(
    params: PageParams = Depends(page_params()),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return bookmark_service.get_my_bookmarks(db, user.id, params.page, params.limit)


@router.post("/", response_model=MessageResponse[BookmarkOut], status_code=status.HTTP_201_CREATED)
def add_bookmark(payload: BookmarkCreateIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    bookmark = bookmark_service.add_bookmark(db, user.id, payload.product_id)
    return {"message": "Bookmark added.", "data": bookmark}


@router.delete("/{product_id}", response_model=BookmarkRemovedOut)
def remove_bookmark(product_id: int = Path(..., ge=1), user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return bookmark_service.remove_bookmark(db, user.id, product_id)
