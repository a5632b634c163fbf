from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.db.session import get_db
from storefront.schemas.category import CategoryNode, CategoryPageOut
from storefront.schemas.common import DataResponse
from storefront.services import category_service
from storefront.utils.pagination import PageParams, page_params

router = APIRouter()


@router.get("/", response_model=DataResponse[List[CategoryNode]])
def get_all_categories(db: Session = Depends(get_db)):
    return {"data": category_service.get_all_categories(db)}


@router.get("/{path}", response_model=DataResponse[CategoryPageOut])
def get_category_by_path(
    path: str,
    params: PageParams = Depends(page_params(default_limit=20)),
    db: Session = Depends(get_db),
):
    return {"data": category_service.get_category_by_path(db, path, params.page, params.limit)}
