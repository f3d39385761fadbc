import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import PageRequest
from app.exceptions import ProductNotFound
from app.models import Product
from app.schemas import JsonApiResponse, ProductAttributes, ProductView, ResourceObject
from app.services import product_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/products", tags=["products"])

# 404s carry no body.
_NOT_FOUND = {404: {"description": "Product not found"}}


def to_resource(product: Product) -> ResourceObject:
    return ResourceObject(
        id=str(product.id),
        attributes=ProductView.model_validate(product),
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=JsonApiResponse,
    response_model_exclude_none=True,
)
async def create_product(data: ProductAttributes, db: AsyncSession = Depends(get_db)):
    product = await product_service.create_product(db, data)
    return JsonApiResponse(data=to_resource(product))


@router.get(
    "/{product_id}",
    response_model=JsonApiResponse,
    response_model_exclude_none=True,
    responses=_NOT_FOUND,
)
async def get_product(product_id: int, db: AsyncSession = Depends(get_db)):
    product = await product_service.get_product(db, product_id)
    if product is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return JsonApiResponse(data=to_resource(product))


@router.put(
    "/{product_id}",
    response_model=JsonApiResponse,
    response_model_exclude_none=True,
    responses=_NOT_FOUND,
)
async def update_product(
    product_id: int, data: ProductAttributes, db: AsyncSession = Depends(get_db)
):
    try:
        product = await product_service.update_product(db, product_id, data)
    except ProductNotFound as exc:
        logger.warning("%s", exc)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return JsonApiResponse(data=to_resource(product))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
async def delete_product(product_id: int, db: AsyncSession = Depends(get_db)):
    try:
        await product_service.delete_product(db, product_id)
    except ProductNotFound as exc:
        logger.warning("%s", exc)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=JsonApiResponse, response_model_exclude_none=True)
async def list_products(
    page_request: PageRequest = Depends(),
    db: AsyncSession = Depends(get_db),
):
    page = await product_service.list_products(db, page_request)
    return JsonApiResponse(dataList=[[to_resource(p) for p in page.items]])
